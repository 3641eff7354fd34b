"""Configuration for analemma computations."""
import math
import warnings
from dataclasses import dataclass, field, replace as _replace

import numpy as np


class InvalidParameterError(ValueError):
    """Raised when an orbital or observer parameter is out of range."""


class ApproximationWarning(UserWarning):
    """Issued when a parameter leaves the range where the series hold up."""


# Beyond this the equation-of-centre series drifts from Kepler's equation
SERIES_ECCENTRICITY_LIMIT = 0.3


def _finite(name, value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")
    return value


def check_finite(name, value):
    """Validate a day or hour (scalar or array) and return it as float(s)."""
    try:
        values = np.asarray(value, dtype=float)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not np.all(np.isfinite(values)):
        raise InvalidParameterError(f"{name} must be finite, got {value}")
    return float(values) if values.ndim == 0 else values


def check_latitude(latitude):
    """Validate an observer latitude [deg] and return it as a float."""
    latitude = _finite("latitude", latitude)
    if not -90.0 <= latitude <= 90.0:
        raise InvalidParameterError(
            f"latitude={latitude} must lie in [-90, 90] degrees"
        )
    return latitude


@dataclass(frozen=True)
class OrbitalParameters:
    """Orbital elements that shape the analemma.

    Instances are immutable; use :meth:`replace` to derive a new set.
    """

    tilt: float = 23.44  # Axial tilt (obliquity) [deg]
    eccentricity: float = 0.0167  # Orbital eccentricity [unitless]
    perihelion_day: float = 3  # Day of year of perihelion (Jan 3)

    def __post_init__(self):
        tilt = _finite("tilt", self.tilt)
        ecc = _finite("eccentricity", self.eccentricity)
        peri = _finite("perihelion_day", self.perihelion_day)
        if not 0.0 <= tilt <= 90.0:
            raise InvalidParameterError(f"tilt={tilt} must lie in [0, 90] degrees")
        if not 0.0 <= ecc < 1.0:
            raise InvalidParameterError(
                f"eccentricity={ecc} must satisfy 0 <= e < 1"
            )
        if not 1.0 <= peri <= 365.0:
            raise InvalidParameterError(
                f"perihelion_day={peri} must lie in [1, 365]"
            )
        if ecc > SERIES_ECCENTRICITY_LIMIT:
            warnings.warn(
                f"eccentricity={ecc} exceeds {SERIES_ECCENTRICITY_LIMIT}; "
                "the equation-of-centre series is only approximate here.",
                ApproximationWarning,
                stacklevel=3,
            )
        object.__setattr__(self, "tilt", tilt)
        object.__setattr__(self, "eccentricity", ecc)
        object.__setattr__(self, "perihelion_day", peri)

    def replace(self, **changes):
        "Return a validated copy with `changes` applied."
        return _replace(self, **changes)


@dataclass(frozen=True)
class Configurator:
    """Configuration for an engine: orbit, observer and time conventions.

    ``apparent_time`` selects how clock hours are read. When True (the
    default) a clock hour is local mean solar time and the Sun is placed
    at the apparent hour angle, i.e. shifted by the Equation of Time.
    When False the clock hour is used directly as apparent solar time.

    ``show_eccentricity`` and ``show_obliquity`` mask the two Equation of
    Time components in the total (and therefore in the apparent-time
    shift); the raw components are always available.
    """

    params: OrbitalParameters = field(default_factory=OrbitalParameters)
    latitude: float = 40.0  # Observer latitude [deg], north positive
    apparent_time: bool = True
    show_eccentricity: bool = True
    show_obliquity: bool = True

    def __post_init__(self):
        if not isinstance(self.params, OrbitalParameters):
            raise InvalidParameterError(
                f"params must be OrbitalParameters, got {type(self.params).__name__}"
            )
        object.__setattr__(self, "latitude", check_latitude(self.latitude))

    @property
    def tilt(self):
        return self.params.tilt

    @property
    def eccentricity(self):
        return self.params.eccentricity

    @property
    def perihelion_day(self):
        return self.params.perihelion_day

    def replace(self, **changes):
        """Return a new configuration with `changes` applied.

        Orbital fields (``tilt``, ``eccentricity``, ``perihelion_day``) may
        be given directly alongside the configurator's own fields.
        """
        orbit_keys = {"tilt", "eccentricity", "perihelion_day"}
        orbit_changes = {k: changes.pop(k) for k in list(changes) if k in orbit_keys}
        if orbit_changes:
            changes["params"] = changes.get("params", self.params).replace(
                **orbit_changes
            )
        return _replace(self, **changes)

    @classmethod
    def from_dict(cls, data):
        """Build a configuration from a nested mapping.

        Parameters
        ----------
        data : dict
            Mapping with optional sections ``orbit``, ``observer``,
            ``time`` and ``equation_of_time``.

        Returns
        -------
        config : Configurator
        """
        data = data or {}
        if not isinstance(data, dict):
            raise InvalidParameterError("configuration must be a mapping")

        # Map section keys to keyword arguments
        field_map = {
            "orbit": {
                "tilt": "tilt",
                "obliquity": "tilt",
                "eccentricity": "eccentricity",
                "perihelion_day": "perihelion_day",
            },
            "observer": {"latitude": "latitude"},
            "time": {"apparent_time": "apparent_time"},
            "equation_of_time": {
                "eccentricity": "show_eccentricity",
                "obliquity": "show_obliquity",
            },
        }

        # Deprecated keys from the browser version of the simulation
        deprecated_keys = {"perihelionDay": "perihelion_day"}

        orbit_kwargs = {}
        kwargs = {}
        for section, keys in field_map.items():
            values = data.get(section) or {}
            if not isinstance(values, dict):
                raise InvalidParameterError(f"section '{section}' must be a mapping")
            for key, value in values.items():
                if key in deprecated_keys and section == "orbit":
                    warnings.warn(
                        f"Configuration key '{key}' is deprecated. "
                        f"Use '{deprecated_keys[key]}' instead.",
                        DeprecationWarning,
                        stacklevel=2,
                    )
                    key = deprecated_keys[key]
                if key not in keys:
                    raise InvalidParameterError(
                        f"Unknown key '{key}' in section '{section}'"
                    )
                if section == "orbit":
                    orbit_kwargs[keys[key]] = value
                else:
                    kwargs[keys[key]] = value

        for name in ("apparent_time", "show_eccentricity", "show_obliquity"):
            if name in kwargs and not isinstance(kwargs[name], bool):
                raise InvalidParameterError(f"{name} must be true or false")

        return cls(params=OrbitalParameters(**orbit_kwargs), **kwargs)

    @classmethod
    def from_yaml(cls, path):
        """Load configuration from a YAML file.

        Parameters
        ----------
        path : str or Path
            Path to the YAML configuration file.

        Returns
        -------
        config : Configurator
            Configurator instance with values from the YAML file.
        data : dict
            Full parsed YAML data (includes run settings such as ``run.day``).
        """
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise InvalidParameterError(f"{path}: top level must be a mapping")

        known = {"orbit", "observer", "time", "equation_of_time"}
        return cls.from_dict({k: v for k, v in data.items() if k in known}), data
