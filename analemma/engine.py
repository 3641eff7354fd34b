"""
Solar position engine: the public query surface of analemma
"""
import dataclasses

import numpy as np

from . import orbits, sun_events, traces
from .config import Configurator, check_finite
from .eot import eot_components, eot_extremes
from .horizontal import equatorial_to_horizontal, hour_angle


# Engines answer queries for one immutable configuration
class SolarEngine(object):
    """Query the Sun's position for a configured orbit and observer.

    All angles crossing this boundary are in degrees and all times in
    hours or minutes. The engine keeps no state besides its configuration;
    use :meth:`replace` to obtain an engine with different parameters.

    Parameters
    ----------
    config : Configurator, optional
        Orbit, observer and time conventions. Defaults to Earth at 40 N.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else Configurator()

    def __repr__(self):
        p = self.config.params
        return (
            f"SolarEngine(tilt={p.tilt}, eccentricity={p.eccentricity}, "
            f"perihelion_day={p.perihelion_day}, latitude={self.config.latitude})"
        )

    @property
    def params(self):
        return self.config.params

    @property
    def latitude(self):
        return self.config.latitude

    def replace(self, **changes):
        "Return a new engine with configuration `changes` applied."
        return SolarEngine(self.config.replace(**changes))

    def declination(self, day):
        """Solar declination [deg]."""
        day = check_finite("day", day)
        return _scalar(np.rad2deg(orbits.declination(day, self.params)))

    def equation_of_time(self, day):
        """Equation of Time components and total [min]."""
        return eot_components(
            check_finite("day", day),
            self.params,
            eccentricity=self.config.show_eccentricity,
            obliquity=self.config.show_obliquity,
        )

    def eot_extremes(self):
        """Days of the largest and smallest Equation of Time [min]."""
        return eot_extremes(self.params, self.config.show_eccentricity,
                            self.config.show_obliquity)

    def clock_offset(self, day):
        """Hours to add to a clock reading to get apparent solar time."""
        if not self.config.apparent_time:
            return 0.0
        return self.equation_of_time(day).total / 60.0

    def hour_angle(self, day, hour):
        """Hour angle [hr] of the Sun at clock `hour` on `day`."""
        hour = check_finite("hour", hour)
        return _scalar(hour_angle(hour, 60.0 * self.clock_offset(day)))

    def sun_position(self, day, hour):
        """Altitude and azimuth [deg] of the Sun at clock `hour` on `day`."""
        dec = orbits.declination(check_finite("day", day), self.params)
        return equatorial_to_horizontal(
            self.hour_angle(day, hour), dec, self.latitude
        )

    def sun_times(self, day):
        """Sunrise, sunset and day length for `day` on the configured clock.

        Rise and set are computed in apparent solar time and then moved
        onto the clock, so ``sun_position(day, times.sunrise)`` lies on
        the horizon. Midnight sun and polar night keep their fixed
        0/24 and 12/12 markers.
        """
        times = sun_events.sun_times(check_finite("day", day), self.params,
                                     self.latitude)
        if times.never_rises or times.never_sets:
            return times
        offset = self.clock_offset(day)
        return dataclasses.replace(
            times, sunrise=times.sunrise - offset, sunset=times.sunset - offset
        )

    def noon_altitude(self, day):
        day = check_finite("day", day)
        return _scalar(sun_events.noon_altitude(day, self.params, self.latitude))

    def orbital_speed(self, day):
        """Orbital speed relative to the yearly mean."""
        day = check_finite("day", day)
        return _scalar(orbits.orbital_speed(day, self.params))

    def solar_distance(self, day):
        """Sun distance in units of the semi-major axis."""
        day = check_finite("day", day)
        return _scalar(orbits.solar_distance(day, self.params))

    def _trace_options(self):
        return dict(
            apparent_time=self.config.apparent_time,
            eccentricity=self.config.show_eccentricity,
            obliquity=self.config.show_obliquity,
        )

    def generate_analemma(self, hour):
        """Analemma trace at clock `hour` over days 1..365."""
        return traces.analemma(hour, self.params, self.latitude,
                               **self._trace_options())

    def generate_day_path(self, day, step_minutes=5):
        """Sun path over `day` in `step_minutes` ticks."""
        return traces.day_path(day, self.params, self.latitude,
                               step_minutes=step_minutes,
                               **self._trace_options())

    def hour_traces(self, hours=range(5, 20)):
        """Analemmas for each clock hour in `hours`."""
        return traces.hour_traces(self.params, self.latitude, hours,
                                  **self._trace_options())


def _scalar(value):
    return float(value) if np.ndim(value) == 0 else value
