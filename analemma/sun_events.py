"""Sunrise, sunset and day length.

Times are hours of local apparent solar time, so every day is symmetric
about noon (12). Midnight sun and polar night are reported through flags
rather than errors.
"""
from dataclasses import dataclass

import numpy as np

from . import orbits
from .config import check_latitude


@dataclass(frozen=True)
class SunTimes:
    sunrise: float  # [hr]
    sunset: float  # [hr]
    day_length: float  # [hr]
    noon_altitude: float  # [deg], negative when the Sun stays down
    never_rises: bool = False  # polar night
    never_sets: bool = False  # midnight sun


def cos_sunrise_hour_angle(lat, dec):
    """Cosine of the sunrise hour angle, -tan(lat)*tan(dec) (radians in)."""
    return -np.tan(lat) * np.tan(dec)


def noon_altitude(day, params, latitude):
    """Altitude of the Sun at solar noon [deg].

    A negative value means the Sun stays below the horizon all day; it is
    not an error but callers should treat it as "no noon event".
    """
    dec = np.rad2deg(orbits.declination(day, params))
    return 90.0 - np.abs(latitude - dec)


def _events(cos_ha):
    ha = np.rad2deg(np.arccos(np.clip(cos_ha, -1.0, 1.0))) / 15.0
    never_sets = cos_ha < -1
    never_rises = cos_ha > 1
    sunrise = np.where(never_sets, 0.0, np.where(never_rises, 12.0, 12.0 - ha))
    sunset = np.where(never_sets, 24.0, np.where(never_rises, 12.0, 12.0 + ha))
    return sunrise, sunset, never_rises, never_sets


def sun_times(day, params, latitude):
    """Calculate sunrise, sunset and day length for one day.

    Parameters
    ----------
    day : float
        Day of year
    params : OrbitalParameters
        Orbital elements
    latitude : float
        Observer latitude [deg]

    Returns
    -------
    SunTimes
    """
    dec = orbits.declination(day, params)
    latitude = check_latitude(latitude)
    cos_ha = cos_sunrise_hour_angle(np.deg2rad(latitude), dec)
    sunrise, sunset, never_rises, never_sets = _events(cos_ha)
    return SunTimes(
        sunrise=float(sunrise),
        sunset=float(sunset),
        day_length=float(sunset - sunrise),
        never_rises=bool(never_rises),
        never_sets=bool(never_sets),
        noon_altitude=float(noon_altitude(day, params, latitude)),
    )


def day_lengths(days, params, latitude):
    """Vectorised day length [hr] for an array of days."""
    dec = orbits.declination(np.asarray(days, dtype=float), params)
    latitude = check_latitude(latitude)
    cos_ha = cos_sunrise_hour_angle(np.deg2rad(latitude), dec)
    sunrise, sunset, _, _ = _events(cos_ha)
    return sunset - sunrise
