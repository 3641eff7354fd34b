"""Equatorial to horizontal coordinate transform.

Altitude is measured from the horizon (0) to the zenith (90). Azimuth is
measured from North through East and normalised to [0, 360), so a
northern observer sees the noon Sun at 180 (due south).
"""
from typing import NamedTuple

import numpy as np

# cos(altitude) below this means the Sun is at the zenith or nadir
ZENITH_TOLERANCE = 1e-9


class SolarPosition(NamedTuple):
    altitude: float  # [deg]
    azimuth: float  # [deg]


def hour_angle(hour, eot_minutes=0.0):
    """Hour angle [hr] from solar noon for a clock hour.

    `eot_minutes` converts mean to apparent solar time; pass 0 to treat
    `hour` as apparent solar time already.
    """
    return hour + eot_minutes / 60.0 - 12.0


def cos_solar_zenith(lat, dec, h):
    """Cosine of the solar zenith angle (all arguments in radians)."""
    x = np.sin(lat) * np.sin(dec) + np.cos(lat) * np.cos(dec) * np.cos(h)
    return np.clip(x, -1.0, 1.0)


def equatorial_to_horizontal(hour_angle, declination, latitude):
    """Convert hour angle and declination to altitude and azimuth.

    Parameters
    ----------
    hour_angle : float or np.ndarray
        Hours from local solar noon (negative in the morning)
    declination : float or np.ndarray
        Solar declination [rad]
    latitude : float
        Observer latitude [deg]

    Returns
    -------
    SolarPosition
        Altitude and azimuth [deg]

    Notes
    -----
    The azimuth uses atan2 on the numerators of sin(Az) and cos(Az); both
    share the positive factor 1/cos(alt), so nothing is divided and the
    poles need no special case. Where cos(alt) vanishes (Sun at zenith or
    nadir) the direction is undefined and the azimuth is set to 0.
    """
    h = np.deg2rad(np.multiply(hour_angle, 15.0))
    dec = np.asarray(declination, dtype=float)
    lat = np.deg2rad(latitude)

    sin_alt = cos_solar_zenith(lat, dec, h)
    altitude = np.arcsin(sin_alt)

    y = -np.sin(h) * np.cos(dec)
    x = np.cos(lat) * np.sin(dec) - np.sin(lat) * np.cos(dec) * np.cos(h)
    azimuth = np.mod(np.rad2deg(np.arctan2(y, x)), 360.0)
    azimuth = np.where(np.cos(altitude) < ZENITH_TOLERANCE, 0.0, azimuth)
    # mod can round a tiny negative angle up to exactly 360
    azimuth = np.where(azimuth >= 360.0, 0.0, azimuth)

    altitude = np.rad2deg(altitude)
    if np.ndim(altitude) == 0:
        return SolarPosition(float(altitude), float(azimuth))
    return SolarPosition(altitude, azimuth)
