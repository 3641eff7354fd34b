"""
This module contains functions for calculating the Sun's
ecliptic position and declination from orbital elements
"""

# Constants
DAYS_PER_YEAR = 365  # leap years are not modelled
SPRING_EQUINOX_DAY = 80  # March 21, zero of ecliptic longitude
TWOPI = 6.283185307179586
MINUTES_PER_RADIAN = 1440.0 / TWOPI  # 24 h = 2*pi rad, ~229.18 min

import numpy as np


def wrap_day(day):
    """Wrap a day of year onto [0, 365)."""
    return np.mod(day, DAYS_PER_YEAR)


def mean_anomaly(day, perihelion_day):
    """Mean anomaly [rad] for a day of year, zero at perihelion.

    The difference is shifted by a full year before the modulo so the
    result always lies in [0, 2*pi).
    """
    days_since = np.mod(day - perihelion_day + DAYS_PER_YEAR, DAYS_PER_YEAR)
    return TWOPI * days_since / DAYS_PER_YEAR


def true_anomaly(M, ecc):
    """True anomaly [rad] from the mean anomaly.

    Equation-of-centre series to third order in the eccentricity; good
    for small to moderate `ecc`, not an exact inversion of Kepler's
    equation.
    """
    return (
        M
        + (2 * ecc - ecc ** 3 / 4) * np.sin(M)
        + (5 * ecc ** 2 / 4) * np.sin(2 * M)
        + (13 * ecc ** 3 / 12) * np.sin(3 * M)
    )


def mean_longitude(day):
    """Mean ecliptic longitude [rad], zero at the spring equinox."""
    return TWOPI * (day - SPRING_EQUINOX_DAY) / DAYS_PER_YEAR


def equation_of_center(day, params):
    """Difference between true and mean anomaly [rad]."""
    M = mean_anomaly(day, params.perihelion_day)
    return true_anomaly(M, params.eccentricity) - M


def solar_longitude(day, params):
    """True ecliptic longitude of the Sun [rad]."""
    return mean_longitude(day) + equation_of_center(day, params)


def declination(day, params):
    """Solar declination [rad].

    Parameters
    ----------
    day : float or np.ndarray
        Day of year (may be fractional)
    params : OrbitalParameters
        Orbital elements

    Returns
    -------
    float or np.ndarray
        Declination [rad], bounded by the tilt
    """
    obliq = np.deg2rad(params.tilt)
    return np.arcsin(np.sin(obliq) * np.sin(solar_longitude(day, params)))


def solar_distance(day, params):
    """Sun-planet distance in units of the semi-major axis."""
    ecc = params.eccentricity
    nu = true_anomaly(mean_anomaly(day, params.perihelion_day), ecc)
    return (1 - ecc ** 2) / (1 + ecc * np.cos(nu))


def orbital_speed(day, params):
    """Orbital speed relative to the yearly mean (Kepler's second law).

    Angular speed goes as r**-2 and r = a(1 - e**2)/(1 + e cos nu), so to
    first order in `e` the ratio to the mean is 1 + e cos nu.
    """
    ecc = params.eccentricity
    nu = true_anomaly(mean_anomaly(day, params.perihelion_day), ecc)
    return 1 + ecc * np.cos(nu)


def aphelion_day(params):
    """Day of year of aphelion, half a year after perihelion."""
    day = wrap_day(params.perihelion_day + DAYS_PER_YEAR / 2)
    return float(day) if day > 0 else float(DAYS_PER_YEAR)
