"""Equation of Time for the analemma engine.

The Equation of Time is split into its two classical parts:

* the *eccentricity effect*, one cycle per year, from the planet moving
  faster near perihelion than near aphelion;
* the *obliquity effect*, two cycles per year, from the Sun's motion
  along the tilted ecliptic projecting unevenly onto the equator.

Both are computed in radians of hour angle and reported in minutes of
time. Each part can be masked out of the total for didactic displays
while remaining individually retrievable.
"""
from dataclasses import dataclass

import numpy as np

from .orbits import DAYS_PER_YEAR, MINUTES_PER_RADIAN, mean_anomaly, mean_longitude

# Above this magnitude [min] the eccentricity effect counts as significant
INTERPLAY_THRESHOLD = 5.0


@dataclass(frozen=True)
class EOTComponents:
    """Equation of Time parts [minutes] and their masked sum."""

    eccentricity: float
    obliquity: float
    total: float


def eccentricity_effect(day, params):
    """Eccentricity part of the Equation of Time [min]; independent of tilt."""
    ecc = params.eccentricity
    M = mean_anomaly(day, params.perihelion_day)
    effect = -2 * ecc * np.sin(M) - 1.25 * ecc ** 2 * np.sin(2 * M)
    return effect * MINUTES_PER_RADIAN


def obliquity_effect(day, params):
    """Obliquity part of the Equation of Time [min]; independent of eccentricity."""
    y2 = np.tan(np.deg2rad(params.tilt) / 2) ** 2
    L = mean_longitude(day)
    effect = y2 * np.sin(2 * L) - 0.5 * y2 ** 2 * np.sin(4 * L)
    return effect * MINUTES_PER_RADIAN


def eot_components(day, params, eccentricity=True, obliquity=True):
    """Calculate both Equation of Time components and their total.

    Parameters
    ----------
    day : float or np.ndarray
        Day of year
    params : OrbitalParameters
        Orbital elements
    eccentricity, obliquity : bool
        Whether each component contributes to ``total``

    Returns
    -------
    EOTComponents
        Raw components and the masked total [min]. With both masks off
        the total is 0.
    """
    ecc_part = eccentricity_effect(day, params)
    obl_part = obliquity_effect(day, params)
    total = np.zeros_like(ecc_part, dtype=float)
    if eccentricity:
        total = total + ecc_part
    if obliquity:
        total = total + obl_part
    if np.ndim(total) == 0:
        return EOTComponents(float(ecc_part), float(obl_part), float(total))
    return EOTComponents(ecc_part, obl_part, total)


def equation_of_time(day, params, eccentricity=True, obliquity=True):
    """Equation of Time [min], the masked sum of both components."""
    return eot_components(day, params, eccentricity, obliquity).total


def interplay(components, threshold=INTERPLAY_THRESHOLD):
    """Describe how the two effects combine for a single day.

    Returns ``"opposing"`` or ``"reinforcing"`` when the eccentricity
    effect exceeds `threshold` minutes in magnitude, otherwise None.
    """
    ecc_part = components.eccentricity
    obl_part = components.obliquity
    if abs(ecc_part) <= threshold:
        return None
    if np.sign(ecc_part) == np.sign(obl_part):
        return "reinforcing"
    return "opposing"


@dataclass(frozen=True)
class EOTExtremes:
    """Days of the year with the largest and smallest Equation of Time."""

    max_day: int
    max_minutes: float
    min_day: int
    min_minutes: float


def eot_extremes(params, eccentricity=True, obliquity=True):
    """Find the extremes of the (masked) Equation of Time over days 1..365.

    Ties resolve to the earliest day.
    """
    days = np.arange(1, DAYS_PER_YEAR + 1)
    eot = equation_of_time(days, params, eccentricity, obliquity)
    imax = int(np.argmax(eot))
    imin = int(np.argmin(eot))
    return EOTExtremes(int(days[imax]), float(eot[imax]),
                       int(days[imin]), float(eot[imin]))
