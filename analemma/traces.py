"""Trace generation: analemmas and daily sun paths.

A trace is an ordered sequence of Sun positions. Two kinds exist:

* the **analemma**, fixed clock hour with the day running from 1 to 365;
* the **day path**, fixed day with the clock running over 24 hours in
  5-minute ticks.

Both evaluate the same canonical chain (declination, Equation of Time,
horizontal transform) used for single-instant queries. A ``Trace``
stores only its inputs: nothing is computed until it is iterated, and
every iteration recomputes from scratch, so traces can be restarted at
will and must be rebuilt by the caller after parameters change.
"""
from typing import NamedTuple

import numpy as np

from . import orbits
from .config import InvalidParameterError, check_finite, check_latitude
from .eot import equation_of_time
from .horizontal import equatorial_to_horizontal, hour_angle


class TracePoint(NamedTuple):
    index: float  # day of year (analemma) or clock hour (day path)
    hour_angle: float  # [hr]
    declination: float  # [deg]
    altitude: float  # [deg]
    azimuth: float  # [deg]


FIELDS = TracePoint._fields


class Trace:
    """Lazy, restartable sequence of :class:`TracePoint`.

    Parameters
    ----------
    days : array_like
        Day of year for each point
    hours : array_like
        Clock hour for each point (broadcast against `days`)
    index : array_like
        Value reported as ``TracePoint.index``
    params : OrbitalParameters
    latitude : float
        Observer latitude [deg]
    apparent_time : bool
        Shift the hour angle by the Equation of Time
    eccentricity, obliquity : bool
        Equation of Time component masks used for the shift
    """

    def __init__(self, days, hours, index, params, latitude,
                 apparent_time=True, eccentricity=True, obliquity=True):
        self.days = np.asarray(check_finite("day", days))
        self.hours = np.asarray(check_finite("hour", hours))
        self.index = np.asarray(index, dtype=float)
        self.params = params
        self.latitude = check_latitude(latitude)
        self.apparent_time = apparent_time
        self.eccentricity = eccentricity
        self.obliquity = obliquity

    def __len__(self):
        return self.index.size

    def __iter__(self):
        arrays = self.to_arrays()
        columns = [arrays[name] for name in FIELDS]
        for row in zip(*columns):
            yield TracePoint(*(float(v) for v in row))

    def __repr__(self):
        return (
            f"Trace(n={len(self)}, latitude={self.latitude}, "
            f"apparent_time={self.apparent_time})"
        )

    def to_arrays(self):
        """Evaluate the trace and return a dict of numpy arrays keyed by field."""
        dec = orbits.declination(self.days, self.params)
        if self.apparent_time:
            eot = equation_of_time(
                self.days, self.params, self.eccentricity, self.obliquity
            )
        else:
            eot = 0.0
        h = hour_angle(self.hours, eot) * np.ones_like(self.index)
        pos = equatorial_to_horizontal(h, dec, self.latitude)
        return {
            "index": self.index.copy(),
            "hour_angle": h,
            "declination": np.rad2deg(dec) * np.ones_like(self.index),
            "altitude": np.asarray(pos.altitude, dtype=float),
            "azimuth": np.asarray(pos.azimuth, dtype=float),
        }

    def points(self):
        "Evaluate the trace into a list."
        return list(self)


def analemma(hour, params, latitude, apparent_time=True,
             eccentricity=True, obliquity=True):
    """Sun position at a fixed clock `hour` for every day 1..365."""
    days = np.arange(1, orbits.DAYS_PER_YEAR + 1, dtype=float)
    hours = np.full(days.shape, check_finite("hour", hour))
    return Trace(days, hours, days, params, latitude,
                 apparent_time, eccentricity, obliquity)


def day_path(day, params, latitude, apparent_time=True, step_minutes=5,
             eccentricity=True, obliquity=True):
    """Sun position over one day in `step_minutes` ticks from 00:00."""
    if not step_minutes > 0:
        raise InvalidParameterError(
            f"step_minutes={step_minutes} must be positive"
        )
    hours = np.arange(0.0, 24 * 60, step_minutes) / 60.0
    days = np.full(hours.shape, check_finite("day", day))
    return Trace(days, hours, hours, params, latitude,
                 apparent_time, eccentricity, obliquity)


def hour_traces(params, latitude, hours=range(5, 20), **kwargs):
    """One analemma per clock hour, keyed by hour."""
    return {hour: analemma(hour, params, latitude, **kwargs) for hour in hours}
