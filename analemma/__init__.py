# -*- coding: utf-8 -*-

"""Top-level package for analemma."""

__version__ = "0.1.0"

from .config import (
    ApproximationWarning,
    Configurator,
    InvalidParameterError,
    OrbitalParameters,
)
from .orbits import declination, mean_anomaly, orbital_speed, true_anomaly
from .eot import (
    EOTComponents,
    EOTExtremes,
    eot_components,
    eot_extremes,
    equation_of_time,
)
from .horizontal import SolarPosition, equatorial_to_horizontal
from .sun_events import SunTimes, sun_times
from .traces import Trace, TracePoint, analemma, day_path, hour_traces
from .stepper import Stepper
from .engine import SolarEngine
