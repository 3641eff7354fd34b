"""Trace I/O utilities for analemma.

Traces are written as plain CSV with a comment header so they can be
loaded by spreadsheets, numpy or any plotting front end::

    # analemma trace
    # index,hour_angle,declination,altitude,azimuth
    <index>,<hours>,<deg>,<deg>,<deg>
    ...
"""
import numpy as np

from .traces import FIELDS


def write_trace_csv(path, trace, header="analemma trace"):
    """Write a trace to CSV.

    Parameters
    ----------
    path : str or Path
        Output file path.
    trace : Trace
        Trace to evaluate and write.
    header : str
        First comment line.
    """
    arrays = trace.to_arrays()
    data = np.column_stack([arrays[name] for name in FIELDS])
    np.savetxt(
        path,
        data,
        fmt="%.6f",
        delimiter=",",
        header=f"{header}\n{','.join(FIELDS)}",
    )


def read_trace_csv(path):
    """Read a trace written by :func:`write_trace_csv`.

    Returns
    -------
    dict
        numpy arrays keyed by field name.
    """
    data = np.loadtxt(path, delimiter=",", ndmin=2)
    if data.shape[1] != len(FIELDS):
        raise ValueError(
            f"Expected {len(FIELDS)} columns but read {data.shape[1]}"
        )
    return {name: data[:, i] for i, name in enumerate(FIELDS)}
