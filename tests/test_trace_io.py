"""Tests for trace CSV output."""

import numpy as np
import pytest

from analemma.trace_io import read_trace_csv, write_trace_csv
from analemma.traces import FIELDS, analemma, day_path


class TestTraceCSV:

    def test_write_read(self, tmp_path, earth):
        trace = analemma(12, earth, 40.0)
        path = tmp_path / "trace.csv"
        write_trace_csv(path, trace)
        data = read_trace_csv(path)
        expected = trace.to_arrays()
        assert list(data) == list(FIELDS)
        for name in FIELDS:
            np.testing.assert_allclose(data[name], expected[name], atol=1e-6)

    def test_header(self, tmp_path, earth):
        path = tmp_path / "path.csv"
        write_trace_csv(path, day_path(172, earth, 40.0), header="day 172")
        lines = path.read_text().splitlines()
        assert lines[0] == "# day 172"
        assert lines[1] == "# " + ",".join(FIELDS)
        assert len(lines) == 2 + 288

    def test_wrong_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("1.0,2.0,3.0\n4.0,5.0,6.0\n")
        with pytest.raises(ValueError):
            read_trace_csv(path)
