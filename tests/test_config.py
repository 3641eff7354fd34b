"""Tests for configuration and parameter validation."""

import dataclasses
import os

import pytest

import analemma
from analemma.config import (
    ApproximationWarning,
    Configurator,
    InvalidParameterError,
    OrbitalParameters,
    check_finite,
    check_latitude,
)

EXAMPLES = os.path.join(os.path.dirname(analemma.__file__), "examples")


class TestOrbitalParameters:

    def test_defaults(self):
        p = OrbitalParameters()
        assert (p.tilt, p.eccentricity, p.perihelion_day) == (23.44, 0.0167, 3.0)

    @pytest.mark.parametrize("kwargs", [
        {"tilt": -1.0},
        {"tilt": 90.5},
        {"eccentricity": -0.1},
        {"eccentricity": 1.0},
        {"perihelion_day": 0.0},
        {"perihelion_day": 366.0},
        {"tilt": float("nan")},
        {"eccentricity": "round"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidParameterError):
            OrbitalParameters(**kwargs)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            OrbitalParameters(tilt=100.0)

    def test_boundaries_accepted(self):
        OrbitalParameters(tilt=0.0, eccentricity=0.0, perihelion_day=1)
        OrbitalParameters(tilt=90.0, perihelion_day=365)

    def test_frozen(self):
        p = OrbitalParameters()
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.tilt = 10.0

    def test_replace_validates(self):
        p = OrbitalParameters()
        assert p.replace(tilt=10.0).tilt == 10.0
        with pytest.raises(InvalidParameterError):
            p.replace(eccentricity=2.0)

    def test_high_eccentricity_warns(self):
        with pytest.warns(ApproximationWarning):
            OrbitalParameters(eccentricity=0.5)

    def test_ints_stored_as_floats(self):
        assert isinstance(OrbitalParameters(tilt=10).tilt, float)


class TestCheckFinite:

    def test_scalar(self):
        assert check_finite("day", 172) == 172.0
        assert isinstance(check_finite("day", "45.5"), float)

    def test_array(self):
        days = check_finite("day", [1, 2, 3])
        assert days.shape == (3,)

    @pytest.mark.parametrize("value", [float("nan"), float("-inf"), "9:30",
                                       None, [1.0, float("nan")]])
    def test_rejected(self, value):
        with pytest.raises(InvalidParameterError):
            check_finite("hour", value)


class TestLatitude:

    def test_range(self):
        assert check_latitude(-90) == -90.0
        with pytest.raises(InvalidParameterError):
            check_latitude(90.1)

    def test_configurator_checks_latitude(self):
        with pytest.raises(InvalidParameterError):
            Configurator(latitude=-91.0)


class TestConfigurator:

    def test_defaults(self, default_config):
        assert default_config.latitude == 40.0
        assert default_config.apparent_time is True
        assert default_config.tilt == 23.44

    def test_replace_orbit_fields(self, default_config):
        cfg = default_config.replace(tilt=30.0, latitude=10.0)
        assert cfg.params.tilt == 30.0
        assert cfg.latitude == 10.0
        assert default_config.params.tilt == 23.44

    def test_params_type_checked(self):
        with pytest.raises(InvalidParameterError):
            Configurator(params={"tilt": 10})


class TestFromDict:

    def test_sections(self):
        cfg = Configurator.from_dict({
            "orbit": {"obliquity": 10.0, "eccentricity": 0.05},
            "observer": {"latitude": -33.9},
            "time": {"apparent_time": False},
            "equation_of_time": {"obliquity": False},
        })
        assert cfg.tilt == 10.0
        assert cfg.eccentricity == 0.05
        assert cfg.latitude == -33.9
        assert cfg.apparent_time is False
        assert cfg.show_obliquity is False
        assert cfg.show_eccentricity is True

    def test_empty(self):
        assert Configurator.from_dict({}) == Configurator()
        assert Configurator.from_dict(None) == Configurator()

    def test_unknown_key(self):
        with pytest.raises(InvalidParameterError, match="Unknown key"):
            Configurator.from_dict({"orbit": {"spin": 1.0}})

    def test_deprecated_key(self):
        with pytest.warns(DeprecationWarning, match="perihelionDay"):
            cfg = Configurator.from_dict({"orbit": {"perihelionDay": 10}})
        assert cfg.perihelion_day == 10.0

    def test_flags_must_be_bool(self):
        with pytest.raises(InvalidParameterError):
            Configurator.from_dict({"time": {"apparent_time": "yes"}})

    def test_section_must_be_mapping(self):
        with pytest.raises(InvalidParameterError):
            Configurator.from_dict({"orbit": [1, 2]})


class TestFromYaml:

    def test_roundtrip(self, tmp_path):
        path = tmp_path / "mars.yaml"
        path.write_text(
            "orbit:\n"
            "  tilt: 25.19\n"
            "  eccentricity: 0.0934\n"
            "observer:\n"
            "  latitude: -4.5\n"
            "run:\n"
            "  day: 100\n"
        )
        cfg, data = Configurator.from_yaml(path)
        assert cfg.tilt == 25.19
        assert cfg.latitude == -4.5
        assert data["run"]["day"] == 100

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        cfg, data = Configurator.from_yaml(path)
        assert cfg == Configurator()
        assert data == {}

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(InvalidParameterError):
            Configurator.from_yaml(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("orbit:\n  tilt: 120\n")
        with pytest.raises(InvalidParameterError):
            Configurator.from_yaml(path)

    @pytest.mark.parametrize("name", ["earth_default.yaml", "no_tilt.yaml"])
    def test_packaged_examples(self, name):
        cfg, data = Configurator.from_yaml(os.path.join(EXAMPLES, name))
        assert isinstance(cfg, Configurator)
        assert "day" in data["run"]

    def test_no_tilt_example(self):
        cfg, _ = Configurator.from_yaml(os.path.join(EXAMPLES, "no_tilt.yaml"))
        assert cfg.tilt == 0.0
