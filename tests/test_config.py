"""Tests for pendulum_core.config: defaults, derived values, validation."""

import dataclasses
import math

import pytest

from pendulum_core.config import SimConfig
from pendulum_core.data_models import PendulumParams
from pendulum_core.errors import InvalidConfigurationError


class TestDefaults:
    def test_defaults_are_valid(self):
        config = SimConfig()
        assert config.frame_rate == 240
        assert config.substeps_per_frame == 4
        assert config.trail_capacity == 100
        assert config.max_pendulums is None
        assert config.show_trails is False

    def test_derived_time_steps(self):
        config = SimConfig(frame_rate=8, substeps_per_frame=4)
        assert config.tick_dt == 0.125
        assert config.substep_dt == 0.03125

    def test_params_mirror_fields(self):
        config = SimConfig(length1=2.0, length2=0.5, mass1=3.0, mass2=4.0, gravity=1.5)
        assert config.params == PendulumParams(2.0, 0.5, 3.0, 4.0, 1.5)
        assert config.params.reach == 2.5

    def test_zero_gravity_is_allowed(self):
        assert SimConfig(gravity=0.0).gravity == 0.0

    def test_is_immutable(self):
        config = SimConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.frame_rate = 60


class TestValidation:
    @pytest.mark.parametrize("field, value", [
        ("length1", 0.0),
        ("length2", -1.0),
        ("mass1", 0.0),
        ("mass2", -0.5),
        ("length1", math.inf),
        ("gravity", math.nan),
        ("gravity", math.inf),
        ("trail_capacity", -1),
        ("substeps_per_frame", 0),
        ("frame_rate", 0),
        ("frame_rate", 2.5),
        ("frame_rate", True),
        ("max_pendulums", 0),
        ("max_ticks_per_update", 0),
        ("initial_theta1", math.nan),
    ])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(InvalidConfigurationError) as info:
            SimConfig(**{field: value})
        assert info.value.field == field

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            SimConfig(mass1=-1.0)

    def test_replace_validates(self):
        config = SimConfig()
        assert config.replace(trail_capacity=5).trail_capacity == 5
        with pytest.raises(InvalidConfigurationError):
            config.replace(length2=0.0)

    def test_params_validate_on_their_own(self):
        with pytest.raises(InvalidConfigurationError):
            PendulumParams(length1=1.0, length2=1.0, mass1=0.0, mass2=1.0, gravity=9.8)

    def test_trail_capacity_zero_is_allowed(self):
        assert SimConfig(trail_capacity=0).trail_capacity == 0
