"""Tests for hand-built device capabilities."""

from __future__ import annotations

import pytest

from analog_validator.capabilities.capabilities import RydbergCapabilities, WaveformLimits
from analog_validator.capabilities.errors import MalformedCapabilitiesError


def _make_limits(**overrides) -> WaveformLimits:
    fields = dict(
        max_time=4.0,
        min_time_step=0.05,
        min_value=0.0,
        max_value=10.0,
        time_resolution=0.001,
        value_resolution=0.001,
        max_slope=100.0,
        local_mask_resolution=0.01,
    )
    fields.update(overrides)
    return WaveformLimits(**fields)


def _make_rydberg(**channels) -> RydbergCapabilities:
    fields = dict(
        rabi_frequency=_make_limits(),
        detuning=_make_limits(),
        phase=_make_limits(max_slope=None, local_mask_resolution=None),
        local_detuning=_make_limits(),
    )
    fields.update(channels)
    return RydbergCapabilities(**fields)


class TestRydbergCapabilities:

    def test_complete_limits_accepted(self):
        rydberg = _make_rydberg()
        assert rydberg.phase.max_slope is None

    @pytest.mark.parametrize("channel", ["rabi_frequency", "detuning", "local_detuning"])
    def test_missing_slope_rejected(self, channel):
        with pytest.raises(MalformedCapabilitiesError, match=f"{channel} limits must define max_slope"):
            _make_rydberg(**{channel: _make_limits(max_slope=None)})

    def test_missing_mask_resolution_rejected(self):
        with pytest.raises(MalformedCapabilitiesError, match="local_mask_resolution"):
            _make_rydberg(local_detuning=_make_limits(local_mask_resolution=None))

    def test_error_is_value_error(self):
        assert issubclass(MalformedCapabilitiesError, ValueError)
