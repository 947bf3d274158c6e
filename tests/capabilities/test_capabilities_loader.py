"""Tests for device capabilities loading and the built-in default."""

from __future__ import annotations

import dataclasses
import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from analog_validator.capabilities import (
    CapabilitiesLoaderError,
    DeviceCapabilities,
    default_capabilities,
    load_capabilities_from_yaml,
    load_capabilities_from_yaml_safe,
)

CONFIGS = Path(__file__).resolve().parents[2] / "configs"
DEFAULT_YAML = CONFIGS / "capabilities" / "default.yaml"


def _write_temp_yaml(content: str) -> str:
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write(content)
    f.close()
    return f.name


class TestLoadCapabilitiesFromYaml:

    def test_load_sample_returns_device_capabilities(self):
        caps = load_capabilities_from_yaml(DEFAULT_YAML)
        assert isinstance(caps, DeviceCapabilities)

    def test_sample_matches_built_in_default(self):
        assert load_capabilities_from_yaml(DEFAULT_YAML) == default_capabilities()

    def test_loaded_limits(self):
        caps = load_capabilities_from_yaml(DEFAULT_YAML)
        assert caps.max_qubits == 256
        assert caps.lattice.geometry.spacing_radial_min == 4.0
        assert caps.lattice.area.height == 76.0
        assert caps.rydberg.detuning.value_resolution == 2.0e-7
        assert caps.rydberg.phase.max_slope is None
        assert caps.rydberg.rabi_frequency.local_mask_resolution is None
        assert caps.rydberg.local_detuning.local_mask_resolution == 0.01

    def test_missing_file_raises_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_capabilities_from_yaml("/nonexistent/capabilities.yaml")

    def test_empty_file_raises_validation_error(self):
        path = _write_temp_yaml("")
        try:
            with pytest.raises(ValidationError):
                load_capabilities_from_yaml(path)
        finally:
            os.unlink(path)


class TestLoadCapabilitiesFromYamlSafe:

    def test_missing_file_has_guidance(self):
        with pytest.raises(CapabilitiesLoaderError, match="not found"):
            load_capabilities_from_yaml_safe("/nonexistent/capabilities.yaml")

    def test_schema_error_has_location_and_guidance(self):
        path = _write_temp_yaml("task:\n  number_qubits_max: 10\n")
        try:
            with pytest.raises(CapabilitiesLoaderError, match="How to fix") as exc_info:
                load_capabilities_from_yaml_safe(path)
            assert "`lattice`" in str(exc_info.value)
        finally:
            os.unlink(path)

    def test_parse_error_has_guidance(self):
        path = _write_temp_yaml("{{invalid yaml: [")
        try:
            with pytest.raises(CapabilitiesLoaderError, match="parse error"):
                load_capabilities_from_yaml_safe(path)
        finally:
            os.unlink(path)


class TestDefaultCapabilities:

    def test_default_is_built_once(self):
        assert default_capabilities() is default_capabilities()

    def test_default_is_read_only(self):
        caps = default_capabilities()
        with pytest.raises(dataclasses.FrozenInstanceError):
            caps.max_qubits = 1
