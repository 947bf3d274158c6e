"""Load device capabilities YAML into a DeviceCapabilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from .capabilities import (
    DeviceCapabilities,
    LatticeArea,
    LatticeCapabilities,
    LatticeGeometry,
    RydbergCapabilities,
    WaveformLimits,
)
from .errors import CapabilitiesLoaderError
from .yaml_schema import CapabilitiesYamlSchema


def _format_loader_exception(path: Path, error: Exception) -> str:
    """Return a concise, actionable error message."""
    detail = str(error)

    if isinstance(error, ValidationError):
        first = error.errors()[0] if error.errors() else {}
        detail = first.get("msg", detail)
        location = ".".join(str(part) for part in first.get("loc", []))
        error_type = first.get("type", "")

        if "missing" in error_type or "Field required" in detail:
            guidance = "Add the missing required YAML field shown in the error location."
        elif "extra_forbidden" in error_type or "Extra inputs are not permitted" in detail:
            guidance = "Remove unknown YAML fields; only 'task', 'lattice', and 'rydberg' are allowed at root."
        elif "greater_than" in error_type:
            guidance = "Resolutions, durations and area limits must be positive."
        else:
            guidance = "Review the YAML values against the capabilities schema."

        prefix = f" at `{location}`" if location else ""
        return f"Capabilities YAML error{prefix}: {detail}\nHow to fix: {guidance}"

    if isinstance(error, yaml.YAMLError):
        return (
            f"Capabilities YAML parse error in `{path}`.\n"
            "How to fix: Check YAML indentation, colons, and structure."
        )

    if isinstance(error, FileNotFoundError):
        return (
            f"Capabilities file not found: `{path}`.\n"
            "How to fix: Verify the file path exists."
        )

    return (
        f"Capabilities loader error in `{path}`: {detail}\n"
        "How to fix: Verify the file path and capabilities YAML contents."
    )


def _waveform_limits(entry: Any) -> WaveformLimits:
    return WaveformLimits(
        max_time=entry.max_time,
        min_time_step=entry.min_time_step,
        min_value=entry.min_value,
        max_value=entry.max_value,
        time_resolution=entry.time_resolution,
        value_resolution=entry.value_resolution,
        max_slope=getattr(entry, "max_slope", None),
        local_mask_resolution=getattr(entry, "local_mask_resolution", None),
    )


def capabilities_from_dict(raw: Dict[str, Any]) -> DeviceCapabilities:
    """Validate a raw capabilities mapping and return a DeviceCapabilities.

    Raises:
        ValidationError: If the mapping does not match the schema.
    """
    schema = CapabilitiesYamlSchema.model_validate(raw)
    geometry = schema.lattice.geometry
    rydberg = schema.rydberg
    return DeviceCapabilities(
        max_qubits=schema.task.number_qubits_max,
        lattice=LatticeCapabilities(
            geometry=LatticeGeometry(
                position_resolution=geometry.position_resolution,
                spacing_radial_min=geometry.spacing_radial_min,
                spacing_vertical_min=geometry.spacing_vertical_min,
            ),
            area=LatticeArea(
                width=schema.lattice.area.width,
                height=schema.lattice.area.height,
            ),
        ),
        rydberg=RydbergCapabilities(
            rabi_frequency=_waveform_limits(rydberg.rabi_frequency),
            detuning=_waveform_limits(rydberg.detuning),
            phase=_waveform_limits(rydberg.phase),
            local_detuning=_waveform_limits(rydberg.local_detuning),
        ),
    )


def load_capabilities_from_yaml(path: str | Path) -> DeviceCapabilities:
    """Load a capabilities YAML file and return a DeviceCapabilities.

    Raises:
        FileNotFoundError: If the YAML file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValidationError: If the YAML does not match the schema.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    return capabilities_from_dict(raw)


def load_capabilities_from_yaml_safe(path: str | Path) -> DeviceCapabilities:
    """Load capabilities YAML with user-friendly exception formatting.

    Raises:
        CapabilitiesLoaderError: Concise, actionable message intended for CLI output.
    """
    resolved = Path(path)
    try:
        return load_capabilities_from_yaml(resolved)
    except Exception as exc:
        raise CapabilitiesLoaderError(_format_loader_exception(resolved, exc)) from exc
