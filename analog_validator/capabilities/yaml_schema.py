"""Strict Pydantic schemas for device capabilities YAML."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _YamlWaveformLimits(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_time: float = Field(..., gt=0)
    min_time_step: float = Field(..., gt=0)
    min_value: float
    max_value: float
    time_resolution: float = Field(..., gt=0)
    value_resolution: float = Field(..., gt=0)

    @model_validator(mode="after")
    def _validate_ranges(self) -> "_YamlWaveformLimits":
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must be <= max_value ({self.max_value})"
            )
        if self.min_time_step > self.max_time:
            raise ValueError(
                f"min_time_step ({self.min_time_step}) must be <= max_time ({self.max_time})"
            )
        return self


class SlewLimitedWaveformYaml(_YamlWaveformLimits):
    """Limits for a channel with a maximum slew rate (Ω, Δ)."""

    max_slope: float = Field(..., gt=0)


class PhaseWaveformYaml(_YamlWaveformLimits):
    """Limits for the phase channel. Phase has no slew-rate limit."""


class LocalDetuningWaveformYaml(SlewLimitedWaveformYaml):
    """Limits for local detuning, including the per-site scaling resolution."""

    local_mask_resolution: float = Field(..., gt=0)


class RydbergYaml(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rabi_frequency: SlewLimitedWaveformYaml
    detuning: SlewLimitedWaveformYaml
    phase: PhaseWaveformYaml
    local_detuning: LocalDetuningWaveformYaml


class LatticeGeometryYaml(BaseModel):
    """Atom placement limits in μm."""

    model_config = ConfigDict(extra="forbid")

    position_resolution: float = Field(..., gt=0)
    spacing_radial_min: float = Field(..., ge=0)
    spacing_vertical_min: float = Field(..., ge=0)


class LatticeAreaYaml(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class LatticeYaml(BaseModel):
    model_config = ConfigDict(extra="forbid")

    geometry: LatticeGeometryYaml
    area: LatticeAreaYaml


class TaskLimitsYaml(BaseModel):
    model_config = ConfigDict(extra="forbid")

    number_qubits_max: int = Field(..., gt=0)


class CapabilitiesYamlSchema(BaseModel):
    """Root capabilities YAML schema: 'task', 'lattice' and 'rydberg' sections."""

    model_config = ConfigDict(extra="forbid")

    task: TaskLimitsYaml
    lattice: LatticeYaml
    rydberg: RydbergYaml
