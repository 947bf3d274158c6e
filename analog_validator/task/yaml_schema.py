"""Strict Pydantic schemas for analog task YAML."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class WaveformYaml(BaseModel):
    """Piecewise-linear waveform given as parallel clock/value lists."""

    model_config = ConfigDict(extra="forbid")

    clocks: List[float] = Field(..., min_length=2)
    values: List[float] = Field(..., min_length=2)

    @model_validator(mode="after")
    def _validate_samples(self) -> "WaveformYaml":
        if len(self.clocks) != len(self.values):
            raise ValueError(
                f"clocks ({len(self.clocks)}) and values ({len(self.values)}) must have the same length."
            )
        for t0, t1 in zip(self.clocks, self.clocks[1:]):
            if t1 <= t0:
                raise ValueError(f"clocks must be strictly increasing ({t0} -> {t1}).")
        return self


class LocalDetuningYaml(WaveformYaml):
    """Local detuning waveform plus one scaling factor per atom."""

    scaling: List[float]


class WaveformsYaml(BaseModel):
    model_config = ConfigDict(extra="forbid")

    omega: WaveformYaml
    delta: WaveformYaml
    phi: WaveformYaml
    local_detuning: Optional[LocalDetuningYaml] = None


class TaskYamlSchema(BaseModel):
    """Root task YAML schema: 'atoms' and 'waveforms' keys."""

    model_config = ConfigDict(extra="forbid")

    atoms: List[List[float]] = Field(..., min_length=1)
    waveforms: WaveformsYaml

    @field_validator("atoms")
    @classmethod
    def _validate_atom_dimensions(cls, atoms: List[List[float]]) -> List[List[float]]:
        for index, atom in enumerate(atoms, start=1):
            if len(atom) not in (1, 2):
                raise ValueError(f"atom {index} must have 1 or 2 coordinates, got {len(atom)}.")
        return atoms

    @model_validator(mode="after")
    def _validate_scaling_length(self) -> "TaskYamlSchema":
        local = self.waveforms.local_detuning
        if local is not None and len(local.scaling) != len(self.atoms):
            raise ValueError(
                f"local_detuning.scaling has {len(local.scaling)} entries "
                f"but {len(self.atoms)} atoms are defined."
            )
        return self
