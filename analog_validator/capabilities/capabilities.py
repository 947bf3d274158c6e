"""Device capabilities domain models.

Units follow the task inputs directly: positions in μm, times in μs,
Rabi frequency and detuning in rad⋅MHz, phase in rad. No conversion is
applied anywhere in the validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import MalformedCapabilitiesError


@dataclass(frozen=True)
class LatticeGeometry:
    """Atom placement limits in μm."""

    position_resolution: float
    spacing_radial_min: float
    spacing_vertical_min: float


@dataclass(frozen=True)
class LatticeArea:
    """Maximum extent of the atom arrangement in μm."""

    width: float
    height: float


@dataclass(frozen=True)
class LatticeCapabilities:
    geometry: LatticeGeometry
    area: LatticeArea


@dataclass(frozen=True)
class WaveformLimits:
    """Limits for one waveform channel.

    ``max_slope`` is None for channels without a slew-rate limit (phase).
    ``local_mask_resolution`` is only set for local detuning.
    """

    max_time: float
    min_time_step: float
    min_value: float
    max_value: float
    time_resolution: float
    value_resolution: float
    max_slope: Optional[float] = None
    local_mask_resolution: Optional[float] = None


@dataclass(frozen=True)
class RydbergCapabilities:
    """Per-channel waveform limits.

    Rabi frequency, detuning and local detuning must carry ``max_slope``;
    local detuning must also carry ``local_mask_resolution``.
    """

    rabi_frequency: WaveformLimits
    detuning: WaveformLimits
    phase: WaveformLimits
    local_detuning: WaveformLimits

    def __post_init__(self) -> None:
        for name in ("rabi_frequency", "detuning", "local_detuning"):
            if getattr(self, name).max_slope is None:
                raise MalformedCapabilitiesError(
                    f"{name} limits must define max_slope."
                )
        if self.local_detuning.local_mask_resolution is None:
            raise MalformedCapabilitiesError(
                "local_detuning limits must define local_mask_resolution."
            )


@dataclass(frozen=True)
class DeviceCapabilities:
    """Loaded, read-only device capability document."""

    max_qubits: int
    lattice: LatticeCapabilities
    rydberg: RydbergCapabilities
