"""Analog task domain models: atom positions and piecewise-linear waveforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

from .errors import MalformedTaskError

Position = Tuple[float, float]


def normalize_position(position: Sequence[float]) -> Position:
    """Return ``position`` as an (x, y) pair; 1D positions get y = 0.0."""
    if len(position) == 1:
        return (float(position[0]), 0.0)
    if len(position) == 2:
        return (float(position[0]), float(position[1]))
    raise MalformedTaskError(
        f"Atom position {tuple(position)} must have 1 or 2 coordinates."
    )


def normalize_positions(positions: Iterable[Sequence[float]]) -> Tuple[Position, ...]:
    return tuple(normalize_position(p) for p in positions)


@dataclass(frozen=True)
class Waveform:
    """Piecewise-linear waveform sampled at strictly increasing clocks (μs)."""

    clocks: Tuple[float, ...]
    values: Tuple[float, ...]

    def __post_init__(self) -> None:
        clocks = tuple(float(c) for c in self.clocks)
        values = tuple(float(v) for v in self.values)
        if len(clocks) != len(values):
            raise MalformedTaskError(
                f"Waveform has {len(clocks)} clocks but {len(values)} values."
            )
        if len(clocks) < 2:
            raise MalformedTaskError("Waveform needs at least two samples.")
        for t0, t1 in zip(clocks, clocks[1:]):
            if t1 <= t0:
                raise MalformedTaskError(
                    f"Waveform clocks must be strictly increasing ({t0} -> {t1})."
                )
        object.__setattr__(self, "clocks", clocks)
        object.__setattr__(self, "values", values)

    @property
    def duration(self) -> float:
        return self.clocks[-1]


@dataclass(frozen=True)
class AnalogTask:
    """A fully specified analog task ready for validation.

    ``local_scaling`` holds one scaling factor per atom and is required
    whenever ``local_detuning`` is set.
    """

    atoms: Tuple[Position, ...]
    omega: Waveform
    delta: Waveform
    phi: Waveform
    local_detuning: Optional[Waveform] = None
    local_scaling: Optional[Tuple[float, ...]] = field(default=None)

    def __post_init__(self) -> None:
        atoms = normalize_positions(self.atoms)
        if not atoms:
            raise MalformedTaskError("Task must place at least one atom.")
        object.__setattr__(self, "atoms", atoms)

        if self.local_scaling is not None:
            object.__setattr__(
                self, "local_scaling", tuple(float(s) for s in self.local_scaling)
            )
        if self.local_detuning is None:
            return
        if self.local_scaling is None:
            raise MalformedTaskError("Local detuning requires per-site scaling factors.")
        if len(self.local_scaling) != len(atoms):
            raise MalformedTaskError(
                f"Per-site scaling has {len(self.local_scaling)} entries "
                f"for {len(atoms)} atoms."
            )
