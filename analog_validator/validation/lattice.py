"""Atom arrangement checks: count, resolution, area, radial and vertical spacing."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence, Set

from analog_validator.capabilities.capabilities import DeviceCapabilities
from analog_validator.task.models import Position, normalize_positions

from .resolution import approx_equal, is_off_resolution

logger = logging.getLogger(__name__)


def _atom_label(index: int, position: Position) -> str:
    return f"{index} => {position}"


def _group_by_y(positions: Sequence[Position]) -> Dict[float, Set[int]]:
    """Map each distinct y coordinate to the 1-based indices of atoms on it."""
    groups: Dict[float, Set[int]] = {}
    for index, (_, y) in enumerate(positions, start=1):
        groups.setdefault(y, set()).add(index)
    return groups


def _check_count(positions: Sequence[Position], max_qubits: int) -> List[str]:
    nqubits = len(positions)
    if nqubits > max_qubits:
        return [f"{nqubits} qubits exceeds maximum of {max_qubits} qubits"]
    return []


def _check_resolution(positions: Sequence[Position], resolution: float) -> List[str]:
    violations: List[str] = []
    for index, position in enumerate(positions, start=1):
        if any(is_off_resolution(resolution, coordinate) for coordinate in position):
            violations.append(
                f"atom {index} position {position} is not consistent with "
                f"position resolution {resolution} μm"
            )
    return violations


def _check_area(positions: Sequence[Position], max_width: float, max_height: float) -> List[str]:
    xs = [x for x, _ in positions]
    ys = [y for _, y in positions]
    width = max(xs) - min(xs)
    height = max(ys) - min(ys)

    violations: List[str] = []
    if width > max_width:
        violations.append(
            f"total width {width} μm exceeds maximum value of {max_width} μm"
        )
    if height > max_height:
        violations.append(
            f"total height {height} μm exceeds maximum value of {max_height} μm"
        )
    return violations


def _check_radial_spacing(positions: Sequence[Position], spacing_min: float) -> List[str]:
    violations: List[str] = []
    for i, (x_i, y_i) in enumerate(positions, start=1):
        for j in range(i + 1, len(positions) + 1):
            x_j, y_j = positions[j - 1]
            distance = math.hypot(x_i - x_j, y_i - y_j)
            if distance < spacing_min:
                violations.append(
                    f"positions {_atom_label(i, (x_i, y_i))} and "
                    f"{_atom_label(j, (x_j, y_j))} are a distance of {distance} μm "
                    f"apart which is below minimum value of {spacing_min} μm"
                )
    return violations


def _check_vertical_spacing(positions: Sequence[Position], spacing_min: float) -> List[str]:
    groups = _group_by_y(positions)
    levels = sorted(groups)

    violations: List[str] = []
    for y0, y1 in zip(levels, levels[1:]):
        gap = abs(y0 - y1)
        if gap > spacing_min or approx_equal(gap, spacing_min):
            continue
        sites = sorted(groups[y0] | groups[y1])
        listed = ", ".join(_atom_label(site, positions[site - 1]) for site in sites)
        violations.append(
            f"positions {{{listed}}} violate y minimum value of {spacing_min} μm"
        )
    return violations


def validate_lattice(
    positions: Sequence[Sequence[float]], capabilities: DeviceCapabilities,
) -> Set[str]:
    """Check atom positions against the lattice limits of ``capabilities``.

    Every rule runs regardless of the others. 1D positions are treated as
    lying on y = 0.0. Returns the set of violation messages (empty if all pass).
    """
    atoms = normalize_positions(positions)
    geometry = capabilities.lattice.geometry
    area = capabilities.lattice.area

    violations: Set[str] = set()
    violations.update(_check_count(atoms, capabilities.max_qubits))
    violations.update(_check_resolution(atoms, geometry.position_resolution))
    if atoms:
        violations.update(_check_area(atoms, area.width, area.height))
    violations.update(_check_radial_spacing(atoms, geometry.spacing_radial_min))
    violations.update(_check_vertical_spacing(atoms, geometry.spacing_vertical_min))

    logger.debug("Lattice: %d atoms checked, %d violation(s)", len(atoms), len(violations))
    return violations
