"""Validation entry points: run every check and aggregate one report."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from analog_validator.capabilities.capabilities import DeviceCapabilities
from analog_validator.task.models import AnalogTask, Waveform

from .durations import check_durations
from .lattice import validate_lattice
from .report import ViolationReport
from .waveform import validate_delta, validate_local_detuning, validate_omega, validate_phi

logger = logging.getLogger(__name__)


def validate_analog_params(
    atoms: Sequence[Sequence[float]],
    phi: Waveform,
    omega: Waveform,
    delta: Waveform,
    local_detuning: Optional[Waveform],
    local_scaling: Optional[Sequence[float]],
    capabilities: DeviceCapabilities,
) -> ViolationReport:
    """Check already-extracted task fields against ``capabilities``.

    Every check runs; none short-circuits another. ``local_scaling`` is only
    inspected when ``local_detuning`` is given. Inputs are not modified.
    """
    rydberg = capabilities.rydberg

    if local_detuning is not None:
        local_violations = validate_local_detuning(
            local_detuning, local_scaling or (), rydberg.local_detuning
        )
    else:
        local_violations = set()

    report = ViolationReport(
        lattice_violations=validate_lattice(atoms, capabilities),
        omega_violations=validate_omega(omega, rydberg.rabi_frequency),
        delta_violations=validate_delta(delta, rydberg.detuning),
        phi_violations=validate_phi(phi, rydberg.phase),
        local_detuning_violations=local_violations,
        misc_violations=check_durations(omega, delta, phi, local_detuning),
    )

    logger.info(
        "Validated %d atoms: %s",
        len(atoms),
        ", ".join(f"{label}={len(v)}" for label, v in report.categories()),
    )
    return report


def validate(task: AnalogTask, capabilities: DeviceCapabilities) -> ViolationReport:
    """Validate ``task`` against ``capabilities`` and return the full report.

    Pass ``default_capabilities()`` to check against the built-in device.
    """
    return validate_analog_params(
        task.atoms,
        task.phi,
        task.omega,
        task.delta,
        task.local_detuning,
        task.local_scaling,
        capabilities,
    )
