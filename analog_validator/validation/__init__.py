"""Validation module for analog tasks."""

from .durations import check_durations
from .lattice import validate_lattice
from .report import TaskValidationError, ViolationReport
from .resolution import approx_equal, is_off_resolution
from .validate import validate, validate_analog_params
from .waveform import (
    DELTA,
    LOCAL_DETUNING,
    OMEGA,
    PHI,
    Comparator,
    WaveformCheck,
    WaveformKind,
    WaveformSummary,
    validate_delta,
    validate_local_detuning,
    validate_omega,
    validate_phi,
    validate_waveform,
)

__all__ = [
    "Comparator",
    "DELTA",
    "LOCAL_DETUNING",
    "OMEGA",
    "PHI",
    "TaskValidationError",
    "ViolationReport",
    "WaveformCheck",
    "WaveformKind",
    "WaveformSummary",
    "approx_equal",
    "check_durations",
    "is_off_resolution",
    "validate",
    "validate_analog_params",
    "validate_delta",
    "validate_lattice",
    "validate_local_detuning",
    "validate_omega",
    "validate_phi",
    "validate_waveform",
]
