"""Validate analog neutral-atom tasks against device capabilities."""

from .capabilities import DeviceCapabilities, default_capabilities, load_capabilities_from_yaml
from .task import AnalogTask, Waveform, load_task_from_yaml
from .validation import ViolationReport, validate, validate_analog_params

__all__ = [
    "AnalogTask",
    "DeviceCapabilities",
    "ViolationReport",
    "Waveform",
    "default_capabilities",
    "load_capabilities_from_yaml",
    "load_task_from_yaml",
    "validate",
    "validate_analog_params",
]
