"""Analog task inputs: atom positions, waveforms and per-site scaling."""

from .errors import MalformedTaskError, TaskLoaderError
from .loader import load_task_from_yaml, load_task_from_yaml_safe, task_from_dict
from .models import AnalogTask, Position, Waveform, normalize_position, normalize_positions
from .yaml_schema import TaskYamlSchema

__all__ = [
    "AnalogTask",
    "MalformedTaskError",
    "Position",
    "TaskLoaderError",
    "TaskYamlSchema",
    "Waveform",
    "load_task_from_yaml",
    "load_task_from_yaml_safe",
    "normalize_position",
    "normalize_positions",
    "task_from_dict",
]
