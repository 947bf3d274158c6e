"""Load analog task YAML into an AnalogTask."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from .errors import TaskLoaderError
from .models import AnalogTask, Waveform
from .yaml_schema import TaskYamlSchema, WaveformYaml


def _format_loader_exception(path: Path, error: Exception) -> str:
    """Return a concise, actionable error message with fix guidance."""
    detail = str(error)

    if isinstance(error, ValidationError):
        first_error = error.errors()[0] if error.errors() else {}
        detail = first_error.get("msg", detail)
        error_type = first_error.get("type", "")
        location = ".".join(str(part) for part in first_error.get("loc", []))

        if "strictly increasing" in detail:
            guidance = "Sort waveform clocks ascending and remove repeated time points."
        elif "same length" in detail:
            guidance = "Give every waveform exactly one value per clock."
        elif "scaling" in detail:
            guidance = "Provide one local_detuning.scaling entry per atom."
        elif error_type == "missing" or "Field required" in detail:
            guidance = "Add the missing required YAML field shown in the error location."
        elif "extra_forbidden" in error_type or "Extra inputs are not permitted" in detail:
            guidance = "Remove unknown YAML fields; only 'atoms' and 'waveforms' are allowed at root."
        else:
            guidance = "Review the YAML values against the task schema and correct invalid entries."

        prefix = f" at `{location}`" if location else ""
        return f"Task YAML error{prefix}: {detail}\nHow to fix: {guidance}"

    if isinstance(error, yaml.YAMLError):
        return (
            f"Task YAML parse error in `{path}`.\n"
            "How to fix: Check YAML indentation, colons, and list/dict structure."
        )

    if isinstance(error, FileNotFoundError):
        return (
            f"Task file not found: `{path}`.\n"
            "How to fix: Verify the file path exists."
        )

    return (
        f"Task loader error in `{path}`: {detail}\n"
        "How to fix: Verify the file path and task YAML contents."
    )


def _to_waveform(entry: WaveformYaml) -> Waveform:
    return Waveform(clocks=tuple(entry.clocks), values=tuple(entry.values))


def task_from_dict(raw: Dict[str, Any]) -> AnalogTask:
    """Validate a raw task mapping and return an AnalogTask.

    Raises:
        ValidationError: If the mapping does not match the schema.
    """
    schema = TaskYamlSchema.model_validate(raw)
    waveforms = schema.waveforms
    local = waveforms.local_detuning
    return AnalogTask(
        atoms=tuple(tuple(atom) for atom in schema.atoms),
        omega=_to_waveform(waveforms.omega),
        delta=_to_waveform(waveforms.delta),
        phi=_to_waveform(waveforms.phi),
        local_detuning=_to_waveform(local) if local is not None else None,
        local_scaling=tuple(local.scaling) if local is not None else None,
    )


def load_task_from_yaml(path: str | Path) -> AnalogTask:
    """Load a task YAML file and return an AnalogTask.

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
    return task_from_dict(raw)


def load_task_from_yaml_safe(path: str | Path) -> AnalogTask:
    """Load task YAML with user-friendly exception formatting.

    Raises:
        TaskLoaderError: Concise, actionable message intended for CLI output.
    """
    resolved = Path(path)
    try:
        return load_task_from_yaml(resolved)
    except Exception as exc:
        raise TaskLoaderError(_format_loader_exception(resolved, exc)) from exc
