"""Validate an analog task YAML against device capabilities.

Usage:
    analog-validate <task.yaml> [--capabilities <capabilities.yaml>] [--verbose]

Example:
    analog-validate configs/tasks/scar_chain.yaml \\
        --capabilities configs/capabilities/default.yaml
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from analog_validator.capabilities import (
    CapabilitiesLoaderError,
    default_capabilities,
    load_capabilities_from_yaml_safe,
)
from analog_validator.task import TaskLoaderError, load_task_from_yaml_safe
from analog_validator.validation import validate

SEPARATOR = "-" * 60


@dataclass
class ValidationResult:
    """Result of running task validation."""

    output: str
    passed: bool


def run_validation(task_path: str | Path, capabilities_path: Optional[str | Path] = None) -> ValidationResult:
    """Load inputs, validate, and return the formatted report."""
    lines: List[str] = []

    def out(text: str = "") -> None:
        lines.append(text)

    def fail(reason: str) -> ValidationResult:
        out()
        out(SEPARATOR)
        out(f"RESULT: ERROR — {reason}")
        out(SEPARATOR)
        return ValidationResult(output="\n".join(lines), passed=False)

    out(SEPARATOR)
    out("Analog Task Validation")
    out(SEPARATOR)
    out()

    out("[1/2] Loading device capabilities...")
    if capabilities_path is None:
        capabilities = default_capabilities()
        out("  OK: built-in device capabilities")
    else:
        try:
            capabilities = load_capabilities_from_yaml_safe(capabilities_path)
        except CapabilitiesLoaderError as exc:
            out(f"  ERROR: {exc}")
            return fail("could not load device capabilities")
        out(f"  OK: {capabilities_path}")
    geometry = capabilities.lattice.geometry
    out(f"  Max qubits: {capabilities.max_qubits}  "
        f"Area: {capabilities.lattice.area.width} x {capabilities.lattice.area.height} μm")
    out(f"  Spacing: radial >= {geometry.spacing_radial_min} μm, "
        f"vertical >= {geometry.spacing_vertical_min} μm")
    out()

    out("[2/2] Loading task...")
    try:
        task = load_task_from_yaml_safe(task_path)
    except TaskLoaderError as exc:
        out(f"  ERROR: {exc}")
        return fail("could not load task")
    out(f"  OK: {task_path}")
    out(f"  Atoms: {len(task.atoms)}")
    out(f"  Local detuning: {'yes' if task.local_detuning is not None else 'no'}")
    out()

    report = validate(task, capabilities)
    for label, violations in report.categories():
        if violations:
            out(f"{label}: FAIL — {len(violations)} violation(s)")
            for message in sorted(violations):
                out(f"  - {message}")
        else:
            out(f"{label}: OK")
    out()

    out(SEPARATOR)
    if not report.is_valid:
        out(f"RESULT: FAIL — {report.count()} violation(s) found")
        out(SEPARATOR)
        return ValidationResult(output="\n".join(lines), passed=False)

    out("RESULT: PASS — task satisfies all device constraints")
    out(SEPARATOR)
    return ValidationResult(output="\n".join(lines), passed=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check an analog task against device capabilities and list every violation."
    )
    parser.add_argument("task", type=Path, help="Task YAML path")
    parser.add_argument(
        "--capabilities",
        type=Path,
        default=None,
        help="Device capabilities YAML path (default: built-in device)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-check details",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    result = run_validation(args.task, args.capabilities)
    print(result.output)
    return 0 if result.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
