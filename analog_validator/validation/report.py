"""Violation report returned by ``validate`` and the error that carries it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Tuple


@dataclass(frozen=True)
class ViolationReport:
    """Six independent, deduplicated sets of violation messages.

    Messages are deduplicated by exact text. A report with every set empty
    describes a task that satisfies all checked constraints.
    """

    lattice_violations: FrozenSet[str] = field(default_factory=frozenset)
    omega_violations: FrozenSet[str] = field(default_factory=frozenset)
    delta_violations: FrozenSet[str] = field(default_factory=frozenset)
    phi_violations: FrozenSet[str] = field(default_factory=frozenset)
    local_detuning_violations: FrozenSet[str] = field(default_factory=frozenset)
    misc_violations: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in (
            "lattice_violations",
            "omega_violations",
            "delta_violations",
            "phi_violations",
            "local_detuning_violations",
            "misc_violations",
        ):
            object.__setattr__(self, name, frozenset(getattr(self, name)))

    def categories(self) -> Tuple[Tuple[str, FrozenSet[str]], ...]:
        """Return ``(label, violations)`` pairs in display order."""
        return (
            ("lattice", self.lattice_violations),
            ("Ω", self.omega_violations),
            ("Δ", self.delta_violations),
            ("φ", self.phi_violations),
            ("δ", self.local_detuning_violations),
            ("misc", self.misc_violations),
        )

    @property
    def is_valid(self) -> bool:
        return self.count() == 0

    def count(self) -> int:
        return sum(len(violations) for _, violations in self.categories())

    def all_violations(self) -> List[str]:
        """Every message, grouped by category and sorted within each."""
        messages: List[str] = []
        for _, violations in self.categories():
            messages.extend(sorted(violations))
        return messages

    def as_dict(self) -> Dict[str, List[str]]:
        """JSON-ready mapping of category label to sorted messages."""
        return {label: sorted(violations) for label, violations in self.categories()}

    def raise_if_invalid(self) -> None:
        """Raise TaskValidationError if any violation was found."""
        if not self.is_valid:
            raise TaskValidationError(self)


class TaskValidationError(Exception):
    """Raised on request when a validated task has violations."""

    def __init__(self, report: ViolationReport) -> None:
        self.report = report
        messages = []
        for label, violations in report.categories():
            for message in sorted(violations):
                messages.append(f"  [{label}] {message}")
        super().__init__(
            f"Task validation failed with {report.count()} violation(s):\n"
            + "\n".join(messages)
        )
