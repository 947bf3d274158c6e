"""Waveform constraint tables for Ω(t), Δ(t), φ(t) and δ(t).

One generic algorithm evaluates a table of checks over quantities derived
from a piecewise-linear waveform. Each waveform kind supplies its own table.
Two inherited rows compare unrelated quantities on purpose (``duration``
against ``min_time_step`` for every kind, and ``minimum step`` against the
waveform duration for δ); they are kept so reports match the reference rule
table exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Set, Tuple

from analog_validator.capabilities.capabilities import WaveformLimits
from analog_validator.task.models import Waveform

from .resolution import is_off_resolution

logger = logging.getLogger(__name__)

SIGNIFICANT_DIGITS = 14


class Comparator(str, Enum):
    """How a derived quantity is compared against its limit."""

    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    NOT_EQUAL = "ne"

    def fails(self, actual: float, limit: float) -> bool:
        if self is Comparator.GREATER_THAN:
            return actual > limit
        if self is Comparator.LESS_THAN:
            return actual < limit
        return actual != limit

    @property
    def verb(self) -> str:
        return _VERBS[self]


_VERBS = {
    Comparator.GREATER_THAN: "exceeds maximum",
    Comparator.LESS_THAN: "below minimum",
    Comparator.NOT_EQUAL: "is not equal to the",
}


def round_significant(value: float, digits: int = SIGNIFICANT_DIGITS) -> float:
    """Round ``value`` to ``digits`` significant digits."""
    return float(f"{value:.{digits}g}")


@dataclass(frozen=True)
class WaveformSummary:
    """Quantities derived from a waveform that the constraint tables inspect."""

    duration: float
    min_value: float
    max_value: float
    min_time_step: float
    max_slope: float
    start_value: float
    end_value: float

    @classmethod
    def from_waveform(cls, waveform: Waveform) -> "WaveformSummary":
        clocks, values = waveform.clocks, waveform.values
        steps = [t1 - t0 for t0, t1 in zip(clocks, clocks[1:])]
        slopes = [
            abs(v1 - v0) / step
            for v0, v1, step in zip(values, values[1:], steps)
        ]
        return cls(
            duration=waveform.duration,
            min_value=min(values),
            max_value=max(values),
            min_time_step=round_significant(min(steps)),
            max_slope=round_significant(max(slopes)),
            start_value=values[0],
            end_value=values[-1],
        )


LimitFn = Callable[[WaveformLimits, WaveformSummary], float]


@dataclass(frozen=True)
class WaveformCheck:
    """One row of a constraint table.

    ``quantity`` names a WaveformSummary field; ``limit`` resolves the value
    it is compared with.
    """

    name: str
    quantity: str
    comparator: Comparator
    limit: LimitFn
    unit: str

    def evaluate(
        self, kind: str, summary: WaveformSummary, limits: WaveformLimits,
    ) -> Optional[str]:
        actual = getattr(summary, self.quantity)
        limit = self.limit(limits, summary)
        if not self.comparator.fails(actual, limit):
            return None
        return (
            f"{kind}(t) {self.name} with value {actual} {self.unit} "
            f"{self.comparator.verb} value of {limit} {self.unit}"
        )


@dataclass(frozen=True)
class WaveformKind:
    """A waveform channel: its symbol, constraint table and value unit."""

    symbol: str
    checks: Tuple[WaveformCheck, ...]
    value_unit: str


def _max_time(limits: WaveformLimits, _: WaveformSummary) -> float:
    return limits.max_time


def _min_time_step(limits: WaveformLimits, _: WaveformSummary) -> float:
    return limits.min_time_step


def _max_slope(limits: WaveformLimits, _: WaveformSummary) -> float:
    return limits.max_slope


def _min_value(limits: WaveformLimits, _: WaveformSummary) -> float:
    return limits.min_value


def _max_value(limits: WaveformLimits, _: WaveformSummary) -> float:
    return limits.max_value


def _zero(_limits: WaveformLimits, _summary: WaveformSummary) -> float:
    return 0.0


def _own_duration(_: WaveformLimits, summary: WaveformSummary) -> float:
    return summary.duration


GT, LT, NE = Comparator.GREATER_THAN, Comparator.LESS_THAN, Comparator.NOT_EQUAL
_FREQUENCY = "rad⋅MHz"
_SLOPE = "rad⋅MHz/μs"
_TIME = "μs"

_DURATION_CHECKS = (
    WaveformCheck("duration", "duration", GT, _max_time, _TIME),
    WaveformCheck("duration", "duration", LT, _min_time_step, _TIME),
    WaveformCheck("minimum step", "min_time_step", LT, _min_time_step, _TIME),
)

_SLOPE_AND_RANGE_CHECKS = (
    WaveformCheck("maximum slope", "max_slope", GT, _max_slope, _SLOPE),
    WaveformCheck("minimum value", "min_value", LT, _min_value, _FREQUENCY),
    WaveformCheck("maximum value", "max_value", GT, _max_value, _FREQUENCY),
)

OMEGA = WaveformKind(
    symbol="Ω",
    checks=_DURATION_CHECKS + _SLOPE_AND_RANGE_CHECKS + (
        WaveformCheck("start value", "start_value", NE, _zero, _FREQUENCY),
        WaveformCheck("end value", "end_value", NE, _zero, _FREQUENCY),
    ),
    value_unit=_FREQUENCY,
)

DELTA = WaveformKind(
    symbol="Δ",
    checks=_DURATION_CHECKS + _SLOPE_AND_RANGE_CHECKS,
    value_unit=_FREQUENCY,
)

PHI = WaveformKind(
    symbol="φ",
    checks=_DURATION_CHECKS + (
        WaveformCheck("minimum value", "min_value", LT, _min_value, "rad"),
        WaveformCheck("maximum value", "max_value", GT, _max_value, "rad"),
        WaveformCheck("start value", "start_value", NE, _zero, "rad"),
    ),
    value_unit="rad",
)

LOCAL_DETUNING = WaveformKind(
    symbol="δ",
    checks=_DURATION_CHECKS + (
        WaveformCheck("minimum step", "min_time_step", GT, _own_duration, _TIME),
    ) + _SLOPE_AND_RANGE_CHECKS,
    value_unit=_FREQUENCY,
)


def validate_waveform(
    kind: WaveformKind, waveform: Waveform, limits: WaveformLimits,
) -> Set[str]:
    """Evaluate ``kind``'s constraint table and sample resolutions.

    Every clock is checked against ``limits.time_resolution`` and every
    value against ``limits.value_resolution``; each offending sample gets
    its own message.
    """
    summary = WaveformSummary.from_waveform(waveform)
    violations: Set[str] = set()

    for check in kind.checks:
        message = check.evaluate(kind.symbol, summary, limits)
        if message is not None:
            violations.add(message)

    for clock in waveform.clocks:
        if is_off_resolution(limits.time_resolution, clock):
            violations.add(
                f"{kind.symbol}(t) clock {clock} μs is not consistent with "
                f"resolution {limits.time_resolution} μs."
            )

    for value in waveform.values:
        if is_off_resolution(limits.value_resolution, value):
            violations.add(
                f"{kind.symbol}(t) value {value} {kind.value_unit} is not consistent "
                f"with resolution {limits.value_resolution} {kind.value_unit}."
            )

    logger.debug("%s(t): %d violation(s)", kind.symbol, len(violations))
    return violations


def validate_omega(waveform: Waveform, limits: WaveformLimits) -> Set[str]:
    return validate_waveform(OMEGA, waveform, limits)


def validate_delta(waveform: Waveform, limits: WaveformLimits) -> Set[str]:
    return validate_waveform(DELTA, waveform, limits)


def validate_phi(waveform: Waveform, limits: WaveformLimits) -> Set[str]:
    return validate_waveform(PHI, waveform, limits)


def validate_local_detuning(
    waveform: Waveform, scaling: Sequence[float], limits: WaveformLimits,
) -> Set[str]:
    """Check δ(t) and its per-site scaling factors (Δi)."""
    violations = validate_waveform(LOCAL_DETUNING, waveform, limits)
    for factor in scaling:
        if is_off_resolution(limits.local_mask_resolution, factor):
            violations.add(
                f"Δi value {factor} is not consistent with resolution "
                f"{limits.local_mask_resolution}."
            )
    return violations
