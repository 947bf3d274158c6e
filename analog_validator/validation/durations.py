"""Cross-field check: every supplied waveform must share one duration."""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Optional, Set, Tuple

from analog_validator.task.models import Waveform

logger = logging.getLogger(__name__)


def check_durations(
    omega: Waveform,
    delta: Waveform,
    phi: Waveform,
    local_detuning: Optional[Waveform] = None,
) -> Set[str]:
    """Report each pair of waveforms whose durations differ.

    A mismatching pair produces one message, naming the longer waveform as
    greater than the shorter one.
    """
    durations: Dict[str, float] = {
        "Ω": omega.duration,
        "Δ": delta.duration,
        "φ": phi.duration,
    }
    if local_detuning is not None:
        durations["δ"] = local_detuning.duration

    mismatched: Set[FrozenSet[Tuple[str, float]]] = set()
    for f1, d1 in durations.items():
        for f2, d2 in durations.items():
            if d1 != d2:
                mismatched.add(frozenset({(f1, d1), (f2, d2)}))

    violations: Set[str] = set()
    for pair in mismatched:
        (short_name, short_duration), (long_name, long_duration) = sorted(
            pair, key=lambda item: item[1]
        )
        violations.add(
            f"{long_name}(t) duration of {long_duration} μs is greater than "
            f"{short_name}(t) duration of {short_duration} μs"
        )

    logger.debug("Durations %s: %d mismatch(es)", durations, len(violations))
    return violations
