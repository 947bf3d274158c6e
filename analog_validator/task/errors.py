"""Analog task exception types."""

from __future__ import annotations


class TaskLoaderError(Exception):
    """Human-friendly task loader error intended for CLI output."""


class MalformedTaskError(ValueError):
    """Task inputs violate a structural precondition of the validator.

    Raised for shape problems (mismatched clock/value lengths, non-increasing
    clocks, positions that are neither 1D nor 2D). Physical-limit breaches
    are never raised; they are reported as violations.
    """
