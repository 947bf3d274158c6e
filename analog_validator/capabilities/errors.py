"""Device capabilities exception types."""

from __future__ import annotations


class CapabilitiesLoaderError(Exception):
    """Human-friendly capabilities loader error intended for CLI output."""


class MalformedCapabilitiesError(ValueError):
    """Capability limits are missing a value a waveform check depends on."""
