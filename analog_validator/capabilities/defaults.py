"""Built-in device capabilities.

The document mirrors a 256-site neutral-atom device, already expressed in
μm, μs, rad⋅MHz and rad. Callers pass the returned object to ``validate``
explicitly; it is built once per process and never mutated.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from .capabilities import DeviceCapabilities
from .loader import capabilities_from_dict

DEFAULT_CAPABILITIES_DOCUMENT: Dict[str, Any] = {
    "task": {"number_qubits_max": 256},
    "lattice": {
        "geometry": {
            "position_resolution": 0.1,
            "spacing_radial_min": 4.0,
            "spacing_vertical_min": 4.0,
        },
        "area": {"width": 75.0, "height": 76.0},
    },
    "rydberg": {
        "rabi_frequency": {
            "max_time": 4.0,
            "min_time_step": 0.05,
            "max_slope": 250.0,
            "min_value": 0.0,
            "max_value": 15.8,
            "time_resolution": 0.001,
            "value_resolution": 0.0004,
        },
        "detuning": {
            "max_time": 4.0,
            "min_time_step": 0.05,
            "max_slope": 2500.0,
            "min_value": -125.0,
            "max_value": 125.0,
            "time_resolution": 0.001,
            "value_resolution": 2.0e-7,
        },
        "phase": {
            "max_time": 4.0,
            "min_time_step": 0.05,
            "min_value": -99.0,
            "max_value": 99.0,
            "time_resolution": 0.001,
            "value_resolution": 5.0e-7,
        },
        "local_detuning": {
            "max_time": 4.0,
            "min_time_step": 0.05,
            "max_slope": 1250.0,
            "min_value": 0.0,
            "max_value": 125.0,
            "time_resolution": 0.001,
            "value_resolution": 2.0e-7,
            "local_mask_resolution": 0.01,
        },
    },
}


@lru_cache(maxsize=None)
def default_capabilities() -> DeviceCapabilities:
    """Return the process-wide built-in DeviceCapabilities."""
    return capabilities_from_dict(DEFAULT_CAPABILITIES_DOCUMENT)
