"""Device capabilities configuration module."""

from .capabilities import (
    DeviceCapabilities,
    LatticeArea,
    LatticeCapabilities,
    LatticeGeometry,
    RydbergCapabilities,
    WaveformLimits,
)
from .defaults import DEFAULT_CAPABILITIES_DOCUMENT, default_capabilities
from .errors import CapabilitiesLoaderError, MalformedCapabilitiesError
from .loader import (
    capabilities_from_dict,
    load_capabilities_from_yaml,
    load_capabilities_from_yaml_safe,
)
from .yaml_schema import CapabilitiesYamlSchema

__all__ = [
    "CapabilitiesLoaderError",
    "CapabilitiesYamlSchema",
    "DEFAULT_CAPABILITIES_DOCUMENT",
    "DeviceCapabilities",
    "LatticeArea",
    "LatticeCapabilities",
    "LatticeGeometry",
    "MalformedCapabilitiesError",
    "RydbergCapabilities",
    "WaveformLimits",
    "capabilities_from_dict",
    "default_capabilities",
    "load_capabilities_from_yaml",
    "load_capabilities_from_yaml_safe",
]
