"""
Utility modules

This package provides error handling, logging and configuration
shared by the adapter and the loopback transport.
"""

from pyelectron_comlink.utils.errors import (
    ComlinkError,
    ContextError,
    ConfigError,
    TransportError,
    UnsupportedOperationError,
    CapabilityNotImplementedError,
)
from pyelectron_comlink.utils.logging import get_logger
from pyelectron_comlink.utils.config import AdapterConfig, load_config

__all__ = [
    # Exceptions
    "ComlinkError",
    "ContextError",
    "ConfigError",
    "TransportError",
    "UnsupportedOperationError",
    "CapabilityNotImplementedError",

    # Utilities
    "get_logger",
    "AdapterConfig",
    "load_config",
]
