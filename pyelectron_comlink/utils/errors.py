"""
PyElectron Comlink exception classes

This module defines the exceptions raised by the message adapter,
keeping a single hierarchy rooted at ComlinkError.
"""

from typing import Optional


class ComlinkError(Exception):
    """Base exception for all PyElectron Comlink errors"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ContextError(ComlinkError):
    """Adapter created outside a recognised host or UI process"""
    pass


class ConfigError(ComlinkError):
    """Errors related to adapter configuration"""
    pass


class TransportError(ComlinkError):
    """Errors related to the underlying IPC transport handles"""
    pass


class UnsupportedOperationError(TransportError):
    """Operation the transport cannot perform, such as ownership transfer"""
    pass


class CapabilityNotImplementedError(ComlinkError, NotImplementedError):
    """Raised when a capability stub installed by patch_capability is used"""
    pass


def handle_exception(func):
    """
    Decorator to handle exceptions and convert them to Comlink exceptions
    """
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ComlinkError:
            raise
        except Exception as e:
            raise ComlinkError(
                f"Unexpected error in {func.__name__}: {str(e)}",
                details={'original_exception': type(e).__name__}
            ) from e
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper
