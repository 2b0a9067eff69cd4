"""
PyElectron Comlink Capability Shim

Some RPC libraries feature-detect a MessageChannel type when they are
imported, even if the application only ever talks through a message
adapter. patch_capability installs a stub under that name so the check
passes. The stub cannot be instantiated.

This mutates a shared namespace; call it once, explicitly, before the RPC
library is imported. Nothing else in this package calls it.
"""

from typing import Any, MutableMapping, Optional, Union

from pyelectron_comlink.utils.config import AdapterConfig
from pyelectron_comlink.utils.errors import CapabilityNotImplementedError
from pyelectron_comlink.utils.logging import get_logger

logger = get_logger(__name__)

STUB_MARKER = '__pyelectron_comlink_stub__'


def _make_stub(name: str) -> type:
    def __init__(self, *args, **kwargs):
        raise CapabilityNotImplementedError(
            f"{name} is not available in this context",
            details={'capability': name}
        )

    return type(name, (), {
        '__init__': __init__,
        '__doc__': f"Placeholder for {name}; instantiating it always fails.",
        STUB_MARKER: True,
    })


def is_capability_stub(obj: Any) -> bool:
    """True if obj is a stub installed by patch_capability."""
    return isinstance(obj, type) and obj.__dict__.get(STUB_MARKER, False) is True


def patch_capability(namespace: Union[MutableMapping[str, Any], Any],
                     name: Optional[str] = None,
                     config: Optional[AdapterConfig] = None) -> None:
    """
    Install a non-functional stub type under name if namespace lacks one.

    An existing definition, real or stub, is never replaced.

    Args:
        namespace: Mapping (such as a module ``__dict__``) or attribute-bearing
            object (such as a module)
        name: Type name the RPC library checks for; defaults to
            the capability_name of config
        config: Adapter configuration, defaults to AdapterConfig()
    """
    name = name or (config or AdapterConfig()).capability_name
    is_mapping = hasattr(namespace, 'keys') and hasattr(namespace, '__setitem__')

    if is_mapping:
        if name in namespace:
            return
        namespace[name] = _make_stub(name)
    else:
        if hasattr(namespace, name):
            return
        setattr(namespace, name, _make_stub(name))

    logger.debug(f"Installed {name} capability stub")
