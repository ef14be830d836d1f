"""gen_inds: generational-index allocator.

Usage:
    from gen_inds import GenerationalAllocator, StaleHandleError

    nodes = GenerationalAllocator[str].with_capacity(16)
    a = nodes.allocate("a")
    nodes.deallocate(a)
    b = nodes.allocate("b")      # reuses a's slot, generation + 1

    assert nodes.get(a) is None  # stale handle reads as absent
    assert nodes[b] == "b"

    try:
        nodes.deallocate(a)
    except StaleHandleError:
        ...
"""

__version__ = "0.1.0"

# Configuration
from gen_inds.config import AllocatorSettings

# Core primitives
from gen_inds.core import VACANT, GenIndex, GenIndexEntry

# Storage
from gen_inds.storage import (
    DoubleFreeError,
    DoubleFreeWarning,
    ErrorKind,
    GenerationalAllocator,
    GenIndexError,
    InternalError,
    NotFoundError,
    OverwriteEmptyError,
    SlotRef,
    StaleHandleError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "GenIndex",
    "GenIndexEntry",
    "VACANT",
    # Storage
    "GenerationalAllocator",
    "SlotRef",
    # Errors
    "ErrorKind",
    "GenIndexError",
    "NotFoundError",
    "StaleHandleError",
    "OverwriteEmptyError",
    "DoubleFreeError",
    "InternalError",
    "DoubleFreeWarning",
    # Config
    "AllocatorSettings",
]
