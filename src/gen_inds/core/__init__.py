"""Core primitives: stateless value types shared by the allocator.

Architecture Note:
    core/ holds plain data with no allocator state.
    For the stateful allocator, see storage/.
"""

from gen_inds.core.identity import VACANT, GenIndex, GenIndexEntry

__all__ = [
    # Identity
    "GenIndex",
    "GenIndexEntry",
    "VACANT",
]
