"""Handle identity: generational indices and the slots they address."""

from gen_inds.core.identity.models import VACANT, GenIndex, GenIndexEntry

__all__ = [
    "GenIndex",
    "GenIndexEntry",
    "VACANT",
]
