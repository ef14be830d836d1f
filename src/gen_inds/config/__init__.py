"""Configuration module using Pydantic Settings.

Usage:
    from gen_inds.config import AllocatorSettings

    settings = AllocatorSettings(default_capacity=1024)
"""

from gen_inds.config.settings import AllocatorSettings, DoubleFreePolicy

__all__ = [
    "AllocatorSettings",
    "DoubleFreePolicy",
]
