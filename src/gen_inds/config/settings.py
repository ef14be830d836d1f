"""Configuration settings using Pydantic Settings.

Provides typed allocator defaults with environment variable support.

Usage:
    from gen_inds.config import AllocatorSettings

    # Load from environment variables (GEN_INDS_*)
    settings = AllocatorSettings()

    # Or override with explicit values
    settings = AllocatorSettings(default_capacity=16, double_free="error")
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DoubleFreePolicy = Literal["ignore", "warn", "error"]


class AllocatorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for GenerationalAllocator.

    Attributes:
        default_capacity: Reserved capacity when no explicit capacity is given.
        double_free: What deallocate() does with an already vacant, still valid
            handle: "ignore" returns None, "warn" also issues DoubleFreeWarning,
            "error" raises DoubleFreeError.

    Environment Variables:
        GEN_INDS_DEFAULT_CAPACITY
        GEN_INDS_DOUBLE_FREE
    """

    model_config = SettingsConfigDict(
        env_prefix="GEN_INDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_capacity: int = Field(default=100, ge=0)
    double_free: DoubleFreePolicy = "ignore"
