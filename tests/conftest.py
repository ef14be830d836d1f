"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from gen_inds import AllocatorSettings, GenerationalAllocator


@pytest.fixture
def settings():
    """Settings pinned to defaults, independent of the environment."""
    return AllocatorSettings(default_capacity=100, double_free="ignore", _env_file=None)


@pytest.fixture
def allocator(settings):
    """Fresh allocator with default settings."""
    return GenerationalAllocator(settings=settings)


@pytest.fixture
def small_allocator(settings):
    """Allocator reserving exactly five slots."""
    return GenerationalAllocator.with_capacity(5, settings=settings)
