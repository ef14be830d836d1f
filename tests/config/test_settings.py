"""Tests for allocator configuration."""

import pytest
from pydantic import ValidationError

from gen_inds import GenerationalAllocator
from gen_inds.config import AllocatorSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GEN_INDS_DEFAULT_CAPACITY", raising=False)
    monkeypatch.delenv("GEN_INDS_DOUBLE_FREE", raising=False)

    settings = AllocatorSettings(_env_file=None)

    assert settings.default_capacity == 100
    assert settings.double_free == "ignore"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEN_INDS_DEFAULT_CAPACITY", "8")
    monkeypatch.setenv("GEN_INDS_DOUBLE_FREE", "error")

    settings = AllocatorSettings(_env_file=None)

    assert settings.default_capacity == 8
    assert settings.double_free == "error"


def test_allocator_reads_environment_when_no_settings_given(monkeypatch):
    monkeypatch.setenv("GEN_INDS_DEFAULT_CAPACITY", "12")

    assert GenerationalAllocator().capacity == 12


def test_explicit_capacity_beats_settings():
    settings = AllocatorSettings(default_capacity=64, _env_file=None)

    assert GenerationalAllocator(3, settings=settings).capacity == 3
    assert GenerationalAllocator(settings=settings).capacity == 64


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_capacity": -1},
        {"double_free": "explode"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        AllocatorSettings(_env_file=None, **kwargs)
