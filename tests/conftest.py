"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from pyd2proto.protobuf import TypeNamer, TypeRegistry


@pytest.fixture
def registry() -> TypeRegistry:
    """Empty registry for a single compilation."""
    return TypeRegistry()


@pytest.fixture
def namer() -> TypeNamer:
    """Namer with no prefix and key-only names."""
    return TypeNamer()
