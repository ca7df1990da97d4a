"""Pytest configuration for starfield tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture(autouse=True)
def clear_device_positions():
    """Clear device star positions before and after each test."""
    # Import here so Taichi is initialized before the fields are declared
    from src.starfield.shell.kernels import clear_positions

    clear_positions()
    yield
    clear_positions()


@pytest.fixture
def seeded_source():
    """A reproducible NumPy-backed random source."""
    from src.starfield.core.random_source import NumpyRandomSource

    return NumpyRandomSource(seed=1234)
