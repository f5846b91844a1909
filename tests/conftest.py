"""
Pytest Configuration and Fixtures for Rift Core Tests
======================================================

Purpose
-------
Centralized fixtures for the Rift Core test suite: configuration isolation,
zone configurations and seeded random streams.

Architecture Notes
------------------
- Environment variables are set before ``riftcore`` is imported so the
  static Config and the logging subsystem pick them up.
- ConfigManager is class-level state; every test starts from packaged
  defaults with no overrides.
- Unit tests are pure and fast; integration tests drive a whole zone run.
"""

from __future__ import annotations

import os

os.environ.setdefault("RIFT_ENVIRONMENT", "testing")
os.environ.setdefault("RIFT_LOG_LEVEL", "WARNING")

from typing import Generator

import pytest

from riftcore.core.config.manager import ConfigManager
from riftcore.modules.enemy.models import ScalingProfile, ZoneConfig
from riftcore.modules.shared.rng import SeededRandom

# ============================================================================
# CONFIGURATION ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    """
    Reset ConfigManager overrides, validators and metrics around each test.

    Scope: function (overrides never leak between tests)
    """
    ConfigManager.reset()
    yield
    ConfigManager.reset()


# ============================================================================
# ZONE FIXTURES
# ============================================================================


@pytest.fixture
def zone_config() -> ZoneConfig:
    """Mid-game zone with neutral scaling (level 5, no damping)."""
    return ZoneConfig(level=5, seed="zone-5")


@pytest.fixture
def early_zone() -> ZoneConfig:
    """First zone: common-only decks and 0.65 health damping."""
    return ZoneConfig(level=1, seed="zone-1")


@pytest.fixture
def late_zone() -> ZoneConfig:
    """Late zone with boosted scaling and the largest deck bonus."""
    return ZoneConfig(
        level=8,
        seed="zone-8",
        enemy_scaling=ScalingProfile(health_multiplier=1.5),
        boss_scaling=ScalingProfile(health_multiplier=2.0),
    )


# ============================================================================
# RANDOM STREAMS
# ============================================================================


@pytest.fixture
def rng() -> SeededRandom:
    """Deterministic stream for roller tests."""
    return SeededRandom("test-seed")


@pytest.fixture
def scripted_rng():
    """
    Factory for zero-arg callables returning fixed draws in order.

    Usage: ``weighted_choice(items, weight, scripted_rng(0.1, 0.9))``
    """

    def _make(*values: float):
        iterator = iter(values)
        return lambda: next(iterator)

    return _make
