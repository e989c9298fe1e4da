"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pathlib import Path
from uuid import UUID

from datatracker import LocalCounterStore, PersistenceManager, TrackerSettings


@pytest.fixture
def store() -> LocalCounterStore:
    """Fresh, empty counter store."""
    return LocalCounterStore()


@pytest.fixture
def world_dir(tmp_path: Path) -> Path:
    """Storage root of a fake world."""
    root = tmp_path / "world"
    root.mkdir()
    return root


@pytest.fixture
def settings(world_dir: Path) -> TrackerSettings:
    return TrackerSettings(enable_data_tracking=True, storage_root=world_dir)


@pytest.fixture
def disabled_settings(world_dir: Path) -> TrackerSettings:
    return TrackerSettings(enable_data_tracking=False, storage_root=world_dir)


@pytest.fixture
def manager(store: LocalCounterStore, settings: TrackerSettings) -> PersistenceManager:
    return PersistenceManager(store, settings)


@pytest.fixture
def player() -> UUID:
    return UUID("069a79f4-44e9-4726-a5be-fca90e38aaf5")


@pytest.fixture
def other_player() -> UUID:
    return UUID("853c80ef-3c37-49fd-aa49-938b674adae6")
