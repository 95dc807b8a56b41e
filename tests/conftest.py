"""
Test Configuration
==================

Pytest fixtures and test configuration for patternbook.
"""

import pytest


ENV_VARS = (
    "PATTERNBOOK_CONFIG",
    "PATTERNBOOK_LOG_LEVEL",
    "PATTERNBOOK_LOG_FORMAT",
    "PATTERNBOOK_WATCH_HISTORY",
    "PATTERNBOOK_FRAME_TIME",
    "PATTERNBOOK_INVENTORY_CAPACITY",
    "PATTERNBOOK_RIDE_STEP_DELAY",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PATTERNBOOK_* override from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings():
    """Provide default Settings without touching the filesystem."""
    from patternbook.config import Settings

    return Settings()


@pytest.fixture
def three_frames():
    """Frames (0,9), (10,19), (20,29)."""
    from patternbook.video import Frame

    return [Frame(0, 9), Frame(10, 19), Frame(20, 29)]


@pytest.fixture
def stored_video(three_frames):
    """A FileSystem holding 'video1' with three frames."""
    from patternbook.video import FileSystem, Video

    fs = FileSystem()
    fs.set_video(Video.from_frames("video1", three_frames))
    return fs


@pytest.fixture
def sample_inventory():
    """Inventory preloaded with the demo products."""
    from patternbook.behavioral.iterator import SAMPLE_PRODUCTS, Inventory

    inventory = Inventory()
    for product in SAMPLE_PRODUCTS:
        inventory.add_product(product)
    return inventory
