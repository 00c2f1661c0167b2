"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-02

Global pytest configuration and fixtures for the trisplit test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os

# Qt must not need a display when widgets are created in tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from trisplit.app.state.observable import ObservableValue
from trisplit.controllers.panel_layout_controller import PanelLayoutController
from trisplit.infra.storage.memory_store import InMemoryKeyValueStore


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture
def store():
    """Empty in-memory key/value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def width():
    """Container width observable fixed at 1000px (12% panel floor, 36.8% main floor)."""
    return ObservableValue(1000.0)


@pytest.fixture
def make_controller(store, width):
    """Factory building controllers on the shared store and width observable."""
    created = []

    def _make(variant="regular", has_input_panel=True, container_width=None):
        controller = PanelLayoutController(
            store,
            container_width=width if container_width is None else container_width,
            variant=variant,
            has_input_panel=has_input_panel,
        )
        created.append(controller)
        return controller

    yield _make

    for controller in created:
        controller.close()
