"""
Tests for QSettingsKeyValueStore.

Author: Michael Economou
Date: 2026-10-03
"""

import json

import pytest
from PyQt5.QtCore import QSettings

from trisplit.controllers.panel_layout_controller import PanelLayoutController
from trisplit.infra.storage.qsettings_store import QSettingsKeyValueStore

KEY = "TRISPLIT_PANEL_WIDTH_REGULAR"


@pytest.fixture
def settings(qapp, tmp_path):
    return QSettings(str(tmp_path / "layout.ini"), QSettings.IniFormat)


def test_set_get_delete(settings):
    store = QSettingsKeyValueStore(settings)
    value = json.dumps({"left": 30, "main": 40, "right": 30})

    assert store.get(KEY) is None
    store.set(KEY, value)
    assert json.loads(store.get(KEY)) == {"left": 30, "main": 40, "right": 30}

    store.delete(KEY)
    assert store.get(KEY) is None


def test_values_live_under_group(settings):
    store = QSettingsKeyValueStore(settings, group="ndv")

    store.set(KEY, "x")

    assert settings.value(f"ndv/{KEY}") == "x"


def test_values_survive_reopen(settings, tmp_path):
    QSettingsKeyValueStore(settings).set(KEY, json.dumps({"left": 20, "main": 50, "right": 30}))

    reopened = QSettings(str(tmp_path / "layout.ini"), QSettings.IniFormat)
    stored = QSettingsKeyValueStore(reopened).get(KEY)

    assert json.loads(stored) == {"left": 20, "main": 50, "right": 30}


def test_controller_round_trip(settings):
    store = QSettingsKeyValueStore(settings)
    first = PanelLayoutController(store, container_width=1000)
    first.on_drag((300, 0))
    first.on_resize_end()
    expected = first.allocation
    first.close()

    second = PanelLayoutController(store, container_width=1000)

    assert second.allocation == expected
    second.close()
