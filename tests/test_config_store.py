"""
Tests for ConfigKeyValueStore (allocations kept in config.json).

Author: Michael Economou
Date: 2026-10-03
"""

import json

import pytest

from trisplit.app.ports.key_value_store import KeyValueStorePort
from trisplit.controllers.panel_layout_controller import PanelLayoutController
from trisplit.infra.storage.config_store import ConfigKeyValueStore
from trisplit.utils.shared.json_config_manager import create_app_config_manager

KEY = "TRISPLIT_PANEL_WIDTH_REGULAR"


@pytest.fixture
def manager(tmp_path):
    return create_app_config_manager(app_name="testapp", config_dir=str(tmp_path))


def read_config(manager):
    return json.loads(manager.config_file.read_text(encoding="utf-8"))


def test_implements_port(manager):
    assert isinstance(ConfigKeyValueStore(manager), KeyValueStorePort)


def test_set_get_delete(manager):
    store = ConfigKeyValueStore(manager)

    assert store.get(KEY) is None
    store.set(KEY, '{"left": 30, "main": 40, "right": 30}')
    assert store.get(KEY) == '{"left": 30, "main": 40, "right": 30}'

    store.delete(KEY)
    assert store.get(KEY) is None
    store.delete(KEY)


def test_writes_are_saved_to_config_file(manager):
    store = ConfigKeyValueStore(manager)

    store.set(KEY, "value")

    assert read_config(manager)["panel_layout"][KEY] == "value"

    store.delete(KEY)

    assert KEY not in read_config(manager)["panel_layout"]


def test_autosave_disabled_leaves_file_alone(manager):
    store = ConfigKeyValueStore(manager, autosave=False)

    store.set(KEY, "value")

    assert not manager.config_file.exists()


def test_custom_category_is_created(manager):
    store = ConfigKeyValueStore(manager, category_name="splitters")

    store.set(KEY, "value")

    assert "splitters" in manager.list_categories()
    assert read_config(manager)["splitters"][KEY] == "value"


def test_allocation_survives_restart(tmp_path):
    first_manager = create_app_config_manager(app_name="testapp", config_dir=str(tmp_path))
    first = PanelLayoutController(ConfigKeyValueStore(first_manager), container_width=1000)
    first.on_resize(500, "left")
    first.on_resize_end()
    expected = first.allocation
    first.close()

    second_manager = create_app_config_manager(app_name="testapp", config_dir=str(tmp_path))
    second = PanelLayoutController(ConfigKeyValueStore(second_manager), container_width=1000)

    assert second.allocation == expected
    second.close()


def test_invalid_stored_allocation_is_erased_from_file(manager):
    store = ConfigKeyValueStore(manager)
    store.set(KEY, json.dumps({"left": -1, "main": 40, "right": 30}))

    controller = PanelLayoutController(store, container_width=1000)

    assert controller.allocation.total == pytest.approx(100)
    assert KEY not in read_config(manager)["panel_layout"]
    controller.close()


def write_config(tmp_path, entries):
    (tmp_path / "config.json").write_text(json.dumps({"panel_layout": entries}), encoding="utf-8")


def test_hand_edited_object_entry_reads_as_json(tmp_path):
    write_config(tmp_path, {KEY: {"left": 25, "main": 45, "right": 30}})
    store = ConfigKeyValueStore(create_app_config_manager(app_name="testapp", config_dir=str(tmp_path)))

    assert json.loads(store.get(KEY)) == {"left": 25, "main": 45, "right": 30}

    controller = PanelLayoutController(store, container_width=1000)

    assert controller.allocation.as_tuple() == (25.0, 45.0, 30.0)
    controller.close()


def test_hand_edited_invalid_object_entry_is_erased(tmp_path):
    write_config(tmp_path, {KEY: {"left": -5, "main": 45, "right": 30}})
    manager = create_app_config_manager(app_name="testapp", config_dir=str(tmp_path))

    controller = PanelLayoutController(ConfigKeyValueStore(manager), container_width=1000)

    assert controller.allocation.total == pytest.approx(100)
    assert KEY not in read_config(manager)["panel_layout"]
    controller.close()
