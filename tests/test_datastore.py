import json

import pytest

from wiegandac.datastore import DataStore


def test_missing_key_loads_none():
    assert DataStore().load("wifi_ssid") is None


def test_store_and_load_round_trip():
    store = DataStore()
    store.store("wifi_ssid", "garage")
    assert store.load("wifi_ssid") == "garage"


def test_store_replaces_value():
    store = DataStore()
    store.store("k", "one")
    store.store("k", "two")
    assert store.load("k") == "two"


def test_empty_value_is_distinct_from_missing():
    store = DataStore()
    store.store("empty", "")
    assert store.load("empty") == ""


def test_remove_reports_existence():
    store = DataStore()
    store.store("k", "v")
    assert store.remove("k") is True
    assert store.load("k") is None
    assert store.remove("k") is False


def test_values_persist_across_instances(tmp_path):
    path = tmp_path / "prefs.json"
    DataStore(path).store("wifi_ssid", "garage")
    assert DataStore(path).load("wifi_ssid") == "garage"
    assert json.loads(path.read_text(encoding="utf-8")) == {"wifi_ssid": "garage"}


def test_removal_persists(tmp_path):
    path = tmp_path / "prefs.json"
    first = DataStore(path)
    first.store("a", "1")
    first.store("b", "2")
    first.remove("a")
    second = DataStore(path)
    assert second.load("a") is None
    assert second.load("b") == "2"


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        DataStore().store("", "v")


def test_non_string_value_rejected():
    with pytest.raises(TypeError):
        DataStore().store("k", 5)


def test_corrupt_file_rejected(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        DataStore(path).load("k")