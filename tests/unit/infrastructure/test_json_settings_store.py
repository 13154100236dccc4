"""Tests for JsonFileLanguageSettingsStore."""

import json
import threading

import pytest

from src.infrastructure.settings.json_settings_store import JsonFileLanguageSettingsStore


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "nested" / "settings.json")


def test_missing_file_means_no_language(settings_path):
    assert JsonFileLanguageSettingsStore(settings_path).get_selected_language() is None


@pytest.mark.parametrize("code", ["it", "es", "de"])
def test_round_trips_supported_language(settings_path, code):
    store = JsonFileLanguageSettingsStore(settings_path)

    store.set_selected_language(code)

    assert store.get_selected_language() == code
    with open(settings_path, encoding="utf-8") as fh:
        assert json.load(fh) == {"selected_language": code}


def test_selection_replaces_previous_value(settings_path):
    store = JsonFileLanguageSettingsStore(settings_path)

    store.set_selected_language("it")
    store.set_selected_language("de")

    assert store.get_selected_language() == "de"


def test_rejects_unsupported_language(settings_path):
    store = JsonFileLanguageSettingsStore(settings_path)

    with pytest.raises(ValueError, match="fr"):
        store.set_selected_language("fr")
    assert store.get_selected_language() is None


def test_corrupt_file_means_no_language(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFileLanguageSettingsStore(str(path)).get_selected_language() is None


def test_unknown_stored_code_is_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"selected_language": "xx"}), encoding="utf-8")

    assert JsonFileLanguageSettingsStore(str(path)).get_selected_language() is None


def test_reads_during_concurrent_writes_always_see_a_language(settings_path):
    store = JsonFileLanguageSettingsStore(settings_path)
    store.set_selected_language("it")
    stop = threading.Event()

    def toggle():
        codes = ("de", "it")
        i = 0
        while not stop.is_set():
            store.set_selected_language(codes[i % 2])
            i += 1

    writer = threading.Thread(target=toggle)
    writer.start()
    try:
        reads = [store.get_selected_language() for _ in range(5000)]
    finally:
        stop.set()
        writer.join()

    assert None not in reads
    assert set(reads) <= {"it", "de"}


def test_write_leaves_no_temporary_files(tmp_path):
    path = tmp_path / "settings.json"
    store = JsonFileLanguageSettingsStore(str(path))

    store.set_selected_language("es")
    store.set_selected_language("it")

    assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]
