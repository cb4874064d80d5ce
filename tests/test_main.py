import re
import threading
import time

import pytest

import main
from core import catalog as catalog_module
from core.catalog import LOADED, UNAVAILABLE, CatalogStore
from core.results import LOAD_FAILURE_MESSAGE, LOADING_MESSAGE, PLACEHOLDER_IMAGE_URL, run_search
from main import current_time_in, render_response


def _wait_for_status(store: CatalogStore, status: str) -> None:
    deadline = time.monotonic() + 5
    while store.status != status and time.monotonic() < deadline:
        time.sleep(0.01)
    assert store.status == status


def _scripted_input(monkeypatch, answers) -> None:
    # Each answer is a string or a callable returning one.
    remaining = iter(answers)

    def fake_input(prompt: str = "") -> str:
        answer = next(remaining)
        return answer() if callable(answer) else answer

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def quiet_env(monkeypatch):
    monkeypatch.setattr(main, "load_dotenv", lambda: None)
    monkeypatch.delenv("TRAVEL_TIMEZONE", raising=False)


def test_render_response_lists_records(loaded_store) -> None:
    text = render_response(run_search("beach", loaded_store))
    lines = text.splitlines()

    assert lines[0] == 'Showing 3 recommendations for "beach"'
    assert "  Copacabana" in lines
    assert "    [Beach]" in lines
    assert "    [Brazil]" in lines
    # Beachwood has no image of its own.
    assert f"    {PLACEHOLDER_IMAGE_URL}" in lines


def test_render_response_no_matches(loaded_store) -> None:
    text = render_response(run_search("xyznotfound", loaded_store))

    assert text == 'Showing 0 recommendations for "xyznotfound"\nNo results found for "xyznotfound".'


def test_render_response_empty_query(loaded_store) -> None:
    assert render_response(run_search("", loaded_store)) == "Please enter a keyword and click Search."


def test_current_time_in_uses_24_hour_format() -> None:
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4}, \d{2}:\d{2}:\d{2}", current_time_in("Europe/Belgrade"))


def test_background_load_prints_notice_on_failure(monkeypatch, tmp_path, capsys) -> None:
    store = CatalogStore(source=str(tmp_path / "missing.json"))
    monkeypatch.setattr(catalog_module, "default_store", store)

    main.start_background_load().join(timeout=5)

    out = capsys.readouterr().out
    assert out.count("Failed to load recommendation data") == 1
    assert "missing.json" in out
    assert store.status == UNAVAILABLE


def test_background_load_is_silent_on_success(monkeypatch, catalog_file, capsys) -> None:
    store = CatalogStore(source=str(catalog_file))
    monkeypatch.setattr(catalog_module, "default_store", store)

    main.start_background_load().join(timeout=5)

    assert capsys.readouterr().out == ""
    assert store.status == LOADED


def test_background_load_thread_is_daemon(monkeypatch, catalog_file) -> None:
    monkeypatch.setattr(catalog_module, "default_store", CatalogStore(source=str(catalog_file)))

    loader = main.start_background_load()
    loader.join(timeout=5)

    assert loader.daemon


def test_search_before_load_completes_does_not_block(monkeypatch, sample_catalog, capsys, quiet_env) -> None:
    gate = threading.Event()

    def slow_load_catalog(source):
        gate.wait(5)
        return sample_catalog

    monkeypatch.setattr(catalog_module, "load_catalog", slow_load_catalog)
    store = CatalogStore(source="catalog.json")
    monkeypatch.setattr(catalog_module, "default_store", store)

    def release_load() -> str:
        gate.set()
        _wait_for_status(store, LOADED)
        return "beach"

    _scripted_input(monkeypatch, ["beach", release_load, "quit"])

    main.run_cli()

    out = capsys.readouterr().out
    assert LOADING_MESSAGE in out
    assert out.index(LOADING_MESSAGE) < out.index('Showing 3 recommendations for "beach"')
    assert "Goodbye" in out


def test_run_cli_reports_failed_load_once(monkeypatch, tmp_path, capsys, quiet_env) -> None:
    store = CatalogStore(source=str(tmp_path / "missing.json"))
    monkeypatch.setattr(catalog_module, "default_store", store)

    def after_failure() -> str:
        _wait_for_status(store, UNAVAILABLE)
        return "beach"

    _scripted_input(monkeypatch, [after_failure, "temples", "q"])

    main.run_cli()

    out = capsys.readouterr().out
    assert out.count("Failed to load recommendation data:") == 1
    assert out.count(LOAD_FAILURE_MESSAGE) == 2


@pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
def test_run_cli_exits_cleanly_on_interrupt(monkeypatch, capsys, quiet_env, interrupt) -> None:
    monkeypatch.setattr(main, "start_background_load", lambda: None)

    def raise_interrupt(prompt: str = "") -> str:
        raise interrupt

    monkeypatch.setattr("builtins.input", raise_interrupt)

    main.run_cli()

    assert "Goodbye" in capsys.readouterr().out
