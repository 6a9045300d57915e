from __future__ import annotations

import json
import logging

import pytest

from partial_updater import PartialUpdater
from partial_updater import app as app_module
from partial_updater.books import Book, BookNotFoundError, InMemoryBookStore
from partial_updater.ui import cli as cli_module


def test_patch_book_builds_default_collaborators() -> None:
    book = app_module.patch_book(17, {"author": "Eric Blair"})

    assert book == Book(id=17, title="Animal Farm", author="Eric Blair", edition=4)


def test_patch_book_uses_given_store() -> None:
    store = InMemoryBookStore([Book(id=1, title="Dune", author="Frank Herbert")])

    app_module.patch_book(1, {"incrementEdition": True}, store=store)

    assert store.get(1).edition == 2


def test_patch_book_keeps_empty_updater_passed_in() -> None:
    store = InMemoryBookStore()

    book = app_module.patch_book(17, {"title": "1984"}, updater=PartialUpdater(), store=store)

    assert book == Book(id=17, title="Animal Farm", author="George Orwell", edition=4)
    assert store.get(17).title == "Animal Farm"


def test_patch_book_keeps_empty_store_passed_in() -> None:
    store = InMemoryBookStore([])

    with pytest.raises(BookNotFoundError):
        app_module.patch_book(17, {"title": "1984"}, store=store)


def test_cli_prints_updated_book(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["update-book", "--id", "17", "--input", '{"title": "1984"}'])

    output = json.loads(capsys.readouterr().out)
    assert output == {"id": 17, "title": "1984", "author": "George Orwell", "edition": 4}


def test_cli_invalid_json_exits_with_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update-book", "--id", "17", "--input", "{oops"])

    assert excinfo.value.code == 2


def test_cli_non_object_json_exits_with_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update-book", "--id", "17", "--input", "[1, 2]"])

    assert excinfo.value.code == 2


def test_cli_validation_error_exits_with_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update-book", "--id", "17", "--input", '{"pages": 3}'])

    assert excinfo.value.code == 2


def test_cli_action_failure_exits_with_1() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update-book", "--id", "17", "--input", '{"title": null}'])

    assert excinfo.value.code == 1


def test_cli_unknown_book_exits_with_1() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update-book", "--id", "99", "--input", "{}"])

    assert excinfo.value.code == 1


def test_cli_log_level_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_configure_logging(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)

    cli_module.main(["--log-level", "debug", "update-book", "--id", "17", "--input", "{}"])

    assert captured["level"] == logging.DEBUG


def test_cli_bad_log_level_exits_with_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PARTIAL_UPDATER_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["update-book", "--id", "17", "--input", "{}"])

    assert excinfo.value.code == 2
