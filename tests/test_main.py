"""Tests for the command line entry point."""

import os
import sqlite3
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from userstore.__main__ import build_parser, main

if TYPE_CHECKING:
    from pathlib import Path


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.env_file == ".env"
    assert args.host == "127.0.0.1"
    assert args.port == 8000
    assert not args.reload
    assert not args.init_db


def test_init_db_creates_table(
    tmp_path: "Path",
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    db_path = tmp_path / "nested" / "users.db"
    monkeypatch.setenv("DATABASE_PATH", str(db_path))

    with patch("userstore.__main__.uvicorn.run") as run:
        main(["--init-db", "--env-file", str(tmp_path / "missing.env")])

    run.assert_not_called()
    connection = sqlite3.connect(db_path)
    try:
        tables = connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'user'"
        ).fetchall()
    finally:
        connection.close()
    assert tables == [("user",)]


def test_main_runs_uvicorn(tmp_path: "Path", monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "users.db"))

    with patch("userstore.__main__.uvicorn.run") as run:
        main(["--env-file", str(tmp_path / "missing.env"), "--port", "9000"])

    run.assert_called_once()
    assert run.call_args.kwargs["port"] == 9000


@pytest.mark.parametrize(
    ("extra_args", "reload", "workers"),
    [(["--reload"], True, 1), (["--workers", "3"], False, 3)],
)
def test_main_passes_factory_for_child_processes(
    tmp_path: "Path",
    monkeypatch: pytest.MonkeyPatch,
    extra_args: list[str],
    reload: bool,
    workers: int,
) -> None:
    """Test reload and multi-worker runs hand uvicorn an import string."""
    env_file = str(tmp_path / "custom.env")
    monkeypatch.setenv("ENV_FILE", "")

    with patch("userstore.__main__.uvicorn.run") as run:
        main(["--env-file", env_file, *extra_args])

    run.assert_called_once()
    assert run.call_args.args == ("userstore.app:create_app",)
    assert run.call_args.kwargs["factory"] is True
    assert run.call_args.kwargs["reload"] is reload
    assert run.call_args.kwargs["workers"] == workers
    assert os.environ["ENV_FILE"] == env_file
