"""Startup behaviour of the server entry point."""

import logging
import shutil
import sys

import pytest
from fastmcp import FastMCP

import codebolt_docs_mcp.server as server_mod
from codebolt_docs_mcp.errors import CatalogError
from codebolt_docs_mcp.registry import BUNDLED_CATALOG


@pytest.fixture()
def run_calls(monkeypatch):
    """Fresh server singleton, stdio argv and a stubbed transport."""
    calls = []
    monkeypatch.setattr(server_mod, "_server", None)
    monkeypatch.setattr(sys, "argv", ["codebolt-docs-mcp"])
    monkeypatch.setattr(FastMCP, "run", lambda self, **kwargs: calls.append(kwargs))
    return calls


def test_main_logs_catalog_size_then_starts(run_calls, monkeypatch, tmp_path, caplog) -> None:
    # Copy so the loader cache misses and the load is logged
    catalog = tmp_path / "sdk_modules.json"
    shutil.copy(BUNDLED_CATALOG, catalog)
    monkeypatch.setenv("CODEBOLT_DOCS_CATALOG_PATH", str(catalog))
    monkeypatch.setenv("CODEBOLT_DOCS_LOG_LEVEL", "INFO")
    caplog.set_level(logging.INFO)

    server_mod.main()

    messages = [record.getMessage() for record in caplog.records]
    loaded = [m for m in messages if m.startswith("Loaded 9 modules, 20 functions")]
    starting = [m for m in messages if m == "Codebolt SDK Documentation MCP starting (stdio)"]
    assert loaded and starting
    assert messages.index(loaded[0]) < messages.index(starting[0])
    assert run_calls == [{"transport": "stdio", "show_banner": False}]


def test_main_logs_catalog_failure_and_exits(run_calls, monkeypatch, tmp_path, caplog) -> None:
    monkeypatch.setenv("CODEBOLT_DOCS_CATALOG_PATH", str(tmp_path / "missing.json"))
    caplog.set_level(logging.INFO)

    with pytest.raises(SystemExit) as excinfo:
        server_mod.main()

    assert excinfo.value.code == 1
    assert run_calls == []
    failures = [r for r in caplog.records if r.getMessage() == "Failed to start Codebolt SDK Documentation MCP"]
    assert len(failures) == 1
    assert isinstance(failures[0].exc_info[1], CatalogError)
    assert not any("starting" in r.getMessage() for r in caplog.records)


def test_get_server_is_built_once(monkeypatch) -> None:
    monkeypatch.setattr(server_mod, "_server", None)
    assert server_mod.get_server() is server_mod.get_server()
