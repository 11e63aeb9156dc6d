"""Tests for the ``python -m demo_service`` entry module."""

import importlib
import sys

import pytest

from demo_service import server as server_module


def test_importing_main_module_does_not_start_server(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[None] = []
    monkeypatch.setattr(server_module, "main", lambda: calls.append(None))
    monkeypatch.delitem(sys.modules, "demo_service.__main__", raising=False)

    module = importlib.import_module("demo_service.__main__")

    assert calls == []
    assert module.main is not None
