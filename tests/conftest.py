"""Shared pytest fixtures and test helpers for cw20kit tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from cw20kit.config.logging import PACKAGE_LOGGER
from cw20kit.config.settings import Cw20Settings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_package_logging() -> Generator[None]:
    """CLI runs bind the package handler to the runner's stderr; undo it afterwards."""
    package = logging.getLogger(PACKAGE_LOGGER)
    saved = (package.handlers[:], package.level, package.propagate)
    yield
    package.handlers, level, package.propagate = saved
    package.setLevel(level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory with no config file in scope."""
    monkeypatch.delenv("CW20KIT_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> Cw20Settings:
    return Cw20Settings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI sees no stray config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Message builders
# ---------------------------------------------------------------------------


def _instantiate_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Cash Token",
        "symbol": "CASH",
        "decimals": 6,
        "initial_balances": [{"address": "wasm1alice", "amount": "1000"}],
        "mint": {"minter": "wasm1minter", "cap": "5000"},
        "marketing": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def instantiate_payload() -> Callable[..., dict[str, Any]]:
    """Build a valid creation request dict; keyword args override fields."""
    return _instantiate_payload


@pytest.fixture
def instantiate_json() -> Callable[..., str]:
    """Same as ``instantiate_payload`` but serialized to JSON text."""

    def _build(**overrides: Any) -> str:
        return json.dumps(_instantiate_payload(**overrides))

    return _build
