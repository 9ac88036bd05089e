"""Shared pytest fixtures for pyprimer tests."""

from __future__ import annotations

from pathlib import Path
import logging
import sys
import textwrap

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from pyprimer.examples.api import ExampleUnit  # noqa: E402
from pyprimer.examples.catalog import ExampleCatalog  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external resources")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _print_sum() -> None:
    print(1 + 2)


def _raise_boom() -> None:
    print("before failure")
    raise ValueError("boom")


def _silent() -> None:
    pass


@pytest.fixture
def sum_unit() -> ExampleUnit:
    return ExampleUnit(
        id="sample.sum",
        title="Sum",
        topic="Sample",
        body=_print_sum,
        expected_output=("3",),
    )


@pytest.fixture
def bad_unit() -> ExampleUnit:
    return ExampleUnit(
        id="sample.bad",
        title="Bad",
        topic="Sample",
        body=_raise_boom,
        expected_output=("never",),
    )


@pytest.fixture
def silent_unit() -> ExampleUnit:
    return ExampleUnit(id="other.silent", title="Silent", topic="Other", body=_silent)


@pytest.fixture
def sample_catalog(sum_unit, bad_unit, silent_unit) -> ExampleCatalog:
    catalog = ExampleCatalog()
    for unit in (sum_unit, bad_unit, silent_unit):
        catalog.register(unit)
    return catalog


@pytest.fixture
def passing_catalog(sum_unit, silent_unit) -> ExampleCatalog:
    catalog = ExampleCatalog()
    catalog.register(sum_unit)
    catalog.register(silent_unit)
    return catalog


@pytest.fixture
def topics_factory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Write a throwaway topics package and put it on sys.path.

    ``files`` maps paths relative to the package root to module source.
    Each module directory gets an ``__init__.py`` unless the path starts
    with ``!``.
    """
    created: list[str] = []

    def _make(name: str, files: dict[str, str]) -> str:
        root = tmp_path / name
        root.mkdir()
        (root / "__init__.py").write_text("", encoding="utf-8")
        for relative, source in files.items():
            bare = relative.startswith("!")
            target = root / relative.lstrip("!")
            target.parent.mkdir(parents=True, exist_ok=True)
            if not bare and target.parent != root and not (target.parent / "__init__.py").exists():
                (target.parent / "__init__.py").write_text("", encoding="utf-8")
            target.write_text(textwrap.dedent(source), encoding="utf-8")
        created.append(name)
        monkeypatch.syspath_prepend(str(tmp_path))
        return name

    yield _make

    for name in created:
        for module_name in list(sys.modules):
            if module_name == name or module_name.startswith(f"{name}."):
                del sys.modules[module_name]
