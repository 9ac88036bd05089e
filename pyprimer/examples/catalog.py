"""Deterministic example discovery and lookup catalog."""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
from types import ModuleType
from typing import Callable, Iterable, Iterator
import importlib
import logging
import os

from pyprimer.error_msg import DuplicateIdError, InvalidUnitError, NotFoundError
from pyprimer.examples.api import ExampleUnit, UnitId, validate_unit

logger = logging.getLogger(__name__)

TOPICS_PACKAGE_ENV = "PYPRIMER_TOPICS_PACKAGE"
DEFAULT_TOPICS_PACKAGE = "pyprimer.examples"


class UnitSequence:
    """Lazily iterable, restartable view over catalog units."""

    def __init__(self, iterator_factory: Callable[[], Iterable[ExampleUnit]]):
        self._iterator_factory = iterator_factory

    def __iter__(self) -> Iterator[ExampleUnit]:
        return iter(self._iterator_factory())

    def ids(self) -> list[UnitId]:
        return [unit.id for unit in self]


class ExampleCatalog:
    """Registry of example units keyed by id, grouped by topic."""

    def __init__(self) -> None:
        self._units: OrderedDict[UnitId, ExampleUnit] = OrderedDict()
        self._ids_by_topic: OrderedDict[str, list[UnitId]] = OrderedDict()
        self._loaded_modules: list[str] = []

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._units

    def __iter__(self) -> Iterator[ExampleUnit]:
        return iter(list(self._units.values()))

    @property
    def loaded_modules(self) -> tuple[str, ...]:
        return tuple(self._loaded_modules)

    def register(self, unit: ExampleUnit) -> ExampleUnit:
        validate_unit(unit)
        if unit.id in self._units:
            raise DuplicateIdError(unit.id)

        self._units[unit.id] = unit
        self._ids_by_topic.setdefault(unit.topic, []).append(unit.id)
        logger.debug("Registered example %s (%s)", unit.id, unit.topic)
        return unit

    def get(self, unit_id: UnitId) -> ExampleUnit:
        try:
            return self._units[unit_id]
        except KeyError:
            raise NotFoundError("example", unit_id) from None

    def units(self) -> UnitSequence:
        return UnitSequence(lambda: list(self._units.values()))

    def list_by_topic(self, topic: str) -> UnitSequence:
        def _topic_units() -> list[ExampleUnit]:
            return [self._units[unit_id] for unit_id in self._ids_by_topic.get(topic, ())]

        return UnitSequence(_topic_units)

    def list_topics(self) -> list[str]:
        return list(self._ids_by_topic.keys())

    def has_topic(self, topic: str) -> bool:
        return topic in self._ids_by_topic

    def discover(self, package: str = DEFAULT_TOPICS_PACKAGE) -> "ExampleCatalog":
        """Import topic subpackages of ``package`` and register their units.

        Topic directories are visited in name order and the modules inside
        them in file name order, so the catalog order is stable between runs.
        Names starting with an underscore are skipped.
        """
        root_module = importlib.import_module(package)
        root_dir = Path(root_module.__file__).parent

        for item in sorted(root_dir.iterdir(), key=lambda p: p.name):
            if not item.is_dir() or item.name.startswith("_"):
                continue
            if not (item / "__init__.py").exists():
                continue
            self._load_topic(f"{package}.{item.name}", item)
        return self

    def _load_topic(self, topic_module: str, topic_dir: Path) -> None:
        for py_file in sorted(topic_dir.glob("*.py"), key=lambda p: p.name):
            if py_file.name.startswith("_"):
                continue
            module_name = f"{topic_module}.{py_file.stem}"
            try:
                module = importlib.import_module(module_name)
            except Exception as exc:
                logger.warning("Failed loading example module %s: %s", module_name, exc)
                continue

            for unit in _extract_units(module, module_name):
                self.register(unit)
            self._loaded_modules.append(module_name)


def _extract_units(module: ModuleType, module_name: str) -> list[ExampleUnit]:
    units: list[ExampleUnit] = []
    single = getattr(module, "EXAMPLE_UNIT", None)
    if single is not None:
        units.append(single)
    units.extend(getattr(module, "EXAMPLE_UNITS", ()))

    for unit in units:
        if not isinstance(unit, ExampleUnit):
            raise InvalidUnitError(
                f"{module_name} exports {type(unit).__name__}, expected ExampleUnit"
            )
    return units


def default_catalog(package: str | None = None) -> ExampleCatalog:
    """Build the catalog from the configured topics package."""
    if package is None:
        package = os.environ.get(TOPICS_PACKAGE_ENV, "").strip() or DEFAULT_TOPICS_PACKAGE
    logger.debug("Discovering examples in %s", package)
    return ExampleCatalog().discover(package)
