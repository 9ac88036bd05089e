"""
This module defines all pyprimer features using a unified registry system.
The CLI resolves every command through it.
"""

from typing import (
    Dict,
    Any,
    Callable,
    List,
    Optional,
    TextIO,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
import inspect
import logging

from pyprimer.error_msg import NotFoundError, PrimerException
from pyprimer.examples.catalog import ExampleCatalog, default_catalog
from pyprimer.runner import ExampleRunner, RunResult, RunSummary

logger = logging.getLogger("pyprimer.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=False, data=data, error=error)


@dataclass
class Feature:
    """Base class for all pyprimer features"""

    name: str
    description: str
    handler: Callable


class FeatureRegistry:
    """Registry for all pyprimer features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from pyprimer.version import get_version

    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_list_examples(
    topic: Optional[str] = None,
    catalog: Optional[ExampleCatalog] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Handle listing registered examples"""
    if catalog is None:
        catalog = default_catalog()
    if topic is not None and not catalog.has_topic(topic):
        return OperationResult.fail(f"Unknown topic: {topic}", data={"not_found": topic})

    units = catalog.list_by_topic(topic) if topic is not None else catalog.units()
    examples = [
        {"id": unit.id, "title": unit.title, "topic": unit.topic}
        for unit in units
    ]
    return OperationResult.ok(
        {
            "examples": examples,
            "topics": catalog.list_topics(),
            "topic_filter": topic,
        }
    )


def handle_show_example(
    unit_id: str,
    catalog: Optional[ExampleCatalog] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Handle showing a single example and its source"""
    if catalog is None:
        catalog = default_catalog()
    try:
        unit = catalog.get(unit_id)
    except NotFoundError as e:
        return OperationResult.fail(str(e), data={"not_found": e.name})

    try:
        source = inspect.getsource(unit.body)
    except (OSError, TypeError):
        source = None

    return OperationResult.ok(
        {
            "id": unit.id,
            "title": unit.title,
            "topic": unit.topic,
            "description": unit.description,
            "source": source,
            "expected_output": list(unit.expected_output) if unit.has_expectation else None,
        }
    )


def handle_run(
    unit_id: Optional[str] = None,
    run_all: bool = False,
    topic: Optional[str] = None,
    sink: Optional[TextIO] = None,
    catalog: Optional[ExampleCatalog] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Handle running one example, a topic, or the whole catalog"""
    selectors = sum(1 for selected in (unit_id is not None, run_all, topic is not None) if selected)
    if selectors != 1:
        return OperationResult.fail(
            "Exactly one of an example id, --all or --topic must be given"
        )

    if catalog is None:
        catalog = default_catalog()
    try:
        runner = ExampleRunner(catalog, sink=sink)

        results: List[RunResult]
        if unit_id is not None:
            results = [runner.run(unit_id)]
        elif topic is not None:
            results = list(runner.run_topic(topic))
        else:
            results = list(runner.run_all())
    except NotFoundError as e:
        return OperationResult.fail(str(e), data={"not_found": e.name})
    except PrimerException as e:
        return OperationResult.fail(str(e))

    summary = RunSummary.collect(results)
    logger.info("Ran %d examples: %d passed, %d failed", summary.total, summary.passed, summary.failed)
    return OperationResult.ok({"summary": summary})


# Register all features
version_feature = FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the pyprimer version",
        handler=handle_version,
    )
)

list_feature = FeatureRegistry.register(
    Feature(
        name="list",
        description="List registered examples",
        handler=handle_list_examples,
    )
)

show_feature = FeatureRegistry.register(
    Feature(
        name="show",
        description="Show an example's source and expected output",
        handler=handle_show_example,
    )
)

run_feature = FeatureRegistry.register(
    Feature(
        name="run",
        description="Run examples and compare their output",
        handler=handle_run,
    )
)
