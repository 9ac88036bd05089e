"""Stable example unit contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from pyprimer.error_msg import InvalidUnitError

UnitId = str
BodyFn = Callable[[], object]


def _freeze_lines(lines: Iterable[str] | None) -> tuple[str, ...] | None:
    if lines is None:
        return None
    if isinstance(lines, str):
        return tuple(lines.splitlines())
    return tuple(lines)


@dataclass(frozen=True)
class ExampleUnit:
    """One runnable demonstration and the lines it is expected to print."""

    id: UnitId
    title: str
    topic: str
    body: BodyFn = field(compare=False)
    expected_output: tuple[str, ...] | None = None
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected_output", _freeze_lines(self.expected_output))

    @property
    def has_expectation(self) -> bool:
        return self.expected_output is not None


def example(
    unit_id: UnitId,
    title: str,
    topic: str,
    expected_output: Iterable[str] | None = None,
    description: str = "",
) -> Callable[[BodyFn], ExampleUnit]:
    """Decorator building an ExampleUnit around a body function."""

    def _wrap(body: BodyFn) -> ExampleUnit:
        return ExampleUnit(
            id=unit_id,
            title=title,
            topic=topic,
            body=body,
            expected_output=expected_output,
            description=description or (body.__doc__ or "").strip(),
        )

    return _wrap


def validate_unit(unit: ExampleUnit) -> None:
    """Validate an example unit before registration."""

    if not unit.id:
        raise InvalidUnitError("Example id cannot be empty")
    if not unit.title:
        raise InvalidUnitError(f"Example '{unit.id}' title cannot be empty")
    if not unit.topic:
        raise InvalidUnitError(f"Example '{unit.id}' topic cannot be empty")
    if not callable(unit.body):
        raise InvalidUnitError(f"Example '{unit.id}' body must be callable")
    if unit.expected_output is None:
        return
    for line in unit.expected_output:
        if not isinstance(line, str):
            raise InvalidUnitError(
                f"Example '{unit.id}' expected output must contain strings, got {type(line).__name__}"
            )
        if "\n" in line:
            raise InvalidUnitError(
                f"Example '{unit.id}' expected output lines cannot contain newlines"
            )
