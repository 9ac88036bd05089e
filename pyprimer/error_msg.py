"""
pyprimer Error Message module
"""

from typing import List, Tuple, Optional


# Base exception class for pyprimer
class PrimerException(Exception):
    """pyprimer specific exception with context support"""

    def __init__(self, msg: str, context: Optional[List[Tuple[str, str]]] = None):
        self.msg = msg
        self.context = context or []
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.context:
            return self.msg

        context_str = ""
        for key, value in self.context:
            context_str += f"\n  {key}: {value}"

        return f"{self.msg}{context_str}"


class InvalidUnitError(PrimerException):
    """Raised when an example unit is malformed"""


class DuplicateIdError(PrimerException):
    """Raised when an example id is registered twice"""

    def __init__(self, unit_id: str):
        self.unit_id = unit_id
        super().__init__(f"Example already registered: {unit_id}")


class NotFoundError(PrimerException):
    """Raised when an example id or topic is unknown"""

    def __init__(self, what: str, name: str):
        self.name = name
        super().__init__(f"Unknown {what}: {name}")


class ExecutionError(PrimerException):
    """An example body raised while running"""

    def __init__(self, unit_id: str, cause: BaseException):
        self.unit_id = unit_id
        self.cause = cause
        message = str(cause) or type(cause).__name__
        super().__init__(
            f"{unit_id} raised {type(cause).__name__}: {message}",
        )


class OutputMismatchError(PrimerException):
    """Printed output differs from the expected output"""

    def __init__(
        self,
        unit_id: str,
        expected: Tuple[str, ...],
        actual: Tuple[str, ...],
    ):
        self.unit_id = unit_id
        self.expected = expected
        self.actual = actual
        self.line = first_difference(expected, actual)
        super().__init__(
            f"{unit_id}: output differs at line {self.line + 1}",
            [
                ("expected", _line_at(expected, self.line)),
                ("actual", _line_at(actual, self.line)),
            ],
        )


def first_difference(expected: Tuple[str, ...], actual: Tuple[str, ...]) -> int:
    """Return the index of the first differing line"""
    for index, (left, right) in enumerate(zip(expected, actual)):
        if left != right:
            return index
    return min(len(expected), len(actual))


def _line_at(lines: Tuple[str, ...], index: int) -> str:
    if index < len(lines):
        return repr(lines[index])
    return "<end of output>"
