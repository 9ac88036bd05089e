"""
Associated values

Frozen dataclasses model the cases of a tagged union. Each case carries
its own fields, and class patterns in ``match`` pull them back out. The
expression tree shows the recursive form of the same idea.
"""

from dataclasses import dataclass
from typing import Union

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.enumerations import TOPIC


@dataclass(frozen=True)
class UPC:
    number_system: int
    manufacturer: int
    product: int
    check: int


@dataclass(frozen=True)
class QRCode:
    code: str


Barcode = Union[UPC, QRCode]


def describe(barcode: Barcode) -> str:
    match barcode:
        case UPC(number_system, manufacturer, product, check):
            return f"UPC: {number_system}, {manufacturer}, {product}, {check}."
        case QRCode(code):
            return f"QR code: {code}."


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Addition:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Multiplication:
    left: "Expression"
    right: "Expression"


Expression = Union[Number, Addition, Multiplication]


def evaluate(expression: Expression) -> int:
    match expression:
        case Number(value):
            return value
        case Addition(left, right):
            return evaluate(left) + evaluate(right)
        case Multiplication(left, right):
            return evaluate(left) * evaluate(right)


def execute():
    product_barcode = UPC(8, 85909, 51226, 3)
    print(describe(product_barcode))
    product_barcode = QRCode("ABCDEFGHIJKLMNOP")
    print(describe(product_barcode))
    print(product_barcode)

    five = Number(5)
    four = Number(4)
    sum_ = Addition(five, four)
    product = Multiplication(sum_, Number(2))
    print(evaluate(product))


EXAMPLE_UNIT = ExampleUnit(
    id="enumerations.associated_values",
    title="Associated values and recursive cases",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "UPC: 8, 85909, 51226, 3.",
        "QR code: ABCDEFGHIJKLMNOP.",
        "QRCode(code='ABCDEFGHIJKLMNOP')",
        "18",
    ),
)
