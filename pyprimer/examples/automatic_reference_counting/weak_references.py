"""WeakValueDictionary, WeakSet, ref callbacks and proxies."""

import weakref

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.automatic_reference_counting import TOPIC


class Image:
    def __init__(self, name: str):
        self.name = name


class Listener:
    pass


class Customer:
    def __init__(self, name: str):
        self.name = name
        self.card = None

    def __del__(self):
        print(f"{self.name} is being deinitialized")


class CreditCard:
    def __init__(self, number: int, customer: Customer):
        self.number = number
        self.customer = weakref.proxy(customer)


def execute():
    cache = weakref.WeakValueDictionary()
    logo = Image("logo")
    cache["logo"] = logo
    print("logo" in cache)
    del logo
    print("logo" in cache)

    listeners = weakref.WeakSet()
    first, second = Listener(), Listener()
    listeners.add(first)
    listeners.add(second)
    print(len(listeners))
    del first
    print(len(listeners))

    token = Listener()
    watcher = weakref.ref(token, lambda ref: print("referent gone"))
    del token
    print(watcher() is None)

    john = Customer("John Appleseed")
    card = CreditCard(1234_5678_9012_3456, customer=john)
    john.card = card
    print(card.customer.name)
    del john
    try:
        card.customer.name
    except ReferenceError as exc:
        print(type(exc).__name__)


EXAMPLE_UNIT = ExampleUnit(
    id="automatic_reference_counting.weak_references",
    title="Weak references",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "True",
        "False",
        "2",
        "1",
        "referent gone",
        "True",
        "John Appleseed",
        "John Appleseed is being deinitialized",
        "ReferenceError",
    ),
)
