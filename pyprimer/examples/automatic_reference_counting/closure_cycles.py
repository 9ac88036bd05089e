"""A closure that captures self forms a cycle unless it captures a weak reference."""

import gc
import weakref

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.automatic_reference_counting import TOPIC


class HTMLElement:
    def __init__(self, name: str, text: str = None):
        self.name = name
        self.text = text
        self.as_html = lambda: (
            f"<{self.name}>{self.text}</{self.name}>" if self.text else f"<{self.name} />"
        )

    def __del__(self):
        print(f"{self.name} is being deinitialized")


class WeakHTMLElement:
    def __init__(self, name: str, text: str = None):
        self.name = name
        self.text = text
        this = weakref.ref(self)

        def as_html() -> str:
            element = this()
            if element.text:
                return f"<{element.name}>{element.text}</{element.name}>"
            return f"<{element.name} />"

        self.as_html = as_html

    def __del__(self):
        print(f"{self.name} is being deinitialized")


def execute():
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        paragraph = HTMLElement("p", "hello, world")
        print(paragraph.as_html())
        del paragraph
        print("after del")
        gc.collect()
    finally:
        if gc_was_enabled:
            gc.enable()

    paragraph = WeakHTMLElement("p", "hello, world")
    print(paragraph.as_html())
    del paragraph
    print("after del")


EXAMPLE_UNIT = ExampleUnit(
    id="automatic_reference_counting.closure_cycles",
    title="Closures that capture self",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "<p>hello, world</p>",
        "after del",
        "p is being deinitialized",
        "<p>hello, world</p>",
        "p is being deinitialized",
        "after del",
    ),
)
