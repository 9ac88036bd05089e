"""
pyprimer - runnable Python teaching examples

Examples are grouped by topic under ``pyprimer.examples``. Each one prints a
fixed set of lines, and the runner checks what was printed against what the
example says it prints.
"""

from pyprimer.version import __version__

__all__ = ["__version__"]
