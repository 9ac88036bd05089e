# pyprimer examples directory
"""
This directory contains the example topics shipped with pyprimer.
Each subpackage is one topic; every public module inside it exports an
``EXAMPLE_UNIT`` or ``EXAMPLE_UNITS`` that `ExampleCatalog.discover`
registers in file name order.
"""
