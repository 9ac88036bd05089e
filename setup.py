from setuptools import setup, find_packages

# Import version from the package
from pyprimer.version import __version__

setup(
    name="pyprimer",
    version=__version__,
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "typer>=0.9.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pyprimer=pyprimer.main:app",
        ],
    },
    python_requires=">=3.10",
)
