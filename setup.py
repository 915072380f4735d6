# setup.py
from setuptools import setup, find_packages

setup(
    name="spi_search",
    version="0.1.0",
    description="Locate function extrema by successive parabolic interpolation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "sympy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "spi-search = spi_search.cli:main",
        ],
    },
)
