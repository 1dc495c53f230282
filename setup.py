"""
microgallery - setup.py
-----------------------
Installs the gallery builder packages and provides the CLI entry point.

Usage:
    pip install -e .
    microgallery build --help
"""
from setuptools import setup, find_packages

setup(
    name="microgallery",
    version="0.1.0",
    description="Static gallery builder for illustrated micro-fiction feeds",
    author="microgallery",
    packages=find_packages(include=["microgallery", "collection", "formatting", "gallery"]),
    package_data={
        "microgallery": ["data/*.yaml"],
        "gallery": ["templates/*.html", "static/*.js"],
    },
    python_requires=">=3.10",
    install_requires=[
        "feedparser",
        "jinja2",
        "markupsafe",
        "python-dotenv",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "microgallery=microgallery.cli:main",
        ],
    },
)
