"""
Setup script for backwards compatibility.

Modern Python packaging uses pyproject.toml, but this setup.py
is provided for compatibility with older pip versions.
"""

from setuptools import setup

# All configuration is in pyproject.toml
setup()
