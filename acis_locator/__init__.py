"""ACIS Locator — find a pre-installed ACIS toolkit for a build."""

__version__ = "0.1.0"
