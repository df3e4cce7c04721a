"""Utility functions and classes for pgtemporal."""

from pgtemporal.utils import logging, text

__all__ = ("logging", "text")
