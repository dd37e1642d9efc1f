"""
BrowZine journal and article lookup backend.
"""

from .backend import BrowZineBackend
from .connector import Connector

__all__ = ["BrowZineBackend", "Connector"]
