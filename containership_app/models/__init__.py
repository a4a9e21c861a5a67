"""
Domain models for the containership app.

These are plain dataclasses; loading rules and ship operations live in
``containership_app.services``.
"""

from .container import Container, ContainerKind
from .ship import Ship

__all__ = [
    "Container",
    "ContainerKind",
    "Ship",
]
