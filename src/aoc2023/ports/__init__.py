"""Ports - interfaces/protocols for external dependencies."""

from .input_source import InputSource

__all__ = [
    "InputSource",
]
