"""Adapters - I/O implementations of ports."""

from .file_inputs import FileInputSource
from .bundled_inputs import BundledInputSource
from .composite_inputs import CompositeInputSource

__all__ = [
    "FileInputSource",
    "BundledInputSource",
    "CompositeInputSource",
]
