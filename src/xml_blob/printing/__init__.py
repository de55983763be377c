"""Printing layer: character sinks for blob serialization."""

from .printer import Printer, StreamPrinter, StringPrinter

__all__ = [
    "Printer",
    "StreamPrinter",
    "StringPrinter",
]
