# xaml_autouid/exceptions.py
"""
@file exceptions.py
@brief Exception types raised while rewriting XAML files.
"""

from __future__ import annotations
from typing import Optional


class AutoUidError(Exception):
    """Base exception for the tool."""


class UsageError(AutoUidError):
    """Raised when the command line arguments are invalid."""


class ConfigError(AutoUidError):
    """Raised when the eligible-kind YAML configuration is invalid."""


class MarkupParseError(AutoUidError):
    def __init__(
        self,
        details: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
    ):
        self.details = details
        self.path = path
        self.line = line
        super().__init__(self.__str__())

    def __str__(self) -> str:
        base = "MarkupParseError:"
        if self.path:
            base += f" file='{self.path}'"
        if self.line is not None:
            base += f" line={self.line}"
        return f"{base} {self.details}"


class StructuralError(AutoUidError):
    """Raised when the formatter meets a node that is not an element, comment or text."""

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(f"Unexpected node in XAML file: {node_type}")
