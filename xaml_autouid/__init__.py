# xaml_autouid/__init__.py
"""
xaml-autouid - stable x:Uid and AutomationId attributes for XAML files.

This package provides:
- Loader: lxml parsing of XAML text
- Rewriter: x:Name / x:Uid / AutomationProperties.AutomationId normalization
- Formatter: deterministic one-attribute-per-line serialization
- EligibleKinds: YAML list of element kinds that receive automation ids
- Pipeline: directory discovery and in-place rewriting
"""

from xaml_autouid.exceptions import (
    AutoUidError,
    UsageError,
    ConfigError,
    MarkupParseError,
    StructuralError,
)
from xaml_autouid.kinds import EligibleKinds
from xaml_autouid.loader import parse_markup, load_file
from xaml_autouid.rewriter import IdentityRewriter, RewriteStats, rewrite_identities
from xaml_autouid.formatter import format_markup
from xaml_autouid.pipeline import discover_files, process_file, process_markup

__all__ = [
    "AutoUidError",
    "UsageError",
    "ConfigError",
    "MarkupParseError",
    "StructuralError",
    "EligibleKinds",
    "parse_markup",
    "load_file",
    "IdentityRewriter",
    "RewriteStats",
    "rewrite_identities",
    "format_markup",
    "discover_files",
    "process_file",
    "process_markup",
]

__version__ = "1.0.0"
