# xaml_autouid/pipeline.py
"""
@file pipeline.py
@brief Discover XAML files and run load -> rewrite -> format -> overwrite on each.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import List, Tuple, Union

from lxml import etree

from .constants import MARKUP_EXTENSION
from .formatter import format_markup
from .kinds import EligibleKinds
from .loader import load_file, parse_markup
from .logging_setup import get_logger
from .rewriter import IdentityRewriter, RewriteStats

logger = get_logger(__name__)


def discover_files(directory: Union[str, Path], extension: str = MARKUP_EXTENSION) -> List[Path]:
    """All files below directory with the given extension, sorted by full path."""
    base = Path(directory).resolve()
    return sorted(
        (p for p in base.rglob(f"*{extension}") if p.is_file()),
        key=lambda p: str(p),
    )


def rewrite_tree(root: etree._Element, kinds: EligibleKinds) -> Tuple[str, RewriteStats]:
    """Rewrite identities on a parsed tree and return the formatted text."""
    rewriter = IdentityRewriter(kinds)
    root = rewriter.rewrite(root)
    return format_markup(root), rewriter.stats


def process_markup(content: Union[bytes, str], kinds: EligibleKinds) -> Tuple[str, RewriteStats]:
    """Rewrite identities in markup text and return the formatted result."""
    return rewrite_tree(parse_markup(content), kinds)


def _replace_file(path: Path, content: str) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        # text mode translates "\n" to the platform line ending
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_name, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise


def process_file(path: Union[str, Path], kinds: EligibleKinds) -> RewriteStats:
    """
    Rewrite one file in place.

    The new content goes to a sibling temp file that replaces the original,
    so the file is never left half written. Nothing is written if loading or
    formatting fails; the error propagates.
    """
    path = Path(path)
    new_content, stats = rewrite_tree(load_file(path), kinds)
    _replace_file(path, new_content)

    logger.debug(f"Rewrote {path}: {stats.as_dict()}")
    return stats
