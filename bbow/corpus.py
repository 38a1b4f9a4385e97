"""
Corpus loading: text files, folders of documents and CSV text columns.

Everything ends up in a WordBag through `extend_from_text`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from .wordbag import WordBag

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


# --- Common ---
def read_txt(path: PathLike) -> Tuple[str, str]:
    """Read text file: returns (title, content)."""
    with open(path, "r", encoding="utf-8") as f:
        return os.path.basename(path), f.read()


def _folder_files(folder: PathLike, pattern: str) -> List[Path]:
    return [p for p in sorted(Path(folder).glob(pattern)) if p.is_file()]


# =============================================================================
# Plain text
# =============================================================================
def bag_from_paths(paths: Iterable[PathLike], bag: Optional[WordBag] = None) -> WordBag:
    """Ingest every file in `paths` into `bag` (a new one if not given)."""
    bag = bag if bag is not None else WordBag()
    for p in paths:
        title, text = read_txt(p)
        bag.extend_from_text(text)
        log.info("ingested %s: %d unique / %d total", title, bag.len(), bag.count())
    return bag


def bag_from_folder(folder: PathLike, bag: Optional[WordBag] = None,
                    pattern: str = "*.txt") -> WordBag:
    """One bag for the whole folder, files read in name order."""
    files = _folder_files(folder, pattern)
    if not files:
        log.warning("no files matching %r in %s", pattern, folder)
    return bag_from_paths(files, bag)


def bags_from_folder(folder: PathLike, pattern: str = "*.txt") -> Dict[str, WordBag]:
    """One bag per document, keyed by file name."""
    bags: Dict[str, WordBag] = {}
    for p in _folder_files(folder, pattern):
        title, text = read_txt(p)
        bags[title] = WordBag().extend_from_text(text)
    log.info("built %d document bags from %s", len(bags), folder)
    return bags


# =============================================================================
# CSV (pandas)
# =============================================================================
def read_csv_column(path: PathLike, column: str) -> List[str]:
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {path}. Available: {list(df.columns)}")
    texts = df[column].dropna().astype(str)
    return [t for t in texts if t.strip()]


def bag_from_csv(paths: Iterable[PathLike], column: str,
                 bag: Optional[WordBag] = None) -> WordBag:
    """Ingest one text column of one or more CSV files."""
    bag = bag if bag is not None else WordBag()
    for p in paths:
        rows = read_csv_column(p, column)
        for text in rows:
            bag.extend_from_text(text)
        log.info("ingested %d rows of %r from %s", len(rows), column, p)
    return bag
