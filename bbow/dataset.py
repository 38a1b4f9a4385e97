"""
Download a sample text corpus from Kaggle using kagglehub.
"""

from __future__ import annotations

import logging
from pathlib import Path

import kagglehub

log = logging.getLogger(__name__)

DEFAULT_DATASET = "exactful/wikipedia-movies"


def download_corpus(handle: str = DEFAULT_DATASET) -> Path:
    """Download the latest version of `handle`; returns the folder holding its CSVs."""
    log.info("Downloading %r dataset from Kaggle...", handle)
    path = Path(kagglehub.dataset_download(handle))
    log.info("Dataset path: %s", path)

    csvs = sorted(path.rglob("*.csv")) if path.is_dir() else []
    for f in csvs:
        size = f.stat().st_size / (1024 * 1024)  # MB
        log.info("  - %s (%.1f MB)", f.relative_to(path), size)

    if csvs and all(f.parent != path for f in csvs):
        # everything sits one level down
        return csvs[0].parent
    return path
