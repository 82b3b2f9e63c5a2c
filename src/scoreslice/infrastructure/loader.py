"""Dataset loading from JSON files.

Accepted shapes: a top-level array of entities, or an object whose
``data`` key holds that array (the shape of exported dashboard fixtures).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from scoreslice.domain.models import DATASET_ADAPTER, Dataset

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """A dataset file that is missing, unreadable, or malformed."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def parse_dataset(raw: Any) -> Dataset:
    """Validate already-decoded JSON into a list of entities."""
    if isinstance(raw, dict) and "data" in raw:
        raw = raw["data"]
    try:
        return DATASET_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        msg = f"Dataset does not match the entity schema: {exc.error_count()} error(s)"
        raise DatasetError("INVALID_DATASET", msg) from exc


def load_dataset(path: Path) -> Dataset:
    """Read and validate the dataset at *path*.

    Raises:
        DatasetError: ``DATASET_NOT_FOUND`` or ``INVALID_DATASET``.
    """
    if not path.is_file():
        raise DatasetError("DATASET_NOT_FOUND", f"Dataset not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DatasetError("INVALID_DATASET", f"Invalid JSON in {path}: {exc}") from exc

    dataset = parse_dataset(raw)
    logger.debug("Loaded %d entities from %s", len(dataset), path)
    return dataset
