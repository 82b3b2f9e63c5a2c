"""ExtractService — date-range extraction over the loaded dataset.

Two operations, mirroring the two domain modes:
- basic: unchecked slice of raw score points
- enriched: validated, fallback-aware records with aligned extras
"""

from __future__ import annotations

import logging
from pathlib import Path

from scoreslice.domain.extraction import extract_basic, extract_enriched, invalid_boundary
from scoreslice.domain.models import Dataset, Entity, ResultRecord
from scoreslice.infrastructure.loader import DatasetError, load_dataset
from scoreslice.services.base import BaseService
from scoreslice.services.result import ServiceResult
from scoreslice.services.telemetry import record_entity, traced

logger = logging.getLogger(__name__)


def _label(entity: Entity) -> str:
    return entity.title or entity.slug


class ExtractService(BaseService):
    """Runs basic and enriched extraction with the configured slug and keys."""

    @traced
    def basic(self, start: str, end: str) -> ServiceResult:
        """Unchecked extraction: both dates must exist in every score series.

        Misses are reported as warnings; the returned slice is whatever the
        not-found sentinel produces (usually empty).
        """
        cfg = self._config
        warnings: list[str] = []

        def on_miss(entity: Entity, boundary: str) -> None:
            warnings.append(f"{boundary} date not found in {_label(entity)}")

        points = extract_basic(
            self._dataset,
            start,
            end,
            slug=cfg.slug,
            score_key=cfg.score_key,
            on_miss=on_miss,
        )
        logger.debug("Basic extraction over %s returned %d points", cfg.slug, len(points))

        items = [point.model_dump() for point in points]
        return ServiceResult(
            ok=True,
            op="extract_basic",
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )

    @traced
    def enriched(self, start: str, end: str) -> ServiceResult:
        """Validated extraction with boundary fallback and aligned extras."""
        op = "extract_enriched"
        cfg = self._config

        def on_entity(entity: Entity, batch: list[ResultRecord]) -> None:
            record_entity(f"entity:{_label(entity)}", len(batch))

        records = extract_enriched(
            self._dataset,
            start,
            end,
            slug=cfg.slug,
            score_key=cfg.score_key,
            extra_key=cfg.extra_key,
            positional=cfg.positional_alignment,
            on_entity=on_entity,
        )
        if records is None:
            boundary = invalid_boundary(start, end) or "start"
            value = start if boundary == "start" else end
            logger.warning("Invalid %s date: %r", boundary, value)
            return ServiceResult.failure(
                op, "INVALID_DATE", f"Invalid {boundary} date: {value!r}", field=boundary
            )

        logger.debug(
            "Enriched extraction over %s returned %d records (positional=%s)",
            cfg.slug,
            len(records),
            cfg.positional_alignment,
        )
        items = [record.model_dump() for record in records]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
        )


def load_dataset_result(path: Path | None) -> tuple[Dataset | None, ServiceResult | None]:
    """Load a dataset, or return the failing ServiceResult instead.

    Exactly one element of the returned pair is None.
    """
    op = "load_dataset"
    if path is None:
        return None, ServiceResult.failure(
            op, "NO_DATASET", "No dataset given (use --dataset or [dataset] path)"
        )
    try:
        return load_dataset(path), None
    except DatasetError as exc:
        return None, ServiceResult.failure(op, exc.code, exc.message, path=str(path))
