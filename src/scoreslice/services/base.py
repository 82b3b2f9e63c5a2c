"""BaseService — shared foundation for scoreslice services.

Every service receives the in-memory dataset and the ``[extract]`` config
at construction time. The dataset is never mutated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoreslice.config.models import ExtractConfig

if TYPE_CHECKING:
    from scoreslice.domain.models import Dataset


class BaseService:
    """Base for service-layer classes operating on one dataset.

    Usage::

        class ExtractService(BaseService):
            def enriched(self, start: str, end: str) -> ServiceResult:
                ...
    """

    def __init__(self, dataset: Dataset, config: ExtractConfig | None = None) -> None:
        self._dataset = dataset
        self._config = config or ExtractConfig()
