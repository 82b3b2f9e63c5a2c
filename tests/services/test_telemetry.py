"""Tests for telemetry primitives and their use in ExtractService."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from scoreslice.domain.models import Dataset
from scoreslice.services.extract import ExtractService
from scoreslice.services.result import ServiceResult
from scoreslice.services.telemetry import (
    Trace,
    _active,
    disable_telemetry,
    enable_telemetry,
    record_entity,
    traced,
)
from tests.conftest import NOON, TWO_PM


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _active.set(None)


class TestTrace:
    def test_unfinished_duration_is_zero(self) -> None:
        assert Trace(name="test").to_dict() == {"name": "test", "duration_ms": 0.0}

    def test_children(self) -> None:
        trace = Trace(name="root")
        trace.record_entity("entity:A", 3)
        trace.record_entity("entity:B", 0)
        trace.finish()
        d = trace.to_dict()
        assert d["name"] == "root"
        assert d["duration_ms"] >= 0
        assert [c["name"] for c in d["children"]] == ["entity:A", "entity:B"]
        assert d["children"][0]["annotations"] == {"records": 3}
        assert all(c["duration_ms"] >= 0 for c in d["children"])


class TestRecordEntity:
    def test_no_active_trace_is_noop(self) -> None:
        enable_telemetry()
        record_entity("entity:A", 1)
        assert _active.get() is None

    def test_feeds_active_trace(self) -> None:
        trace = Trace(name="root")
        token = _active.set(trace)
        try:
            record_entity("entity:A", 2)
        finally:
            _active.reset(token)
        assert trace.children[0]["annotations"] == {"records": 2}


class TestTraced:
    def test_disabled_passthrough(self) -> None:
        @traced
        def op() -> ServiceResult:
            assert _active.get() is None
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_enabled_injects_meta(self) -> None:
        @traced
        def op() -> ServiceResult:
            record_entity("entity:X", 4)
            return ServiceResult(ok=True, op="op", meta={"k": 1})

        enable_telemetry()
        result = op()
        assert result.meta is not None
        assert result.meta["k"] == 1
        tree = result.meta["telemetry"]
        assert tree["name"].endswith("op")
        assert tree["children"][0]["name"] == "entity:X"

    def test_non_result_returned_unchanged(self) -> None:
        @traced
        def op() -> int:
            return 7

        enable_telemetry()
        assert op() == 7

    def test_exception_propagates(self) -> None:
        @traced
        def boom() -> ServiceResult:
            raise RuntimeError("boom")

        enable_telemetry()
        with pytest.raises(RuntimeError):
            boom()
        assert _active.get() is None


class TestExtractTelemetry:
    def test_entity_spans(self, dataset: Dataset) -> None:
        enable_telemetry()
        result = ExtractService(dataset).enriched(NOON, TWO_PM)
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "ExtractService.enriched"
        assert [c["name"] for c in tree["children"]] == ["entity:Site A", "entity:Site C"]
        assert [c["annotations"]["records"] for c in tree["children"]] == [3, 2]

    def test_disabled_has_no_meta(self, dataset: Dataset) -> None:
        assert ExtractService(dataset).enriched(NOON, TWO_PM).meta is None
