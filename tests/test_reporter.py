"""Tests for the missing-capability reporter."""

from __future__ import annotations

from z_contract_linter.analysis.reporter import (
    RESOURCE_MAPPINGS_MESSAGE,
    VALIDATE_MESSAGE,
    report_missing,
)
from z_contract_linter.models.diagnostic import Position
from z_contract_linter.models.registry import StructRecord


def _pos(offset: int, filename: str = "a.go") -> Position:
    return Position(filename=filename, offset=offset, line=offset + 1, column=1)


class Collector:
    def __init__(self):
        self.calls = []

    def __call__(self, position, fmt, *args):
        self.calls.append((position, fmt % args))


class TestReportMissing:
    def test_compliant_record_is_silent(self):
        record = StructRecord("Ok", _pos(0), has_validate=True, has_resource_mappings=True)
        sink = Collector()
        assert report_missing({"Ok": record}, sink) == 0
        assert sink.calls == []

    def test_two_separate_diagnostics_when_both_missing(self):
        record = StructRecord("Empty", _pos(3))
        sink = Collector()
        assert report_missing({"Empty": record}, sink) == 2
        assert sink.calls == [
            (_pos(3), "struct Empty does not implement method 'Validate() error'"),
            (
                _pos(3),
                "struct Empty does not implement method "
                "'GetResourceMappings() []types.ResourceMapping'",
            ),
        ]

    def test_only_missing_capability_reported(self):
        record = StructRecord("Half", _pos(0), has_validate=True)
        sink = Collector()
        report_missing({"Half": record}, sink)
        assert [msg for _, msg in sink.calls] == [RESOURCE_MAPPINGS_MESSAGE % "Half"]

    def test_ordered_by_position(self):
        registry = {
            "Late": StructRecord("Late", _pos(50), has_resource_mappings=True),
            "Other": StructRecord("Other", _pos(0, "b.go"), has_resource_mappings=True),
            "Early": StructRecord("Early", _pos(10), has_resource_mappings=True),
        }
        sink = Collector()
        report_missing(registry, sink)
        assert [msg for _, msg in sink.calls] == [
            VALIDATE_MESSAGE % "Early",
            VALIDATE_MESSAGE % "Late",
            VALIDATE_MESSAGE % "Other",
        ]

    def test_does_not_mutate_records(self):
        record = StructRecord("Empty", _pos(0))
        report_missing({"Empty": record}, Collector())
        assert not record.has_validate
        assert not record.has_resource_mappings


class TestStructRecord:
    def test_marks_are_idempotent(self):
        record = StructRecord("S", _pos(0))
        record.mark_validate()
        record.mark_validate()
        record.mark_resource_mappings()
        assert record.has_validate and record.has_resource_mappings
