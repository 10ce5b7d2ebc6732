"""Tests for the struct declaration collector."""

from __future__ import annotations

from z_contract_linter.analysis.collector import collect_structs
from z_contract_linter.source.loader import parse_source

SOURCE = """\
package p

type Plain struct {
	Name string
}

type (
	First struct{}
	Second struct{ Inner struct{ X int } }
	Named int
)

type Generic[T any] struct {
	V T
}

type Alias = Plain
type LiteralAlias = struct{}
type Iface interface{ Validate() error }
type Id int64

var anon = struct{ Y int }{Y: 1}

func f() {
	type local struct{}
	_ = local{}
}
"""


class TestCollectStructs:
    def test_collects_only_top_level_structs(self):
        registry = collect_structs([parse_source(SOURCE.encode(), path="p.go")])
        assert set(registry) == {"Plain", "First", "Second", "Generic"}

    def test_records_start_without_capabilities(self):
        registry = collect_structs([parse_source(SOURCE.encode(), path="p.go")])
        for record in registry.values():
            assert not record.has_validate
            assert not record.has_resource_mappings

    def test_position_is_type_name(self):
        registry = collect_structs([parse_source(SOURCE.encode(), path="p.go")])
        pos = registry["Plain"].position
        assert (pos.filename, pos.line, pos.column) == ("p.go", 3, 6)
        grouped = registry["First"].position
        assert (grouped.line, grouped.column) == (8, 2)

    def test_multiple_files(self):
        a = parse_source(b"package p\n\ntype A struct{}\n", path="a.go")
        b = parse_source(b"package p\n\ntype B struct{}\n", path="b.go")
        registry = collect_structs([a, b])
        assert registry["A"].position.filename == "a.go"
        assert registry["B"].position.filename == "b.go"

    def test_duplicate_declaration_keeps_last(self):
        a = parse_source(b"package p\n\ntype A struct{}\n", path="a.go")
        b = parse_source(b"package p\n\ntype A struct{}\n", path="b.go")
        registry = collect_structs([a, b])
        assert len(registry) == 1
        assert registry["A"].position.filename == "b.go"

    def test_empty_input(self):
        assert collect_structs([]) == {}
