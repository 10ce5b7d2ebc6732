"""Semantic type information for receiver resolution within one unit."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from tree_sitter import Node

from z_contract_linter.source.loader import SourceFile
from z_contract_linter.source.syntax import node_text, top_level_declarations, type_specs, unwrap_type


@runtime_checkable
class TypeResolver(Protocol):
    """Maps a type expression to the name of the named type it denotes."""

    def type_of(self, node: Node | None) -> str | None: ...


class PackageTypeInfo:
    """Type bindings for the top-level type declarations of a compilation unit.

    Only identifiers declared in the unit resolve. Builtins, qualified types
    from other packages and unnamed types, pointers included, resolve to None.
    """

    def __init__(self, files: Iterable[SourceFile]) -> None:
        self._declared: set[str] = set()
        self._aliases: dict[str, Node] = {}  # alias name -> target type node
        for f in files:
            for decl in top_level_declarations(f.root, "type_declaration"):
                for spec in type_specs(decl):
                    name_node = spec.child_by_field_name("name")
                    if name_node is None:
                        continue
                    name = node_text(name_node)
                    if spec.type == "type_alias":
                        target = spec.child_by_field_name("type")
                        if target is not None:
                            self._aliases[name] = target
                    else:
                        self._declared.add(name)

    def type_of(self, node: Node | None) -> str | None:
        return self._resolve(node, seen=set())

    def _resolve(self, node: Node | None, seen: set[str]) -> str | None:
        node = unwrap_type(node)
        if node is not None and node.type == "generic_type":
            node = unwrap_type(node.child_by_field_name("type"))
        if node is None or node.type != "type_identifier":
            return None

        name = node_text(node)
        if name in self._declared:
            return name
        target = self._aliases.get(name)
        if target is None or name in seen:
            return None
        seen.add(name)
        return self._resolve(target, seen)
