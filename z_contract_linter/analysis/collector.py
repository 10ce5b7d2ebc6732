"""First pass: register every top-level struct type declaration."""

from __future__ import annotations

from typing import Iterable

import structlog

from z_contract_linter.models.registry import Registry, StructRecord
from z_contract_linter.source.loader import SourceFile
from z_contract_linter.source.syntax import node_position, node_text, top_level_declarations, type_specs

log = structlog.get_logger("z_contract_linter.analysis")


def collect_structs(files: Iterable[SourceFile]) -> Registry:
    """Build a registry with one record per declared struct type.

    Aliases, interfaces and named non-struct types are skipped, as are
    declarations inside function bodies and anonymous struct literals.
    """
    registry: Registry = {}
    for f in files:
        for decl in top_level_declarations(f.root, "type_declaration"):
            for spec in type_specs(decl):
                if spec.type != "type_spec":
                    continue
                type_node = spec.child_by_field_name("type")
                if type_node is None or type_node.type != "struct_type":
                    continue
                name_node = spec.child_by_field_name("name")
                name = node_text(name_node)
                # Later duplicates replace earlier ones
                registry[name] = StructRecord(
                    name=name,
                    position=node_position(name_node, f.path),
                )

    log.debug("collect.done", structs=len(registry))
    return registry
