"""Second pass: attribute Validate/GetResourceMappings methods to struct records."""

from __future__ import annotations

from typing import Iterable

import structlog

from z_contract_linter.analysis.matchers import (
    RESOURCE_MAPPINGS_METHOD,
    VALIDATE_METHOD,
    is_valid_resource_mappings_signature,
    is_valid_validate_signature,
)
from z_contract_linter.models.registry import Registry
from z_contract_linter.source.loader import SourceFile
from z_contract_linter.source.syntax import node_text, receiver_type, result_fields, top_level_declarations
from z_contract_linter.source.typeinfo import TypeResolver

log = structlog.get_logger("z_contract_linter.analysis")


def receiver_name(type_info: TypeResolver, method) -> str | None:
    """Resolve the named type a method is declared on, or None."""
    recv = receiver_type(method)
    if recv is None:
        return None
    return type_info.type_of(recv)


def scan_methods(
    files: Iterable[SourceFile],
    type_info: TypeResolver,
    registry: Registry,
    *,
    mapping_import_path: str | None = None,
) -> None:
    """Mark capabilities on ``registry`` records for every conforming method.

    Unresolved receivers, receivers outside the registry and methods with a
    wrong signature are all ignored: the capability simply stays absent.
    """
    seen = 0
    attributed = 0
    for f in files:
        for method in top_level_declarations(f.root, "method_declaration"):
            seen += 1
            name = receiver_name(type_info, method)
            if name is None:
                continue
            record = registry.get(name)
            if record is None:
                continue

            name_node = method.child_by_field_name("name")
            method_name = node_text(name_node) if name_node is not None else ""
            if method_name == VALIDATE_METHOD:
                if is_valid_validate_signature(result_fields(method)):
                    record.mark_validate()
                    attributed += 1
            elif method_name == RESOURCE_MAPPINGS_METHOD:
                if is_valid_resource_mappings_signature(
                    result_fields(method),
                    imports=f.imports,
                    import_path=mapping_import_path,
                ):
                    record.mark_resource_mappings()
                    attributed += 1

    log.debug("scan.done", methods=seen, attributed=attributed)
