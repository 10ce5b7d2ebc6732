"""Result-list predicates for the two required method contracts.

Only result types are inspected; parameter lists are accepted as-is.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from tree_sitter import Node

from z_contract_linter.source.syntax import node_text

VALIDATE_METHOD = "Validate"
RESOURCE_MAPPINGS_METHOD = "GetResourceMappings"

ERROR_TYPE = "error"
RESOURCE_MAPPING_TYPE = "ResourceMapping"

# Go's ast.ArrayType covers both slices and fixed-length arrays
_SEQUENCE_TYPES = ("slice_type", "array_type")


def is_valid_validate_signature(results: Sequence[Node]) -> bool:
    """True when the result list is exactly one ``error``."""
    if len(results) != 1:
        return False
    result = results[0]
    return result.type == "type_identifier" and node_text(result) == ERROR_TYPE


def is_valid_resource_mappings_signature(
    results: Sequence[Node],
    imports: Mapping[str, str] | None = None,
    import_path: str | None = None,
) -> bool:
    """True when the result list is exactly one ``[]pkg.ResourceMapping``.

    By default only the trailing type name is compared. With ``import_path``
    set, ``pkg`` must also be bound in ``imports`` to that exact path.
    """
    if len(results) != 1:
        return False
    sequence = results[0]
    if sequence.type not in _SEQUENCE_TYPES:
        return False
    element = sequence.child_by_field_name("element")
    if element is None or element.type != "qualified_type":
        return False
    name = element.child_by_field_name("name")
    if name is None or node_text(name) != RESOURCE_MAPPING_TYPE:
        return False
    if import_path is None:
        return True

    package = element.child_by_field_name("package")
    if package is None:
        return False
    return (imports or {}).get(node_text(package)) == import_path
