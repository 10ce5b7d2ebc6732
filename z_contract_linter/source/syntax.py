"""Helpers over tree-sitter-go syntax nodes."""

from __future__ import annotations

from typing import Iterator

from tree_sitter import Node

from z_contract_linter.models.diagnostic import Position

# Parentheses never change the type they enclose
_TRANSPARENT_TYPES = ("parenthesized_type",)

_PARAMETER_NODES = ("parameter_declaration", "variadic_parameter_declaration")


def node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace")


def node_position(node: Node, filename: str) -> Position:
    row, column = node.start_point
    return Position(
        filename=filename,
        offset=node.start_byte,
        line=row + 1,
        column=column + 1,
    )


def top_level_declarations(root: Node, kind: str) -> Iterator[Node]:
    """Yield direct children of ``source_file`` of the given node type."""
    for child in root.named_children:
        if child.type == kind:
            yield child


def type_specs(type_declaration: Node) -> Iterator[Node]:
    """Yield ``type_spec`` and ``type_alias`` nodes of a (possibly grouped) declaration."""
    for child in type_declaration.named_children:
        if child.type in ("type_spec", "type_alias"):
            yield child


def unwrap_type(node: Node | None) -> Node | None:
    """Strip parentheses around a type expression.

    ``(T)`` and ``((T))`` unwrap to ``T``. A pointer ``*T`` is left as is:
    it is an unnamed type, not ``T``.
    """
    while node is not None and node.type in _TRANSPARENT_TYPES:
        inner = [c for c in node.named_children if c.type != "comment"]
        node = inner[0] if inner else None
    return node


def result_fields(func: Node) -> list[Node]:
    """Return one type node per result field of a function or method.

    Mirrors Go's AST field grouping: ``error`` and ``(error)`` are one field,
    ``(a, b error)`` is one field with two names, ``(int, error)`` is two.
    """
    result = func.child_by_field_name("result")
    if result is None:
        return []
    if result.type != "parameter_list":
        return [result]
    fields: list[Node] = []
    for param in result.named_children:
        if param.type not in _PARAMETER_NODES:
            continue
        type_node = param.child_by_field_name("type")
        if type_node is not None:
            fields.append(type_node)
    return fields


def receiver_type(method: Node) -> Node | None:
    """Return the type node of a method's receiver, or None if it has none."""
    receiver = method.child_by_field_name("receiver")
    if receiver is None:
        return None
    for param in receiver.named_children:
        if param.type in _PARAMETER_NODES:
            return param.child_by_field_name("type")
    return None


def string_literal_value(node: Node) -> str:
    """Strip Go quote delimiters from an interpreted or raw string literal."""
    text = node_text(node)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "`"):
        return text[1:-1]
    return text
