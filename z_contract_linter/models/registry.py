"""Per-run registry of struct declarations and their capability flags."""

from __future__ import annotations

from dataclasses import dataclass

from z_contract_linter.models.diagnostic import Position


@dataclass
class StructRecord:
    """One struct type declared in the analysed unit.

    Capability flags only ever move from False to True.
    """

    name: str
    position: Position
    has_validate: bool = False
    has_resource_mappings: bool = False

    def mark_validate(self) -> None:
        self.has_validate = True

    def mark_resource_mappings(self) -> None:
        self.has_resource_mappings = True


# Keyed by declared type name; owned by a single analysis run.
Registry = dict[str, StructRecord]
