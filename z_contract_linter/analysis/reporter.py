"""Final pass: one diagnostic per missing capability."""

from __future__ import annotations

from typing import Callable

from z_contract_linter.models.registry import Registry

VALIDATE_MESSAGE = "struct %s does not implement method 'Validate() error'"
RESOURCE_MAPPINGS_MESSAGE = (
    "struct %s does not implement method 'GetResourceMappings() []types.ResourceMapping'"
)


def report_missing(registry: Registry, reportf: Callable[..., None]) -> int:
    """Emit diagnostics for records missing a capability; return how many were emitted.

    Records are visited in declaration order so output is reproducible.
    ``reportf`` is called as ``reportf(position, format, *args)``.
    """
    emitted = 0
    for record in sorted(registry.values(), key=lambda r: (r.position, r.name)):
        if not record.has_validate:
            reportf(record.position, VALIDATE_MESSAGE, record.name)
            emitted += 1
        if not record.has_resource_mappings:
            reportf(record.position, RESOURCE_MAPPINGS_MESSAGE, record.name)
            emitted += 1
    return emitted
