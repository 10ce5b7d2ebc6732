"""Plugin entry point: explicit construction, no global registration."""

from __future__ import annotations

from enum import Enum
from typing import Any

import structlog

from z_contract_linter.analysis.analyzer import Analyzer, EnforceMethods
from z_contract_linter.settings import LinterSettings, decode_settings

log = structlog.get_logger("z_contract_linter.plugin")


class LoadMode(Enum):
    """How much of the host's pipeline a plugin needs."""

    SYNTAX = "syntax"


class ContractLinterPlugin:
    """Holds decoded settings and builds the analyzers this linter provides."""

    def __init__(
        self,
        settings: LinterSettings,
        *,
        mapping_import_path: str | None = None,
    ) -> None:
        self.settings = settings
        self.mapping_import_path = mapping_import_path

    def build_analyzers(self) -> list[Analyzer]:
        log.debug("plugin.build", settings=self.settings.model_dump())
        return [EnforceMethods(self.mapping_import_path).as_analyzer()]

    def get_load_mode(self) -> LoadMode:
        return LoadMode.SYNTAX


def new(settings: Any = None, *, mapping_import_path: str | None = None) -> ContractLinterPlugin:
    """Create the plugin from a raw settings payload.

    Raises:
        SettingsDecodeError: if ``settings`` cannot be decoded.
    """
    return ContractLinterPlugin(
        decode_settings(settings),
        mapping_import_path=mapping_import_path,
    )
