"""Runs a plugin's analyzers over compilation units and gathers diagnostics."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import structlog

from z_contract_linter.analysis.analyzer import AnalysisPass
from z_contract_linter.models.diagnostic import Diagnostic
from z_contract_linter.plugin import ContractLinterPlugin
from z_contract_linter.source.loader import CompilationUnit

log = structlog.get_logger("z_contract_linter.runner")


@dataclass
class LintResult:
    diagnostics: list[Diagnostic] = field(default_factory=list)
    units: int = 0

    @property
    def exit_code(self) -> int:
        return 1 if self.diagnostics else 0


class LintRunner:
    """Run every analyzer of a plugin over every unit.

    Units are independent, so with ``jobs > 1`` they are analysed on a
    thread pool; results are merged back in unit order.
    """

    def __init__(self, plugin: ContractLinterPlugin, jobs: int = 1) -> None:
        self.plugin = plugin
        self.jobs = max(1, jobs)

    def run_unit(self, unit: CompilationUnit) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for analyzer in self.plugin.build_analyzers():
            analyzer.run(AnalysisPass.for_unit(analyzer.name, unit, diagnostics.append))
        return diagnostics

    def run(self, units: list[CompilationUnit]) -> LintResult:
        if self.jobs == 1 or len(units) < 2:
            per_unit = [self.run_unit(u) for u in units]
        else:
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                per_unit = list(pool.map(self.run_unit, units))

        result = LintResult(units=len(units))
        for diagnostics in per_unit:
            result.diagnostics.extend(diagnostics)
        log.info("lint.done", units=result.units, diagnostics=len(result.diagnostics))
        return result
