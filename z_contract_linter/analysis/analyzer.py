"""Analyzer and analysis-pass types, and the enforceMethods run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import structlog

from z_contract_linter.analysis.collector import collect_structs
from z_contract_linter.analysis.reporter import report_missing
from z_contract_linter.analysis.scanner import scan_methods
from z_contract_linter.models.diagnostic import Diagnostic, Position
from z_contract_linter.source.loader import CompilationUnit, SourceFile
from z_contract_linter.source.typeinfo import PackageTypeInfo, TypeResolver

log = structlog.get_logger("z_contract_linter.analysis")

ENFORCE_METHODS = "enforceMethods"
ENFORCE_METHODS_DOC = (
    "Confirms that each struct implements Validator interface and has GetResourceMappings method"
)


@dataclass
class AnalysisPass:
    """Everything one analyzer run sees of a compilation unit."""

    analyzer_name: str
    files: list[SourceFile]
    type_info: TypeResolver
    report: Callable[[Diagnostic], None]
    unit: str = ""

    def reportf(self, position: Position, fmt: str, *args: object) -> None:
        self.report(
            Diagnostic(position=position, message=fmt % args, analyzer=self.analyzer_name)
        )

    @classmethod
    def for_unit(
        cls,
        analyzer_name: str,
        unit: CompilationUnit,
        report: Callable[[Diagnostic], None],
    ) -> AnalysisPass:
        return cls(
            analyzer_name=analyzer_name,
            files=unit.files,
            type_info=PackageTypeInfo(unit.files),
            report=report,
            unit=unit.name,
        )


@dataclass
class Analyzer:
    name: str
    doc: str
    run: Callable[[AnalysisPass], None] = field(repr=False)


class EnforceMethods:
    """Collect structs, scan their methods, report missing capabilities.

    Holds configuration only; every run builds and discards its own registry.
    """

    def __init__(self, mapping_import_path: str | None = None) -> None:
        self.mapping_import_path = mapping_import_path

    def run(self, pass_: AnalysisPass) -> None:
        registry = collect_structs(pass_.files)
        scan_methods(
            pass_.files,
            pass_.type_info,
            registry,
            mapping_import_path=self.mapping_import_path,
        )
        emitted = report_missing(registry, pass_.reportf)
        log.debug(
            "analysis.done",
            unit=pass_.unit,
            structs=len(registry),
            diagnostics=emitted,
        )

    def as_analyzer(self) -> Analyzer:
        return Analyzer(name=ENFORCE_METHODS, doc=ENFORCE_METHODS_DOC, run=self.run)
