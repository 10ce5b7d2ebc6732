"""Z-Contract-Linter: static checker for Go struct method contracts."""

__version__ = "0.1.0"

from z_contract_linter.analysis.analyzer import Analyzer, AnalysisPass, EnforceMethods
from z_contract_linter.exceptions import LinterError, SettingsDecodeError, SourceLoadError
from z_contract_linter.models.diagnostic import Diagnostic, Position
from z_contract_linter.models.registry import StructRecord
from z_contract_linter.plugin import ContractLinterPlugin, LoadMode, new
from z_contract_linter.runner import LintResult, LintRunner
from z_contract_linter.settings import LinterSettings, decode_settings

__all__ = [
    "AnalysisPass",
    "Analyzer",
    "ContractLinterPlugin",
    "Diagnostic",
    "EnforceMethods",
    "LintResult",
    "LintRunner",
    "LinterError",
    "LinterSettings",
    "LoadMode",
    "Position",
    "SettingsDecodeError",
    "SourceLoadError",
    "StructRecord",
    "decode_settings",
    "new",
]
