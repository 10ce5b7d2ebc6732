"""Custom exceptions for z-contract-linter."""


class LinterError(Exception):
    """Base exception for all linter errors."""


class SettingsDecodeError(LinterError):
    """Raised when the plugin settings payload cannot be decoded."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid linter settings: {detail}")


class SourceLoadError(LinterError):
    """Raised when a Go source path cannot be found or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {path}: {reason}")
