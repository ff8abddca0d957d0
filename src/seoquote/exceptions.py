"""seoquote exceptions."""


class SeoquoteError(Exception):
    """Base exception for all seoquote errors."""


class ConfigError(SeoquoteError):
    """Raised on invalid configuration."""


class CatalogError(ConfigError):
    """Raised when a tier catalog is malformed (wrong count, order or ranges)."""

    def __init__(self, reason: str, source: str | None = None):
        self.reason = reason
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Invalid tier catalog{where}: {reason}")


class ProposalGenerationError(SeoquoteError):
    """Raised when the text-generation service fails or returns garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
