from __future__ import annotations


class PipelineError(RuntimeError):
    """Base class for failures that abort the fetch → group pipeline."""


class NetworkError(PipelineError):
    """Raised when the items document cannot be retrieved."""


class ConfigError(PipelineError):
    """Raised for invalid ITEMS_* environment settings."""


class FetchConfigError(ConfigError, NetworkError):
    """Raised for missing or invalid fetch configuration."""


class ParseError(PipelineError):
    """Raised when the response body is not a JSON array of records."""


class RecordError(ParseError):
    """Raised for a single malformed object inside the array.

    Carries the array position so the log line points at the bad element.
    """

    def __init__(self, message: str, index: int) -> None:
        super().__init__(f"Record #{index}: {message}")
        self.index = index


__all__ = ["PipelineError", "ConfigError", "NetworkError", "FetchConfigError", "ParseError", "RecordError"]
