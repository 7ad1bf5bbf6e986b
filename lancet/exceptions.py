"""Custom exceptions for Lancet."""

from typing import Optional, Sequence


class LancetError(Exception):
    """Base exception for all Lancet errors."""

    pass


class LancetConfigError(LancetError):
    """Raised when configuration or a split policy is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class LancetTokenizationError(LancetError):
    """Raised when the tokenizer rejects an encode or decode call."""

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        ids: Optional[Sequence[int]] = None,
    ):
        super().__init__(message)
        self.text = text
        self.ids = list(ids) if ids is not None else None


class LancetParseError(LancetError):
    """Raised when an input document cannot be read."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(message)
        self.file_path = file_path
