"""Custom exceptions for the localization system.

Provides the error taxonomy shared by configuration, providers and the
translator. Lookup misses are never errors; only broken configuration and
unreadable translation documents raise.
"""

from pathlib import Path
from typing import Optional, Union


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            translator = Translator(settings)
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class LocalizationConfigError(LocalizationError, ValueError):
    """Raised when the configuration lacks a required source location.

    Example:
        >>> LocalizationSettings(use_resources=True).validate_sources()
        Traceback (most recent call last):
        ...
        LocalizationConfigError: resource_package is required when use_resources is enabled
    """

    pass


class TranslationLoadError(LocalizationError):
    """Raised when a translation document exists but cannot be read or parsed.

    A missing document is not an error; providers return an empty tree for it.

    Attributes:
        source: Identifier (path or resource name) of the failing document.
    """

    def __init__(
        self,
        source: Union[str, Path],
        reason: Optional[str] = None,
    ):
        self.source = str(source)
        self.reason = reason
        message = f"Failed to load translation document: {self.source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
