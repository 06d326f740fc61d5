"""Custom exception hierarchy for Ataman.

Exception Hierarchy:
    AtamanError (base)
    └── ConfigurationError - rc file / settings issues
        ├── SourceUnavailableError - rc file cannot be found, created or read
        └── MalformedConfigError - rc file fails to parse or to validate

Entry-level problems in the bindings block (an entry with neither an
``actionId`` nor nested ``bindings``) are not errors at all: the builder
drops them. Everything structural ends up as a MalformedConfigError and is
recovered at the reload boundary.

Usage:
    from ataman.exceptions import MalformedConfigError

    try:
        config = load_config(text)
    except MalformedConfigError as e:
        notifier.notify(...)
"""

from typing import Any, Optional


class AtamanError(Exception):
    """Base exception for all Ataman errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AtamanError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


class SourceUnavailableError(ConfigurationError):
    """The rc file could not be found, created or read."""

    def __init__(
        self,
        message: str = "Could not find or create rc file",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class MalformedConfigError(ConfigurationError):
    """The rc file does not parse, or violates a structural requirement.

    ``path`` is the dotted config path the problem was found at, when known.
    """

    def __init__(
        self,
        message: str = "Config is malformed",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.path = path
        if path:
            context["path"] = path
        super().__init__(message, **context)
