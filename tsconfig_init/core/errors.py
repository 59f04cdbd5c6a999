"""
Exception types raised by tsconfig-init.

The CLI catches TsconfigInitError and reports it as a single error line;
anything else is a bug and is allowed to surface with a traceback.
"""

from __future__ import annotations


class TsconfigInitError(Exception):
    """Base class for all tsconfig-init errors."""


class InputAborted(TsconfigInitError):
    """Raised when the operator cancels a prompt or input is closed."""


class FilesystemError(TsconfigInitError):
    """Raised when the project directory or tsconfig.json cannot be written."""


class SerializationError(TsconfigInitError):
    """Raised when the generated document cannot be encoded as JSON."""


class ConfigError(TsconfigInitError):
    """Raised when a defaults file does not match its schema."""


class InternalLogicError(TsconfigInitError):
    """Raised when a value the prompt layer should have ruled out shows up."""
