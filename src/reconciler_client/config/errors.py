"""Errors raised while assembling the reconciler client's settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A reconciler setting was supplied but is unusable, e.g. a blank URL or bad timeout."""


class MissingConfigurationError(ConfigurationError):
    """One or more required ``RECONCILER_*`` variables are unset or blank."""
