"""Custom exceptions for componentmd."""


class ComponentmdError(Exception):
    """Base exception for componentmd operations."""


class ConfigurationError(ComponentmdError):
    """Invalid parser configuration."""


class PluginError(ConfigurationError):
    """Tokenizer plugin descriptor could not be normalized."""
