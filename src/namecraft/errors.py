"""Namecraft errors."""


class NamecraftError(Exception):
    """Base exception for namecraft errors."""


class DefinitionError(NamecraftError):
    """Raised when the definition file cannot be used."""


class DefinitionUnavailable(DefinitionError):
    """Raised when the definition file cannot be read."""


class DefinitionMalformed(DefinitionError):
    """Raised when the definition file is not a valid item list."""


class AnswerMemoryUnavailable(NamecraftError):
    """Raised when the answers file exists but cannot be read."""


class ConfigError(NamecraftError):
    """Raised when namecraft.toml cannot be loaded."""


class TemplateError(NamecraftError):
    """Raised when a format expression cannot be parsed or rendered."""


class PromptCancelled(NamecraftError):
    """Raised by a prompt transport when the operator cancels input."""
