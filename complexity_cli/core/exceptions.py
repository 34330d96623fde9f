class ComplexityCLIError(Exception):
    """Base exception for all Complexity CLI errors."""

    pass


class ConfigurationError(ComplexityCLIError):
    """Raised when configuration is invalid or missing."""

    pass


class InputError(ComplexityCLIError):
    """Raised when source code cannot be read."""

    pass


class ExportError(ComplexityCLIError):
    """Raised when analysis results cannot be written."""

    pass
