"""Error types raised while resolving and rendering documentation."""


class PHPDocsMDError(Exception):
    """Base class for all errors surfaced to the command line."""


class UnknownTypeError(PHPDocsMDError, LookupError):
    """Raised when a name cannot be resolved to a loaded type declaration."""

    def __init__(self, name: str) -> None:
        """Store the unresolved name."""
        super().__init__(f"Unknown class, interface or trait: {name}")
        self.name = name


class NoMatchingTypesError(PHPDocsMDError):
    """Raised when filtering leaves nothing to document."""


class InvalidTableGeneratorError(PHPDocsMDError):
    """Raised when a configured table generator does not honor the render contract."""
