"""Exceptions raised by the catalog store, loader, query engine and renderer."""


class CatalogError(Exception):
    """Base class for every catalog failure surfaced to callers."""


class ArgumentError(CatalogError):
    """A required argument is missing or has the wrong type."""

    def __init__(self, argument: str, message: str = None):
        self.argument = argument
        super().__init__(message or f"Missing required argument '{argument}'")


class ComponentNotFoundError(CatalogError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Component '{name}' not found")


class TokensNotLoadedError(CatalogError):
    def __init__(self):
        super().__init__("Tokens not loaded. Run carbon.refresh first.")


class UnknownOperationError(CatalogError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Tool '{operation}' not found")


class UnknownResourceError(CatalogError):
    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Resource '{uri}' not found")


class CatalogLoadError(CatalogError):
    """A snapshot file exists but is not valid JSON of the expected shape."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load {self.path}: {reason}")
