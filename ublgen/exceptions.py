"""
Exception hierarchy for UblGen.

Construction-time problems (an ambiguous prefix table, a broken config file,
an unreadable schema) are fatal. Unknown namespaces at query time are only
errors when the mapper runs in strict mode.
"""

from typing import Iterable, Optional


class UblGenError(Exception):
    """Base exception class for all UblGen errors."""
    pass


class ConflictingPrefixError(UblGenError):
    """
    Raised when two distinct namespace prefixes are bound to the same XML
    namespace URI across the schema set.

    The namespace table cannot be trusted in that case, so the whole run is
    aborted.
    """

    def __init__(self, namespace: str, prefixes: Iterable[str]):
        self.namespace = namespace
        self.prefixes = tuple(sorted(prefixes))
        super().__init__(
            f"XML namespace '{namespace}' is bound to more than one prefix: "
            f"{', '.join(self.prefixes)}"
        )


class UnknownNamespaceError(UblGenError):
    """Raised by a strict mapper for an XML namespace it has no entry for."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"Don't know how to handle xml namespace {namespace}")


class SchemaLoadError(UblGenError):
    """
    Raised when a schema document cannot be turned into a descriptor.

    This includes:
    - Missing files or directories
    - XML syntax errors
    - Schemas without a targetNamespace
    """

    def __init__(self, message: str, location: Optional[str] = None):
        self.location = location
        super().__init__(message)


class ConfigurationError(UblGenError):
    """
    Raised for configuration problems.

    This includes:
    - Missing configuration files
    - Invalid JSON or YAML
    - Values failing validation (e.g. an empty root namespace)
    """
    pass
