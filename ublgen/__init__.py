"""
UblGen: namespace resolution for generating source code from the UBL family of
XML schemas. Decides which code namespace every XML namespace lands in, what
each generated unit imports, and which header it carries.
"""

__version__ = "0.1.0"

from .config import GeneratorConfig, load_config
from .exceptions import (
    ConfigurationError,
    ConflictingPrefixError,
    SchemaLoadError,
    UblGenError,
    UnknownNamespaceError,
)
from .exporter import Exporter
from .imports import ImportGraphResolver
from .loader import load_schema, load_schemas
from .models import ResolvedUnit, SchemaDescriptor
from .namespaces import NamespaceMapper
from .planner import UnitPlanner

__all__ = [
    "__version__",
    "NamespaceMapper",
    "ImportGraphResolver",
    "UnitPlanner",
    "SchemaDescriptor",
    "ResolvedUnit",
    "GeneratorConfig",
    "load_config",
    "load_schema",
    "load_schemas",
    "Exporter",
    "UblGenError",
    "ConflictingPrefixError",
    "UnknownNamespaceError",
    "SchemaLoadError",
    "ConfigurationError",
]
