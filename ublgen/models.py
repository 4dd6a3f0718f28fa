from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class SchemaDescriptor:
    """
    Read-only view of one XML schema document, as handed over by the
    schema-loading side.

    Attributes:
        target_namespace (str):
            The targetNamespace URI the schema defines.
        namespaces (Mapping[str, str]):
            The xmlns bindings declared on the schema root, prefix -> URI.
            The default namespace is stored under the empty prefix. Stored
            as a read-only copy of what was passed in.
        is_maindoc (bool):
            True for root-level document schemas (Invoice, Order, ...) as
            opposed to component libraries.
        location (Optional[str]):
            Where the schema was read from, informational only.
    """

    target_namespace: str
    namespaces: Mapping[str, str] = field(default_factory=dict)
    is_maindoc: bool = False
    location: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "namespaces", MappingProxyType(dict(self.namespaces)))

    def __hash__(self):
        return hash((self.target_namespace, tuple(sorted(self.namespaces.items())), self.is_maindoc, self.location))

    def prefix_bindings(self) -> Tuple[Tuple[str, str], ...]:
        """Returns the declared (prefix, URI) pairs in declaration order."""
        return tuple(self.namespaces.items())


@dataclass(frozen=True)
class ResolvedUnit:
    """
    Everything the emission backend needs to open one generated unit.

    Attributes:
        namespace (str):
            The output code namespace, e.g. 'Ubl.Cbc'.
        header (str):
            The full auto-generated banner, documentation included.
        imports (Tuple[str, ...]):
            Fully qualified output namespaces to import, in order.
        documentation (str):
            The inner documentation body of the banner, empty for most units.
        xml_namespace (Optional[str]):
            The XML target namespace this unit was resolved from.
    """

    namespace: str
    header: str
    imports: Tuple[str, ...] = ()
    documentation: str = ""
    xml_namespace: Optional[str] = None

    def to_dict(self) -> dict:
        """
        Converts the unit into a standard Python dictionary.
        Returns:
            dict: The dictionary representation, with imports as a list.
        """
        data = asdict(self)
        data["imports"] = list(self.imports)
        return data
