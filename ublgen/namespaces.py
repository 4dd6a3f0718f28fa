import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Set, Tuple

from ublgen.constants import (
    COMMON_SIGNATURE_COMPONENTS_NAMESPACE,
    UNRESOLVED_NAMESPACE,
    UNWANTED_PREFIXES,
    XADES_V132_NAMESPACE,
    XADES_V141_NAMESPACE,
)
from ublgen.exceptions import ConflictingPrefixError, UnknownNamespaceError
from ublgen.models import SchemaDescriptor
from ublgen.naming import make_pascal, qualify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamespaceOverride:
    """
    A hard-coded mapping layered over the prefix-derived table.

    Inserts or overwrites `namespace` -> `root.suffix`.
    """

    namespace: str
    suffix: str

    def apply(self, table: Dict[str, str], root: str) -> None:
        table[self.namespace] = qualify(root, self.suffix)


# Applied in order after the generic prefix derivation
DEFAULT_OVERRIDES: Tuple[NamespaceOverride, ...] = (
    NamespaceOverride(COMMON_SIGNATURE_COMPONENTS_NAMESPACE, "Csc"),
    # Both XAdES versions collapse into a single output namespace
    NamespaceOverride(XADES_V132_NAMESPACE, "Xades"),
    NamespaceOverride(XADES_V141_NAMESPACE, "Xades"),
)


def collect_prefixes(schemas: Iterable[SchemaDescriptor]) -> List[Tuple[str, str]]:
    """
    Gathers the distinct (prefix, URI) pairs declared across all schemas,
    skipping unwanted prefixes.

    Raises:
        ConflictingPrefixError: If one URI ends up bound to two prefixes.
    """
    pairs: List[Tuple[str, str]] = []
    seen: Set[Tuple[str, str]] = set()
    prefixes_by_uri: Dict[str, Set[str]] = {}

    for schema in schemas:
        for prefix, uri in schema.prefix_bindings():
            if prefix in UNWANTED_PREFIXES or (prefix, uri) in seen:
                continue
            seen.add((prefix, uri))
            pairs.append((prefix, uri))
            prefixes_by_uri.setdefault(uri, set()).add(prefix)

    for uri, prefixes in prefixes_by_uri.items():
        if len(prefixes) > 1:
            raise ConflictingPrefixError(uri, prefixes)

    return pairs


class NamespaceMapper:
    """
    Maps XML target namespaces onto output code namespaces.

    The table is derived from the xmlns prefixes every schema declares
    ('cbc' -> 'Root.Cbc'), then patched by a list of override rules, and
    finally completed with the main document namespaces which all map to the
    root namespace itself. It is read-only once the constructor returns.
    """

    def __init__(
        self,
        schemas: Iterable[SchemaDescriptor],
        root_namespace: str,
        optimize: bool = False,
        strict: bool = False,
        overrides: Iterable[NamespaceOverride] = DEFAULT_OVERRIDES,
    ):
        """
        Args:
            schemas: Every schema descriptor of the run, in emission order.
            root_namespace: The root output namespace, e.g. 'Ubl'.
            optimize: Whether common basic components are optimized away.
            strict: Raise on unknown namespaces instead of warning.
            overrides: Override rules applied after the prefix derivation.

        Raises:
            ValueError: If the root namespace is empty.
            ConflictingPrefixError: If a URI is declared under two prefixes.
        """
        if not root_namespace:
            raise ValueError("root_namespace must be a non-empty string")

        self._schemas: Tuple[SchemaDescriptor, ...] = tuple(schemas)
        self.root_namespace = root_namespace
        self.optimize = optimize
        self.strict = strict

        table: Dict[str, str] = {
            uri: f"{root_namespace}.{make_pascal(prefix)}"
            for prefix, uri in collect_prefixes(self._schemas)
        }

        for override in overrides:
            override.apply(table, root_namespace)

        for schema in self._schemas:
            if schema.is_maindoc and schema.target_namespace not in table:
                table[schema.target_namespace] = root_namespace

        self._table: Mapping[str, str] = MappingProxyType(table)
        logger.debug(
            "Mapped %d XML namespaces onto %d output namespaces under '%s'",
            len(table),
            len(set(table.values())),
            root_namespace,
        )

    @property
    def table(self) -> Mapping[str, str]:
        """Read-only XML namespace -> output namespace table."""
        return self._table

    @property
    def schemas(self) -> Tuple[SchemaDescriptor, ...]:
        """
        Every schema an output unit should be produced for, in input order.
        Some of them end up without any generated declarations; they still
        get a (header only) unit so the output file set stays complete.
        """
        return self._schemas

    def __contains__(self, xml_namespace: object) -> bool:
        return xml_namespace in self._table

    def output_namespaces(self) -> List[str]:
        """Distinct output namespaces in first-seen order."""
        return list(dict.fromkeys(self._table.values()))

    def resolve(self, xml_namespace: str) -> str:
        """
        Returns the output namespace for an XML target namespace.

        Unknown namespaces are reported through the module logger and
        resolved to UNRESOLVED_NAMESPACE so generation can carry on, unless
        the mapper is strict.

        Raises:
            UnknownNamespaceError: For an unknown namespace in strict mode.
        """
        try:
            return self._table[xml_namespace]
        except KeyError:
            if self.strict:
                raise UnknownNamespaceError(xml_namespace) from None
            logger.warning("Don't know how to handle xml namespace %s", xml_namespace)
            return UNRESOLVED_NAMESPACE
