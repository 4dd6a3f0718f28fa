import logging
from typing import Optional, Tuple

from ublgen.constants import ABSTRACT_SUFFIX, BASE_DOCUMENT_NAMESPACE
from ublgen.graphs import DependencyGraph, build_graph
from ublgen.headers import documentation_for
from ublgen.naming import qualify

logger = logging.getLogger(__name__)


class ImportGraphResolver:
    """
    Answers which output namespaces a unit must import, and which
    documentation its header carries.

    One of the two fixed dependency graphs is picked at construction
    (optimized or not) and qualified under the root namespace. The choice
    never changes for the lifetime of the resolver.
    """

    def __init__(
        self,
        optimize: bool,
        root_namespace: str,
        base_document_namespace: Optional[str] = None,
        graph: Optional[DependencyGraph] = None,
    ):
        """
        Args:
            optimize: Selects the optimized graph and documentation.
            root_namespace: The root output namespace, e.g. 'Ubl'.
            base_document_namespace: The output namespace the base document
                XML namespace maps to, usually the root itself.
            graph: A bare (unqualified) graph used instead of the built-in ones.
        """
        if not root_namespace:
            raise ValueError("root_namespace must be a non-empty string")

        self.optimize = optimize
        self.root_namespace = root_namespace
        self.base_document_namespace = base_document_namespace
        self._graph = build_graph(optimize, root_namespace, graph)

    @property
    def graph(self) -> DependencyGraph:
        """The active, fully qualified dependency graph."""
        return self._graph

    def lookup_key(self, output_namespace: str, xml_namespace: Optional[str] = None) -> str:
        """
        Returns the graph key to use for `output_namespace`.

        The base document shares the root namespace with the main documents
        but takes its imports from the abstract sub-namespace.
        """
        if xml_namespace is not None:
            is_base_document = xml_namespace == BASE_DOCUMENT_NAMESPACE
        else:
            is_base_document = (
                self.base_document_namespace is not None
                and output_namespace == self.base_document_namespace
            )
        if is_base_document:
            return qualify(output_namespace, ABSTRACT_SUFFIX)
        return output_namespace

    def imports_for(self, output_namespace: str, xml_namespace: Optional[str] = None) -> Tuple[str, ...]:
        key = self.lookup_key(output_namespace, xml_namespace)
        return self._graph.get(key, ())

    def documentation_for(self, output_namespace: str) -> str:
        return documentation_for(output_namespace, self.optimize)

    def resolve(self, output_namespace: str, xml_namespace: Optional[str] = None) -> Tuple[Tuple[str, ...], str]:
        """
        Resolves the imports and header documentation of one unit.

        Args:
            output_namespace: The unit's output namespace.
            xml_namespace: The XML namespace the unit came from, if known.
                It decides whether the base-document substitution applies.

        Returns:
            Tuple of (ordered import list, documentation body). Namespaces
            absent from the graph import nothing.
        """
        imports = self.imports_for(output_namespace, xml_namespace)
        logger.debug("Resolved %d imports for %s", len(imports), output_namespace)
        return imports, self.documentation_for(output_namespace)
