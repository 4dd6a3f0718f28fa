"""
The two fixed namespace dependency graphs.

Keys are sub-namespace names relative to the root output namespace, the empty
key being the root itself. Values list the sub-namespaces a unit in that
namespace imports, in order.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ublgen.naming import qualify

DependencyGraph = Mapping[str, Tuple[str, ...]]

NON_OPTIMIZED_GRAPH: DependencyGraph = MappingProxyType({
    "": ("Cbc", "Cac", "Ext"),
    "Cbc": ("Udt",),
    "Cac": ("Udt", "Qdt", "Cbc"),
    "Ext": ("Udt", "Cbc"),
    "Qdt": ("Udt",),
    "Udt": ("Sbc", "Ext", "Cctscct", "Cbc"),
    "Sbc": ("Udt",),  # mutual
    "Cctscct": ("Udt", "Sbc", "Ext", "Cbc"),
    "Abs": ("Udt", "Ext", "Cbc"),
    "Xades": ("DS",),
    "Sac": ("Udt", "Sbc", "DS"),
    "Csc": ("Sac",),
})

# Cbc types are replaced by Udt ones, so nothing imports Cbc or Qdt here
OPTIMIZED_GRAPH: DependencyGraph = MappingProxyType({
    "": ("Cac", "Udt"),
    "Cac": ("Udt",),
    "Ext": ("Udt",),
    "Udt": ("Sbc", "Ext", "Cctscct"),
    "Sbc": ("Udt",),
    "Cctscct": ("Udt", "Sbc", "Ext"),
    "Abs": ("Udt", "Ext"),
    "Xades": ("DS",),
    "Sac": ("Udt", "Sbc", "DS"),
    "Csc": ("Sac",),
})


def select_graph(optimize: bool) -> DependencyGraph:
    return OPTIMIZED_GRAPH if optimize else NON_OPTIMIZED_GRAPH


def qualify_graph(graph: DependencyGraph, root: str) -> DependencyGraph:
    """
    Rewrites keys and imported sub-namespaces into fully qualified output
    namespaces under `root`. The result is read-only.
    """
    return MappingProxyType({
        qualify(root, key): tuple(qualify(root, dep) for dep in deps)
        for key, deps in graph.items()
    })


def build_graph(optimize: bool, root: str, graph: Optional[DependencyGraph] = None) -> DependencyGraph:
    return qualify_graph(graph if graph is not None else select_graph(optimize), root)
