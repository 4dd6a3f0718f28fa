from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional

from ublgen.constants import BASE_DOCUMENT_NAMESPACE, PROJECT_HOME
from ublgen.headers import render_header
from ublgen.imports import ImportGraphResolver
from ublgen.models import ResolvedUnit, SchemaDescriptor
from ublgen.namespaces import NamespaceMapper

if TYPE_CHECKING:
    from ublgen.config import GeneratorConfig


class UnitPlanner:
    """
    Ties the namespace mapper and the import resolver together and produces
    one ResolvedUnit per emittable schema for the emission backend.
    """

    def __init__(
        self,
        schemas: Iterable[SchemaDescriptor],
        root_namespace: str,
        optimize: bool = False,
        strict: bool = False,
        project_home: str = PROJECT_HOME,
    ):
        self.project_home = project_home
        self.mapper = NamespaceMapper(schemas, root_namespace, optimize=optimize, strict=strict)
        self.resolver = ImportGraphResolver(
            optimize,
            root_namespace,
            base_document_namespace=self.mapper.table.get(BASE_DOCUMENT_NAMESPACE),
        )

    @classmethod
    def from_config(cls, schemas: Iterable[SchemaDescriptor], config: "GeneratorConfig") -> "UnitPlanner":
        return cls(
            schemas,
            config.root_namespace,
            optimize=config.optimize,
            strict=config.strict,
            project_home=config.project_home,
        )

    @property
    def root_namespace(self) -> str:
        return self.mapper.root_namespace

    @property
    def optimize(self) -> bool:
        return self.resolver.optimize

    @property
    def table(self) -> Mapping[str, str]:
        return self.mapper.table

    def plan_namespace(self, xml_namespace: str) -> ResolvedUnit:
        """
        Resolves one XML target namespace into a unit. Unknown namespaces
        yield a placeholder unit (see NamespaceMapper.resolve).
        """
        output_namespace = self.mapper.resolve(xml_namespace)
        imports, documentation = self.resolver.resolve(output_namespace, xml_namespace)
        return ResolvedUnit(
            namespace=output_namespace,
            header=render_header(documentation, self.project_home),
            imports=imports,
            documentation=documentation,
            xml_namespace=xml_namespace,
        )

    def plan(self, schema: SchemaDescriptor) -> ResolvedUnit:
        return self.plan_namespace(schema.target_namespace)

    def plan_all(self, schemas: Optional[Iterable[SchemaDescriptor]] = None) -> List[ResolvedUnit]:
        """
        Resolves every emittable schema, including the ones that will not
        contain any declarations.
        """
        if schemas is None:
            schemas = self.mapper.schemas
        return [self.plan(schema) for schema in schemas]
