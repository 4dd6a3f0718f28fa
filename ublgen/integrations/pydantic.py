from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from ublgen.models import ResolvedUnit, SchemaDescriptor


class PydanticSchemaDescriptor(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    target_namespace: str
    namespaces: Dict[str, str] = {}
    is_maindoc: bool = False
    location: Optional[str] = None


class PydanticResolvedUnit(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    namespace: str
    header: str
    imports: List[str] = []
    documentation: str = ""
    xml_namespace: Optional[str] = None


def from_dataclass(
    obj: Union[ResolvedUnit, SchemaDescriptor],
) -> Union[PydanticResolvedUnit, PydanticSchemaDescriptor]:
    """
    Converts a core UblGen dataclass into its Pydantic equivalent.
    """
    if isinstance(obj, ResolvedUnit):
        return PydanticResolvedUnit.model_validate(obj)
    if isinstance(obj, SchemaDescriptor):
        return PydanticSchemaDescriptor(
            target_namespace=obj.target_namespace,
            namespaces=dict(obj.namespaces),
            is_maindoc=obj.is_maindoc,
            location=obj.location,
        )

    raise TypeError(f"Unsupported type for conversion: {type(obj).__name__}")
