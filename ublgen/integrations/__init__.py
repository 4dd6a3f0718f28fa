"""
Integrations with third-party libraries like Pydantic.
"""

from .pydantic import PydanticResolvedUnit, PydanticSchemaDescriptor, from_dataclass

__all__ = ["from_dataclass", "PydanticResolvedUnit", "PydanticSchemaDescriptor"]
