import glob
import logging
import os
from typing import Dict, List, Optional

from lxml import etree

from ublgen.constants import BASE_DOCUMENT_NAMESPACE, MAINDOC_DIRECTORY
from ublgen.exceptions import SchemaLoadError
from ublgen.models import SchemaDescriptor

logger = logging.getLogger(__name__)


def _is_maindoc(path: str, target_namespace: str, base_dir: Optional[str] = None) -> bool:
    # The base document is the abstract root of every main document
    if target_namespace == BASE_DOCUMENT_NAMESPACE:
        return True
    if base_dir is None:
        folders = [os.path.basename(os.path.dirname(os.path.abspath(path)))]
    else:
        relative = os.path.relpath(os.path.abspath(path), os.path.abspath(base_dir))
        folders = os.path.normpath(relative).split(os.sep)[:-1]
    return MAINDOC_DIRECTORY in folders


def load_schema(
    path: str,
    is_maindoc: Optional[bool] = None,
    base_dir: Optional[str] = None,
) -> SchemaDescriptor:
    """
    Builds a SchemaDescriptor from the root element of an XSD file.

    Only the first start event is consumed, so the rest of the schema is
    never parsed.

    Args:
        path: Path to the .xsd file.
        is_maindoc: Forces the main document flag; by default a schema is a
            main document when it defines the base document namespace or
            lives in a 'maindoc' folder below `base_dir` (only its own
            parent folder when no `base_dir` is given).
        base_dir: The schema distribution root the path belongs to.

    Raises:
        SchemaLoadError: If the file is missing, not XML, or has no
            targetNamespace.
    """
    if not os.path.isfile(path):
        raise SchemaLoadError(f"Schema file not found: {path}", location=path)

    try:
        with open(path, "rb") as f:
            context = etree.iterparse(
                f,
                events=("start",),
                resolve_entities=False,
                no_network=True,
            )
            _, root = next(context)
    except (etree.XMLSyntaxError, StopIteration) as e:
        raise SchemaLoadError(f"Invalid XML in schema file {path}: {e}", location=path) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file {path}: {e}", location=path) from e

    target_namespace = root.get("targetNamespace")
    if not target_namespace:
        raise SchemaLoadError(f"Schema {path} declares no targetNamespace", location=path)

    namespaces: Dict[str, str] = {
        prefix or "": uri for prefix, uri in root.nsmap.items()
    }

    if is_maindoc is None:
        is_maindoc = _is_maindoc(path, target_namespace, base_dir)

    return SchemaDescriptor(
        target_namespace=target_namespace,
        namespaces=namespaces,
        is_maindoc=is_maindoc,
        location=os.path.abspath(path),
    )


def load_schemas(directory: str) -> List[SchemaDescriptor]:
    """
    Loads every .xsd file below `directory`, sorted by path so the emission
    order is stable between runs.

    Raises:
        SchemaLoadError: If the directory does not exist or any schema fails
            to load.
    """
    if not os.path.isdir(directory):
        raise SchemaLoadError(f"Schema directory not found: {directory}", location=directory)

    paths = sorted(glob.glob(os.path.join(directory, "**", "*.xsd"), recursive=True))
    schemas = [load_schema(path, base_dir=directory) for path in paths]
    logger.info(
        "Loaded %d schemas (%d main documents) from %s",
        len(schemas),
        sum(1 for s in schemas if s.is_maindoc),
        directory,
    )
    return schemas
