import os

import pytest

from ublgen.constants import (
    BASE_DOCUMENT_NAMESPACE,
    COMMON_SIGNATURE_COMPONENTS_NAMESPACE,
    XADES_V132_NAMESPACE,
    XADES_V141_NAMESPACE,
)
from ublgen.models import SchemaDescriptor

XSD = "http://www.w3.org/2001/XMLSchema"
UBL = "urn:oasis:names:specification:ubl:schema:xsd:"

URIS = {
    "invoice": UBL + "Invoice-2",
    "order": UBL + "Order-2",
    "basedoc": BASE_DOCUMENT_NAMESPACE,
    "cac": UBL + "CommonAggregateComponents-2",
    "cbc": UBL + "CommonBasicComponents-2",
    "ext": UBL + "CommonExtensionComponents-2",
    "udt": UBL + "UnqualifiedDataTypes-2",
    "qdt": UBL + "QualifiedDataTypes-2",
    "ccts-cct": "urn:un:unece:uncefact:data:specification:CoreComponentTypeSchemaModule:2",
    "sac": UBL + "SignatureAggregateComponents-2",
    "sbc": UBL + "SignatureBasicComponents-2",
    "csc": COMMON_SIGNATURE_COMPONENTS_NAMESPACE,
    "ds": "http://www.w3.org/2000/09/xmldsig#",
    "xades132": XADES_V132_NAMESPACE,
    "xades141": XADES_V141_NAMESPACE,
}

# (relative path, target key, {prefix: uri key})
SCHEMA_LAYOUT = [
    ("maindoc/UBL-Invoice-2.1.xsd", "invoice",
     {"": "invoice", "xsd": None, "cac": "cac", "cbc": "cbc", "ext": "ext"}),
    ("maindoc/UBL-Order-2.1.xsd", "order",
     {"": "order", "xsd": None, "cac": "cac", "cbc": "cbc", "ext": "ext"}),
    ("common/UBL-BaseDocument-2.1.xsd", "basedoc",
     {"": "basedoc", "abs": "basedoc", "xsd": None, "cbc": "cbc", "ext": "ext"}),
    ("common/UBL-CommonAggregateComponents-2.1.xsd", "cac",
     {"": "cac", "cac": "cac", "cbc": "cbc", "ext": "ext", "xsd": None}),
    ("common/UBL-CommonBasicComponents-2.1.xsd", "cbc",
     {"": "cbc", "cbc": "cbc", "udt": "udt", "qdt": "qdt", "xsd": None}),
    ("common/UBL-CommonExtensionComponents-2.1.xsd", "ext",
     {"": "ext", "ext": "ext", "cbc": "cbc", "xsd": None}),
    ("common/UBL-QualifiedDataTypes-2.1.xsd", "qdt",
     {"": "qdt", "qdt": "qdt", "udt": "udt", "xsd": None}),
    ("common/UBL-UnqualifiedDataTypes-2.1.xsd", "udt",
     {"": "udt", "udt": "udt", "ccts-cct": "ccts-cct", "xsd": None}),
    ("common/CCTS_CCT_SchemaModule-2.1.xsd", "ccts-cct",
     {"": "ccts-cct", "xsd": None}),
    ("common/UBL-CommonSignatureComponents-2.1.xsd", "csc",
     {"": "csc", "sac": "sac", "xsd": None}),
    ("common/UBL-SignatureAggregateComponents-2.1.xsd", "sac",
     {"": "sac", "sac": "sac", "sbc": "sbc", "ds": "ds", "xsd": None}),
    ("common/UBL-SignatureBasicComponents-2.1.xsd", "sbc",
     {"": "sbc", "sbc": "sbc", "udt": "udt", "xsd": None}),
    ("common/UBL-xmldsig-core-schema-2.1.xsd", "ds",
     {"": "ds", "ds": "ds", "xsd": None}),
    ("common/UBL-XAdESv132-2.1.xsd", "xades132",
     {"": "xades132", "xades": "xades132", "ds": "ds", "xsd": None}),
    ("common/UBL-XAdESv141-2.1.xsd", "xades141",
     {"": "xades141", "xades141": "xades141", "xades": "xades132", "xsd": None}),
]


def _bindings(prefixes):
    return {prefix: (URIS[key] if key else XSD) for prefix, key in prefixes.items()}


def _schema_xml(target_key, prefixes):
    attrs = []
    for prefix, uri in _bindings(prefixes).items():
        name = f"xmlns:{prefix}" if prefix else "xmlns"
        attrs.append(f'{name}="{uri}"')
    attrs.append(f'targetNamespace="{URIS[target_key]}"')
    attrs.append('elementFormDefault="qualified"')
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<xsd:schema {' '.join(attrs)}>\n"
        "</xsd:schema>\n"
    )


@pytest.fixture
def uris():
    return dict(URIS)


@pytest.fixture
def ubl_schemas():
    """Descriptors equivalent to what the loader returns for ubl_schema_dir."""
    return [
        SchemaDescriptor(
            target_namespace=URIS[target],
            namespaces=_bindings(prefixes),
            is_maindoc=path.startswith("maindoc/") or target == "basedoc",
            location=path,
        )
        for path, target, prefixes in SCHEMA_LAYOUT
    ]


@pytest.fixture
def ubl_schema_dir(tmp_path):
    """A miniature UBL distribution: root elements only, no content."""
    root = tmp_path / "xsd"
    for path, target, prefixes in SCHEMA_LAYOUT:
        file_path = root / path
        os.makedirs(file_path.parent, exist_ok=True)
        file_path.write_text(_schema_xml(target, prefixes), encoding="utf-8")
    return root
