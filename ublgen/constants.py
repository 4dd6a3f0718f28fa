"""
Well-known XML namespaces and fixed values of the UBL schema family.
"""

BASE_DOCUMENT_NAMESPACE = "urn:oasis:names:specification:ubl:schema:xsd:BaseDocument-2"
COMMON_SIGNATURE_COMPONENTS_NAMESPACE = (
    "urn:oasis:names:specification:ubl:schema:xsd:CommonSignatureComponents-2"
)
XADES_V132_NAMESPACE = "http://uri.etsi.org/01903/v1.3.2#"
XADES_V141_NAMESPACE = "http://uri.etsi.org/01903/v1.4.1#"

# Prefixes never turned into an output namespace of their own
UNWANTED_PREFIXES = frozenset({"", "xsd", "abs", "cct"})

# Synthetic sub-namespace the base document borrows its imports from
ABSTRACT_SUFFIX = "Abs"

UNRESOLVED_NAMESPACE = "UnresolvedNamespace"

DEFAULT_ROOT_NAMESPACE = "Ubl"

# Directory holding the main document schemas in the UBL distribution
MAINDOC_DIRECTORY = "maindoc"

# Named in the banner of every generated unit
PROJECT_HOME = "ublgen"
