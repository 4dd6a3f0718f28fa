"""
Header text for generated units.

Every unit carries the same auto-generated banner; only the documentation
body differs, and only for a handful of well-known sub-namespaces.
"""

from ublgen.constants import PROJECT_HOME

HEADER_TEMPLATE = """------------------------------------------------------------------------------
 <auto-generated>
     This code was generated by a tool.
     
     Changes to this file may cause incorrect behavior and will be lost if
     the code is regenerated.

     {home}
     {documentation}
 </auto-generated>
------------------------------------------------------------------------------"""

CBC_TEXT = " UBL BBIEs (Basic Business Information Entities) are the leaf nodes of every UBL document structure."
CBC_OPTIMIZED_TEXT = (
    " Types in this scope has been optimized/replaced by types from Udt.\n"
    " Members of maindocs streamed under Cbc namespace will in fact be Udt types."
)
CBC_NON_OPTIMIZED_TEXT = " Yagni-types in this scope do not have any documentation present in xsd files."
CAC_TEXT = " UBL ASBIEs (Association Business Information Entities) are substructures of an UBL document."
CCTSCCT_TEXT = (
    ' Types at the lowest level have been made abstract and prefixed with "cctscct"'
    " to avoid naming conflicts."
)
QDT_TEXT = " --no qualified data types defined at this time--"


def documentation_for(namespace: str, optimize: bool) -> str:
    """
    Returns the documentation body for an output namespace, matched on its
    last segment. Namespaces without a dedicated text get an empty string;
    any other body starts and ends with a newline.
    """
    if namespace.endswith(".Cbc"):
        mode_text = CBC_OPTIMIZED_TEXT if optimize else CBC_NON_OPTIMIZED_TEXT
        text = f"{CBC_TEXT}\n{mode_text}"
    elif namespace.endswith(".Cac"):
        text = CAC_TEXT
    elif namespace.endswith(".Cctscct"):
        text = CCTSCCT_TEXT
    elif namespace.endswith(".Qdt"):
        text = QDT_TEXT
    else:
        return ""
    return f"\n{text}\n"


def render_header(documentation: str = "", home: str = PROJECT_HOME) -> str:
    """
    Places a documentation body inside the fixed auto-generated banner. The
    line above the body names where the generator lives.
    """
    return HEADER_TEMPLATE.format(home=home, documentation=documentation)
