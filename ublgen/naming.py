"""
Identifier helpers used when turning namespace prefixes into code namespaces.
"""


def _is_valid_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_valid(char: str) -> bool:
    return char.isalnum() or char == "_"


def make_valid(identifier: str) -> str:
    """
    Drops every character that cannot appear in an identifier and prefixes
    'Item' when the remainder cannot start one.
    """
    cleaned = "".join(c for c in identifier if _is_valid(c))
    if not cleaned or not _is_valid_start(cleaned[0]):
        cleaned = "Item" + cleaned
    return cleaned


def make_pascal(identifier: str) -> str:
    """
    Pascal-cases a namespace prefix the classic code-identifier way.

    Short identifiers (two characters or fewer) are upper-cased entirely,
    longer ones only get their first letter upper-cased:

        >>> make_pascal("ds")
        'DS'
        >>> make_pascal("cbc")
        'Cbc'
        >>> make_pascal("ccts-cct")
        'Cctscct'
    """
    identifier = make_valid(identifier)
    if len(identifier) <= 2:
        return identifier.upper()
    if identifier[0].islower():
        return identifier[0].upper() + identifier[1:]
    return identifier


def qualify(root: str, key: str) -> str:
    """Joins a sub-namespace key onto the root; the empty key is the root itself."""
    return root if key == "" else f"{root}.{key}"
