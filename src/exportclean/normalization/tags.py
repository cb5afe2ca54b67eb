"""
Tag name sanitizing.

Makes arbitrary strings usable as XML element or attribute names.
"""

# Characters removed outright from tag names
INVALID_TAG_CHARS: tuple[str, ...] = (
    "(", ")", "<", ">", "/", "\\",
    "?", "!", '"', "'", "@", "#", "$",
    "%", "^", "&", "*", "+", "=", "~",
    "`", "|", "[", "]", "{", "}", ";",
    ":", ",", ".",
)  # fmt: skip

# Spaces are encoded the way XmlConvert.EncodeName does
SPACE_TOKEN = "_x0020_"

_STRIP_TABLE = str.maketrans("", "", "".join(INVALID_TAG_CHARS))


def sanitize_tag(tag: str) -> str:
    """
    Strip characters illegal in markup names and encode spaces.

    Stripping runs before space encoding, so a space next to a removed
    character is still encoded.

    Example:
        >>> sanitize_tag("<Hello World!>")
        'Hello_x0020_World'

    Args:
        tag: Candidate element or attribute name.

    Returns:
        Sanitized name, possibly empty.
    """
    return tag.translate(_STRIP_TABLE).replace(" ", SPACE_TOKEN)


def is_element_name(name: str) -> bool:
    """
    Check whether a name can be used verbatim as an XML element name.

    Sanitized output is not always a valid name: ``sanitize_tag("2020 total")``
    still starts with a digit, and ``sanitize_tag("()")`` is empty.

    Args:
        name: Candidate element name.

    Returns:
        True if the name is non-empty, starts with a letter or underscore,
        and holds only letters, digits, underscores and hyphens.
    """
    if not name or not (name[0].isalpha() or name[0] == "_"):
        return False
    return all(char.isalnum() or char in "_-" for char in name)
