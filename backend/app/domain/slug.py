"""URL slug derivation for title-bearing entities."""

import re
from uuid import UUID

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lower-case, collapse non-alphanumeric runs into one hyphen, trim hyphens.

    >>> slugify("CAD & CAE Services!")
    'cad-cae-services'
    """
    return _NON_ALPHANUMERIC.sub("-", value.lower()).strip("-")


def is_identity(value: str) -> bool:
    """True when *value* is a canonical generated identifier (UUID)."""
    try:
        return str(UUID(value)) == value.lower()
    except (ValueError, AttributeError):
        return False
