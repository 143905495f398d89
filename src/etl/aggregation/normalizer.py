"""Role label normalization.

Strips parenthetical annotations such as "(uncredited)" or
"(voice)" before labels are compared.
"""

import re

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)\s*")


def normalize_role_label(label: str | None) -> str:
    """Remove every parenthesized note and trim the result.

    The whitespace around a removed note is consumed with it.

    Args:
        label: Raw role label, possibly None.

    Returns:
        Cleaned label, or an empty string for missing input.

    Example:
        >>> normalize_role_label("Steve Rogers (uncredited)")
        'Steve Rogers'
    """
    if not label:
        return ""
    return _PARENTHETICAL.sub("", label).strip()
