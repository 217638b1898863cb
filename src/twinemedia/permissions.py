"""
Permission checks over TwineMedia permission strings.

Permissions are dot-separated paths such as ``media.edit.others``. A granted
``media.edit.*`` or ``media.*`` covers every permission below that prefix, and
a granted ``*`` covers everything.
"""

from typing import Iterable

WILDCARD = "*"


def has_permission(granted: Iterable[str], required: str) -> bool:
    """Returns whether ``required`` is covered by the ``granted`` permissions."""
    perms = set(granted)
    if not perms:
        return False
    if required in perms or WILDCARD in perms:
        return True

    if "." in required:
        prefix = ""
        for segment in required.split("."):
            prefix += segment + "."
            if prefix + WILDCARD in perms:
                return True

    return False
