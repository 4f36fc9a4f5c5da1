"""Tilde expansion for resolve_path.

Only the current user's home is supported: ``~`` and ``~/...`` are
expanded, ``~user`` is left alone. ``./~/...`` names a directory called
``~`` and is not expanded either.
"""

import os
from pathlib import Path
from typing import Optional

from resolve_path.config import HomeLookup
from resolve_path.errors import HomeNotFound
from resolve_path.utils.logging import get_logger
from resolve_path.utils.paths import PathInput, as_path, home_dir, is_utf8

logger = get_logger(__name__)

TILDE = "~"

_SEPARATORS = tuple(s for s in (os.sep, os.altsep) if s)


def starts_with_tilde(path: PathInput) -> bool:
    """
    Whether ``path`` begins with a bare ``~`` component.

    Checked on the path text, since ``Path`` drops a leading ``./`` and
    would make ``./~/x`` look like ``~/x``.
    """
    text = os.fsdecode(path)
    if not text.startswith(TILDE):
        return False
    rest = text[len(TILDE):]
    return not rest or rest.startswith(_SEPARATORS)


def resolve_tilde_with(home: PathInput, path: PathInput) -> Path:
    """
    Resolve a leading tilde in ``path`` against a given home directory.

    - If the path does not begin with a tilde, returns it unchanged
    - If the path text is not valid UTF-8, returns it unchanged
    - If the tilde names another user (e.g. ``~user``), returns it unchanged
    - Otherwise joins the rest of the path onto ``home``

    Relative segments such as ``..`` after the tilde are kept as they are.

    Args:
        home: Home directory to substitute for ``~``
        path: Path that may start with ``~``

    Returns:
        Expanded path, or ``path`` itself when there is nothing to expand
    """
    tilde = starts_with_tilde(path)
    path = as_path(path)
    if not tilde or not is_utf8(path):
        return path

    home = as_path(home)
    rest = path.parts[1:]
    if not rest:
        # "~", "~/", "~/////"
        return home

    resolved = home.joinpath(*rest)
    logger.debug("Expanded %s to %s", path, resolved)
    return resolved


def resolve_tilde(path: PathInput, lookup: Optional[HomeLookup] = None) -> Path:
    """
    Resolve a leading tilde in ``path`` against the current home directory.

    The home directory is only looked up when the path starts with ``~``.

    Raises:
        HomeNotFound: If a tilde needs expanding but no home directory is known
    """
    if not starts_with_tilde(path):
        return as_path(path)

    home = (lookup or home_dir)()
    if home is None:
        raise HomeNotFound("homedir not found", as_path(path))
    return resolve_tilde_with(home, path)
