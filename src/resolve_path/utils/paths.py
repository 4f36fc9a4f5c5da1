"""Path helpers shared by the resolvers.

Provides the single conversion point for path-like inputs and the
home-directory lookup.
"""

import os
from pathlib import Path, PurePath
from typing import Optional, Union

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def as_path(value: PathInput) -> Path:
    """
    Convert any supported path-like value into a ``Path``.

    An existing ``Path`` is returned as the same object so callers can
    tell when nothing was rewritten.

    Args:
        value: str, bytes, or os.PathLike

    Returns:
        Concrete path for the host platform
    """
    if isinstance(value, Path):
        return value
    # fsdecode keeps undecodable bytes as surrogate escapes
    return Path(os.fsdecode(value))


def is_utf8(path: PurePath) -> bool:
    """Whether the path text survives a strict UTF-8 encode."""
    try:
        str(path).encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def home_dir() -> Optional[Path]:
    """
    Look up the current user's home directory.

    Uses HOME (or the password database) on POSIX and USERPROFILE on
    Windows. An empty HOME counts as unset. Returns None if neither
    yields an absolute path.
    """
    if os.name != "nt" and os.environ.get("HOME") == "":
        expanded = _passwd_home()
        if expanded is None:
            return None
    else:
        expanded = os.path.expanduser("~")
    if expanded.startswith("~"):
        return None
    home = Path(expanded)
    if not home.is_absolute():
        return None
    return home


def _passwd_home() -> Optional[str]:
    """Home directory of the current uid from the password database."""
    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None
