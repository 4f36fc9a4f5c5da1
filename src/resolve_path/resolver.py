"""Relative and tilde path resolution against a base path.

A relative path is anchored to a base directory (the process cwd by
default). When the base names an existing regular file, the file's
parent directory is used instead, so paths read from a config file can
be resolved next to that file.

No canonicalization happens: ``.`` and ``..`` segments are kept and
symlinks are not followed.
"""

import errno
import stat
from pathlib import Path
from typing import Optional

from resolve_path.config import ResolverConfig
from resolve_path.errors import (
    BaseUnreadable,
    CwdUnavailable,
    InvalidBase,
    NoParentDirectory,
    ResolutionFailed,
    ResolveError,
)
from resolve_path.tilde import resolve_tilde as _resolve_tilde
from resolve_path.tilde import starts_with_tilde
from resolve_path.utils.logging import get_logger
from resolve_path.utils.paths import PathInput, as_path

logger = get_logger(__name__)

# stat errors that mean "nothing there yet"; never raised, even in strict mode
_MISSING_ERRNOS = {errno.ENOENT, errno.ENOTDIR}


class Resolver:
    """
    Resolves relative and ``~`` paths using a set of collaborators.

    The ``try_`` methods raise ``ResolveError`` subclasses. ``resolve`` and
    ``resolve_in`` wrap them and raise ``ResolutionFailed`` instead, for
    callers that treat a failure as fatal.

    Example:
        >>> resolver = Resolver(ResolverConfig.from_home("/home/test"))
        >>> resolver.resolve_in("./config.yml", "~/.app")
        PosixPath('/home/test/.app/config.yml')
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        self.config = config or ResolverConfig()

    def resolve(self, path: PathInput) -> Path:
        """
        Resolve ``path`` in the process's current directory.

        Raises:
            ResolutionFailed: If the cwd or home directory cannot be found
        """
        try:
            return self.try_resolve(path)
        except ResolveError as e:
            raise ResolutionFailed(
                f"should resolve path in current directory: {e}"
            ) from e

    def try_resolve(self, path: PathInput) -> Path:
        """Resolve ``path`` in the process's current directory."""
        try:
            cwd = self.config.getcwd()
        except OSError as e:
            raise CwdUnavailable(f"cannot determine current directory: {e}") from e
        return self.try_resolve_in(path, cwd)

    def resolve_in(self, path: PathInput, base: PathInput) -> Path:
        """
        Resolve ``path`` against ``base``.

        Raises:
            ResolutionFailed: If the base or a tilde cannot be resolved
        """
        try:
            return self.try_resolve_in(path, base)
        except ResolveError as e:
            raise ResolutionFailed(f"should resolve path: {e}") from e

    def try_resolve_in(self, path: PathInput, base: PathInput) -> Path:
        """
        Resolve ``path`` against ``base``.

        Args:
            path: Path to resolve; returned as-is when already absolute
            base: Directory, or file whose directory, relative paths are
                joined onto. May itself start with ``~``.

        Returns:
            Absolute path (``path`` itself when nothing needed resolving)

        Raises:
            HomeNotFound: A tilde needs expanding and no home is known
            InvalidBase: ``base`` is relative and not ``~``-based
            NoParentDirectory: ``base`` is a file without a parent
            BaseUnreadable: Strict mode only, ``base`` could not be stat'ed
        """
        candidate = as_path(path)

        if candidate.is_absolute():
            return candidate

        # Tilde paths are anchored to home; the base plays no part
        if starts_with_tilde(path):
            return self.resolve_tilde(path)

        base_dir = self._base_directory(base)
        return base_dir / candidate

    def resolve_tilde(self, path: PathInput) -> Path:
        """Expand a leading ``~`` using this resolver's home lookup."""
        return _resolve_tilde(path, self.config.home_dir)

    def _absolute_base(self, base: PathInput) -> Path:
        path = as_path(base)
        if path.is_absolute():
            return path
        # Pass the raw value on so "./~/app" stays a relative base
        resolved = self.resolve_tilde(base)
        if not resolved.is_absolute():
            raise InvalidBase(
                "the base path must be able to resolve to an absolute path", path
            )
        return resolved

    def _base_directory(self, base: PathInput) -> Path:
        base = self._absolute_base(base)

        try:
            st = self.config.stat(base)
        except OSError as e:
            if self.config.strict and e.errno not in _MISSING_ERRNOS:
                raise BaseUnreadable(f"cannot inspect base path: {e}", base) from e
            # Unknown base, e.g. a config file not written yet: treat as directory
            logger.debug("Cannot stat base %s (%s), using it as a directory", base, e)
            return base

        if not stat.S_ISREG(st.st_mode):
            return base

        parent = base.parent
        if parent == base:
            raise NoParentDirectory(
                "the base path points to a file with no parent directory", base
            )
        logger.debug("Base %s is a file, using %s", base, parent)
        return parent


def resolve(path: PathInput) -> Path:
    """Resolve ``path`` in the current directory; see ``Resolver.resolve``."""
    return Resolver().resolve(path)


def try_resolve(path: PathInput) -> Path:
    return Resolver().try_resolve(path)


def resolve_in(path: PathInput, base: PathInput) -> Path:
    """Resolve ``path`` against ``base``; see ``Resolver.resolve_in``."""
    return Resolver().resolve_in(path, base)


def try_resolve_in(path: PathInput, base: PathInput) -> Path:
    return Resolver().try_resolve_in(path, base)
