"""Error types raised while resolving paths."""

from pathlib import PurePath
from typing import Optional


class ResolveError(Exception):
    """Base class for resolution failures returned by the ``try_`` API."""

    kind = "resolve_error"

    def __init__(self, message: str, path: Optional[PurePath] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} ({self.path})"


class CwdUnavailable(ResolveError):
    kind = "cwd_unavailable"


class HomeNotFound(ResolveError):
    kind = "home_not_found"


class InvalidBase(ResolveError):
    kind = "invalid_base"


class NoParentDirectory(ResolveError):
    kind = "no_parent_directory"


class BaseUnreadable(ResolveError):
    """Only raised when ``ResolverConfig.strict`` is set."""

    kind = "base_unreadable"


class ResolutionFailed(RuntimeError):
    """Raised by ``resolve``/``resolve_in`` when the ``try_`` form fails."""
