"""Resolve relative (``./``) and tilde (``~/``) paths to absolute paths.

Relative paths are anchored to the current directory or to a given base;
tilde paths to the current user's home. Paths are not canonicalized.
"""

from resolve_path.config import ResolverConfig
from resolve_path.errors import (
    BaseUnreadable,
    CwdUnavailable,
    HomeNotFound,
    InvalidBase,
    NoParentDirectory,
    ResolutionFailed,
    ResolveError,
)
from resolve_path.resolver import Resolver, resolve, resolve_in, try_resolve, try_resolve_in
from resolve_path.tilde import resolve_tilde, resolve_tilde_with
from resolve_path.utils.logging import setup_logging

__all__ = [
    "BaseUnreadable",
    "CwdUnavailable",
    "HomeNotFound",
    "InvalidBase",
    "NoParentDirectory",
    "ResolutionFailed",
    "ResolveError",
    "Resolver",
    "ResolverConfig",
    "resolve",
    "resolve_in",
    "resolve_tilde",
    "resolve_tilde_with",
    "setup_logging",
    "try_resolve",
    "try_resolve_in",
]
