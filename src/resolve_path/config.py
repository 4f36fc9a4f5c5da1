"""Configuration for the path resolver.

Holds the environment and file-system collaborators the resolver
consults, so they can be swapped out in tests or embedding code.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from resolve_path.utils.paths import home_dir

HomeLookup = Callable[[], Optional[Path]]
CwdLookup = Callable[[], Union[str, "os.PathLike[str]"]]
StatQuery = Callable[[Path], os.stat_result]


@dataclass(frozen=True)
class ResolverConfig:
    """Collaborators and policy for a ``Resolver``."""

    # Home directory for "~"; None means it could not be determined
    home_dir: HomeLookup = field(default=home_dir)

    # Current working directory for the no-base API
    getcwd: CwdLookup = field(default=os.getcwd)

    # Metadata query used to tell a file base from a directory base
    stat: StatQuery = field(default=os.stat)

    # Surface stat errors other than "not found" instead of ignoring them
    strict: bool = False

    @classmethod
    def from_home(cls, home: Union[str, Path], **kwargs) -> "ResolverConfig":
        """Build a config whose home directory is always ``home``."""
        fixed = Path(home)
        return cls(home_dir=lambda: fixed, **kwargs)
