"""
Configuration values for the Ironclad client.

``PageOptions`` describes the window requested from a listing endpoint.
``Settings`` resolves where the server lives (and, optionally, which access
token to attach) from the environment or the nearest ``.env`` file.
"""

import os
from pathlib import Path
from typing import Any, Optional

from attrs import define, field

DEFAULT_AUTHORITY = "http://localhost:5005"
DEFAULT_PAGE_SIZE = 20


@define(frozen=True)
class PageOptions:
    """
    Window of a paginated listing.

    Attributes:
        start: Zero-based offset of the first resource to return
        size: Number of resources to return; 0 means DEFAULT_PAGE_SIZE
    """

    start: int = 0
    size: int = 0

    @property
    def effective_size(self) -> int:
        return self.size if self.size != 0 else DEFAULT_PAGE_SIZE

    def query_params(self) -> dict[str, Any]:
        return {"skip": self.start, "take": self.effective_size}


@define(frozen=True)
class Settings:
    """
    Connection settings for an Ironclad server.

    Attributes:
        authority: Base URL of the server
        access_token: Token attached as a bearer credential, if any
    """

    authority: str = DEFAULT_AUTHORITY
    access_token: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        """
        Load settings from the process environment, then from a .env file.

        Environment variables win over the .env file.

        Args:
            env_file: Explicit .env path (default: nearest .env walking up from cwd)
        """
        env_vars = cls._load_env(env_file)

        authority = os.environ.get("IRONCLAD_AUTHORITY") or env_vars.get("IRONCLAD_AUTHORITY") or DEFAULT_AUTHORITY
        access_token = os.environ.get("IRONCLAD_ACCESS_TOKEN") or env_vars.get("IRONCLAD_ACCESS_TOKEN")

        return cls(authority=authority.rstrip("/"), access_token=access_token or None)

    @staticmethod
    def _load_env(env_file: Optional[Path] = None) -> dict[str, str]:
        """Load .env from the given path or the nearest parent directory."""
        if env_file is None:
            current = Path.cwd()
            while current != current.parent:
                if (current / ".env").exists():
                    env_file = current / ".env"
                    break
                current = current.parent

        if env_file is None or not env_file.exists():
            return {}

        env_vars = {}
        with open(env_file) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, _, value = line.partition("=")
                    env_vars[key.strip()] = value.strip().strip('"').strip("'")
        return env_vars
