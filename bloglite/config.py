"""Local authentication configuration file."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

import tomli_w

PACKAGE_NAME = "bloglite"
PACKAGE_VERSION = "0.1.0"


@dataclass(frozen=True)
class AuthConfig:
    """Stored credentials and the version that wrote them."""

    token: str
    version: str = PACKAGE_VERSION

    def to_toml(self) -> str:
        """Return the configuration as TOML text."""
        return tomli_w.dumps(asdict(self))


def config_path() -> Path:
    """Return the path of the auth file in the user's home directory."""
    return Path.home() / f".{PACKAGE_NAME}" / "auth.toml"


def write_auth_config(token: str, path: str | Path | None = None) -> Path:
    """Write the token to the auth file, creating directories as needed."""
    target = config_path() if path is None else Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(AuthConfig(token=str(token)).to_toml(), encoding="utf-8")
    return target