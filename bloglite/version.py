"""Version history of an article's content."""

from __future__ import annotations

from bloglite.errors import (
    DuplicateVersionError,
    EmptyHashValueError,
    VersionNotFoundError,
)


class Version:
    """One content version, identified by its hash."""

    def __init__(self, version_hash: str | Version) -> None:
        value = str(version_hash)
        if not value:
            raise EmptyHashValueError()
        self.hash: str = value
        self.parent: str | None = None

    def set_parent(self, parent: str) -> None:
        """Record the version this one was derived from."""
        self.parent = str(parent)

    def is_root(self) -> bool:
        """Return True when the version has no parent."""
        return self.parent is None

    def __str__(self) -> str:
        return self.hash

    def __repr__(self) -> str:
        return f"Version(hash={self.hash!r}, parent={self.parent!r})"


class VersionHistory:
    """A tree of versions with a pointer to the current one."""

    def __init__(self, version_hash: str | Version) -> None:
        root = Version(version_hash)
        self.current_version_hash: str = root.hash
        self.version_history: dict[str, Version] = {root.hash: root}

    def add_version(self, version_hash: str | Version) -> None:
        """Add a new version as a child of the current one and make it current."""
        value = str(version_hash)
        if self.is_exist(value):
            raise DuplicateVersionError(value)
        version = Version(value)
        version.set_parent(self.current_version_hash)
        self.current_version_hash = version.hash
        self.version_history[version.hash] = version

    def rollback_to_version(self, version_hash: str | Version) -> None:
        """Make an existing version the current one."""
        value = str(version_hash)
        if value not in self.version_history:
            raise VersionNotFoundError(value)
        self.current_version_hash = value

    def is_exist(self, version_hash: str | Version) -> bool:
        """Return True when the hash is part of the history."""
        return str(version_hash) in self.version_history

    def __len__(self) -> int:
        return len(self.version_history)