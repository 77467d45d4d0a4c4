"""Article categories and their repository port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A registered article category."""

    id: str
    name: str


class CategoryRepository(ABC):
    """Looks up registered categories."""

    @abstractmethod
    async def find(self, category_id: str) -> Category | None:
        """Return the category with this id, or None."""