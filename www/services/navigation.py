from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from www.models.post import Post
from www.repositories.catalog import ContentRepository


@dataclass(slots=True, frozen=True)
class NavTarget:
    index: int
    title: str

    @property
    def href(self) -> str:
        return f"/posts/{self.index}"


@dataclass(slots=True, frozen=True)
class PostNavigation:
    previous: Optional[NavTarget] = None
    next: Optional[NavTarget] = None


def resolve_navigation(catalog: ContentRepository, post: Post) -> PostNavigation:
    """Previous/next neighbours of ``post`` by catalog index, without wraparound."""
    index = catalog.index_of(post.id)
    if index is None:
        return PostNavigation()
    return PostNavigation(
        previous=_target(catalog, index - 1) if index > 0 else None,
        next=_target(catalog, index + 1) if index < len(catalog) - 1 else None,
    )


def _target(catalog: ContentRepository, index: int) -> Optional[NavTarget]:
    neighbour = catalog.post_at(index)
    if neighbour is None:
        return None
    return NavTarget(index=index, title=neighbour.title)
