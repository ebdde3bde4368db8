from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Tuple

from www.models.post import Link, Post, SiteProfile
from www.models.project import Project, ProjectCategory


class CatalogError(ValueError):
    """Raised when content cannot be assembled into a consistent catalog."""


# Post ids appear verbatim as the last permalink segment.
_post_id_pattern = re.compile(r"[A-Za-z0-9][A-Za-z0-9._~-]*")


def is_valid_post_id(post_id: str) -> bool:
    # An all-digit id would be read as an index by /posts/{desc}.
    return bool(_post_id_pattern.fullmatch(post_id)) and not post_id.isdigit()


class ContentRepository:
    """Read-only catalog of posts and projects.

    A post's position in ``posts`` is its permanent index: index 0 is the
    earliest-added entry. Nothing here mutates after construction, so a
    single instance is shared by every request without locking.
    """

    __slots__ = ("_posts", "_projects", "_links", "_profile", "_index_by_id")

    def __init__(
        self,
        posts: Iterable[Post],
        projects: Iterable[Project] = (),
        links: Iterable[Link] = (),
        profile: Optional[SiteProfile] = None,
    ) -> None:
        self._posts: Tuple[Post, ...] = tuple(posts)
        self._projects: Tuple[Project, ...] = tuple(projects)
        self._links: Tuple[Link, ...] = tuple(links)
        self._profile = profile or SiteProfile(name="")

        index_by_id: Dict[str, int] = {}
        for index, post in enumerate(self._posts):
            if not is_valid_post_id(post.id):
                raise CatalogError(f"Invalid post id {post.id!r} at index {index}")
            if post.id in index_by_id:
                raise CatalogError(f"Duplicate post id '{post.id}' at index {index}")
            index_by_id[post.id] = index
        self._index_by_id = index_by_id

    @property
    def posts(self) -> Tuple[Post, ...]:
        return self._posts

    @property
    def projects(self) -> Tuple[Project, ...]:
        return self._projects

    @property
    def links(self) -> Tuple[Link, ...]:
        return self._links

    @property
    def profile(self) -> SiteProfile:
        return self._profile

    def __len__(self) -> int:
        return len(self._posts)

    def post_at(self, index: int) -> Optional[Post]:
        if 0 <= index < len(self._posts):
            return self._posts[index]
        return None

    def index_of(self, post_id: str) -> Optional[int]:
        return self._index_by_id.get(post_id)

    def find_post(self, post_id: str) -> Optional[Tuple[int, Post]]:
        """Return ``(index, post)`` for ``post_id`` or ``None``."""
        index = self.index_of(post_id)
        if index is None:
            return None
        return index, self._posts[index]

    def newest_first(self) -> Tuple[Tuple[int, Post], ...]:
        return tuple(reversed(tuple(enumerate(self._posts))))

    def projects_in(self, category: ProjectCategory) -> Tuple[Project, ...]:
        return tuple(project for project in self._projects if project.category == category)
