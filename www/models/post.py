from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple


@dataclass(slots=True, frozen=True)
class Post:
    # Short, URL-safe and unique across the catalog; doubles as the slug.
    id: str
    title: str
    date: date
    excerpt: str
    content: str
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_date(self) -> str:
        return self.date.isoformat()


@dataclass(slots=True, frozen=True)
class Link:
    href: str
    title: str
    target: Optional[str] = None

    @property
    def display_target(self) -> str:
        return self.target or "_self"


@dataclass(slots=True, frozen=True)
class SiteProfile:
    name: str
    taglines: Tuple[str, ...] = field(default_factory=tuple)
    headshot: Optional[str] = None
