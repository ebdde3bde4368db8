from __future__ import annotations

import logging
from datetime import date, datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

import frontmatter
import yaml

from www import config
from www.models.post import Link, Post, SiteProfile
from www.models.project import Project, ProjectCategory
from www.repositories.catalog import CatalogError, ContentRepository


logger = logging.getLogger(__name__)


def load_catalog(catalog_file: Path = config.CATALOG_FILE, posts_dir: Optional[Path] = None) -> ContentRepository:
    """Build the content repository from a catalog manifest.

    Posts keep the order in which the manifest lists them; that order is
    what permalinks are numbered by, so nothing is skipped or sorted.
    """
    if not catalog_file.exists():
        raise CatalogError(f"Catalog file not found: {catalog_file}")
    posts_dir = posts_dir or catalog_file.parent / "posts"

    with catalog_file.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise CatalogError(f"{catalog_file} is not in expected format")

    profile = _load_profile(data.get("site") or {})
    links = [_load_link(entry) for entry in _as_list(data, "links")]
    posts = [_load_post(posts_dir / str(name)) for name in _as_list(data, "posts")]
    projects = [_load_project(entry) for entry in _as_list(data, "projects")]

    repository = ContentRepository(posts, projects, links, profile)
    logger.info(
        "Loaded %d posts and %d projects from %s",
        len(repository.posts),
        len(repository.projects),
        catalog_file,
    )
    return repository


@lru_cache(maxsize=1)
def get_catalog() -> ContentRepository:
    """Process-wide catalog, loaded on first use."""
    return load_catalog()


def _as_list(data: dict, key: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise CatalogError(f"'{key}' must be a list")
    return value


def _load_profile(meta: dict) -> SiteProfile:
    taglines = meta.get("taglines") or []
    if isinstance(taglines, str):
        taglines = [taglines]
    return SiteProfile(
        name=str(meta.get("name") or "").strip(),
        taglines=tuple(str(line).strip() for line in taglines if str(line).strip()),
        headshot=_optional_str(meta.get("headshot")),
    )


def _load_link(entry: Any) -> Link:
    if not isinstance(entry, dict):
        raise CatalogError(f"Link entry must be a mapping, got {entry!r}")
    return Link(
        href=_required(entry, "href", "link"),
        title=_required(entry, "title", "link"),
        target=_optional_str(entry.get("target")),
    )


def _load_post(path: Path) -> Post:
    if path.suffix != ".md":
        path = path.with_suffix(".md")
    if not path.is_file():
        raise CatalogError(f"Post file not found: {path}")

    parsed = frontmatter.load(path)
    meta = parsed.metadata or {}
    where = f"post {path.name}"

    return Post(
        id=_post_id(meta.get("id"), path),
        title=_required(meta, "title", where),
        date=_parse_date(meta.get("date"), where),
        excerpt=str(meta.get("excerpt") or "").strip(),
        content=parsed.content.strip(),
        tags=_normalize_tags(meta.get("tags")),
    )


def _load_project(entry: Any) -> Project:
    if not isinstance(entry, dict):
        raise CatalogError(f"Project entry must be a mapping, got {entry!r}")
    project_id = _required(entry, "id", "project")

    category_name = entry.get("category")
    if category_name is None:
        category = ProjectCategory.coerce(None)
    else:
        category = ProjectCategory.parse(str(category_name).strip().lower())
        if category is None:
            raise CatalogError(f"Unknown category '{category_name}' for project '{project_id}'")

    return Project(
        id=project_id,
        title=str(entry.get("title") or project_id).strip(),
        description=str(entry.get("description") or "").strip(),
        category=category,
        tech_stack=_normalize_tags(entry.get("tech_stack")),
        github_url=_optional_str(entry.get("github_url")),
        try_it_url=_optional_str(entry.get("try_it_url")),
    )


def _post_id(value: Any, path: Path) -> str:
    return path.stem if value is None else str(value).strip()


def _required(meta: dict, key: str, where: str) -> str:
    value = meta.get(key)
    if value is None or not str(value).strip():
        raise CatalogError(f"Missing '{key}' in {where}")
    return str(value).strip()


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_date(value: Any, where: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            pass
    raise CatalogError(f"Unrecognized date {value!r} in {where}")


def _normalize_tags(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, Iterable):
        return tuple(str(item).strip() for item in value if str(item).strip())
    return ()
