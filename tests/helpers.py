from __future__ import annotations

from datetime import date

from www.models.post import Link, Post, SiteProfile
from www.models.project import Project, ProjectCategory
from www.repositories.catalog import ContentRepository


def build_post(index: int, **overrides) -> Post:
    fields = dict(
        id=f"post-{index}",
        title=f"Post number {index}",
        date=date(2024, 1, index + 1),
        excerpt=f"Excerpt {index}",
        content=f"# Heading {index}\n\nBody of post {index}.",
        tags=("example",),
    )
    fields.update(overrides)
    return Post(**fields)


def build_catalog(post_count: int = 5) -> ContentRepository:
    posts = [build_post(index) for index in range(post_count)]
    projects = [
        Project(id="alpha", title="Alpha", description="Shipped", category=ProjectCategory.PRODUCTION),
        Project(id="beta", title="Beta", description="Just for fun", category=ProjectCategory.TOY),
        Project(id="gamma", title="Gamma", description="Also shipped", tech_stack=("Python",)),
    ]
    links = [Link(href="/projects", title="Projects"), Link(href="https://example.com", title="Elsewhere", target="_blank")]
    return ContentRepository(posts, projects, links, SiteProfile(name="Test Person", taglines=("Tester",)))
