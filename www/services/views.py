"""HTML composition for every page of the site.

Each ``render_*`` function is a pure mapping from already-resolved values
to an HTML string. Fragment and full-document variants of the project
gallery share the same ``_project_tabs.html`` template; only the document
shell around it differs.
"""
from __future__ import annotations

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from www import config
from www.models.post import Post
from www.models.project import ProjectCategory
from www.repositories.catalog import ContentRepository
from www.services.markdown import markdown_to_html
from www.services.navigation import PostNavigation


PROJECT_TABS_ID = "project_tabs"

_env = Environment(
    loader=FileSystemLoader(config.TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.globals["categories"] = list(ProjectCategory)
_env.globals["tabs_id"] = PROJECT_TABS_ID


def render_home(catalog: ContentRepository) -> str:
    profile = catalog.profile
    return _render(
        "home.html",
        page_title=profile.name or "Home",
        profile=profile,
        links=catalog.links,
    )


def render_project_tabs(catalog: ContentRepository, active: ProjectCategory) -> str:
    """Tab bar plus the project grid of ``active``, without a document shell."""
    return _render("_project_tabs.html", **_project_context(catalog, active))


def render_projects_page(catalog: ContentRepository, active: ProjectCategory) -> str:
    return _render(
        "projects.html",
        page_title="Projects",
        site_name=catalog.profile.name,
        **_project_context(catalog, active),
    )


def render_post_list(catalog: ContentRepository) -> str:
    return _render(
        "posts.html",
        page_title="Posts",
        site_name=catalog.profile.name,
        entries=catalog.newest_first(),
    )


def render_post_page(catalog: ContentRepository, post: Post, navigation: PostNavigation) -> str:
    return _render(
        "post_detail.html",
        page_title=post.title,
        site_name=catalog.profile.name,
        post=post,
        body=Markup(markdown_to_html(post.content)),
        navigation=navigation,
    )


def _project_context(catalog: ContentRepository, active: ProjectCategory) -> dict:
    return {
        "active": active,
        "projects": catalog.projects_in(active),
    }


def _render(template_name: str, **context) -> str:
    return _env.get_template(template_name).render(**context)
