from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from www.models.project import ProjectCategory
from www.repositories.catalog import ContentRepository
from www.services import response_mode, views
from www.services.content_loader import get_catalog


logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse, name="homepage")
def homepage(catalog: ContentRepository = Depends(get_catalog)) -> HTMLResponse:
    return HTMLResponse(views.render_home(catalog))


@router.api_route("/projects", methods=["GET", "HEAD"], response_class=HTMLResponse, name="projects")
def projects(catalog: ContentRepository = Depends(get_catalog)) -> HTMLResponse:
    return HTMLResponse(views.render_projects_page(catalog, ProjectCategory.default()))


@router.api_route("/projects/{tab}", methods=["GET", "HEAD"], name="project_tab", response_model=None)
def project_tab(
    request: Request,
    tab: str,
    catalog: ContentRepository = Depends(get_catalog),
) -> Response:
    category = ProjectCategory.parse(tab)
    if category is None:
        logger.debug("Unknown project tab %r, redirecting to /projects", tab)
        return RedirectResponse("/projects", status_code=status.HTTP_308_PERMANENT_REDIRECT)

    if response_mode.wants_fragment(request.headers):
        return HTMLResponse(
            views.render_project_tabs(catalog, category),
            headers=response_mode.fragment_headers(f"/projects/{category.value}"),
        )
    return HTMLResponse(
        views.render_projects_page(catalog, category),
        headers=response_mode.document_headers(),
    )
