"""Post list, permalink canonicalization and post detail routes.

The canonical URL of a post is ``/posts/{index}/{id}``. Index-only and
id-only references are redirected there permanently, and a permalink
whose id does not match its index is healed the same way.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from www.models.post import Post
from www.repositories.catalog import ContentRepository
from www.services import views
from www.services.content_loader import get_catalog
from www.services.navigation import resolve_navigation


logger = logging.getLogger(__name__)

router = APIRouter()


def canonical_post_url(index: int, post: Post) -> str:
    return f"/posts/{index}/{post.id}"


def parse_index(value: str) -> Optional[int]:
    """Parse an unsigned decimal index, or return ``None``."""
    if value.isascii() and value.isdigit():
        return int(value)
    return None


def _not_found(detail: str) -> HTTPException:
    logger.debug(detail)
    return HTTPException(status_code=404, detail=detail)


def _permanent_redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_308_PERMANENT_REDIRECT)


@router.api_route("/posts", methods=["GET", "HEAD"], response_class=HTMLResponse, name="post_list")
def post_list(catalog: ContentRepository = Depends(get_catalog)) -> HTMLResponse:
    return HTMLResponse(views.render_post_list(catalog))


@router.api_route("/posts/{desc}", methods=["GET", "HEAD"], name="post_reference", response_model=None)
def post_reference(desc: str, catalog: ContentRepository = Depends(get_catalog)) -> Response:
    index = parse_index(desc)
    if index is not None:
        post = catalog.post_at(index)
        if post is None:
            raise _not_found(f"Post index {index} out of range")
        return _permanent_redirect(canonical_post_url(index, post))

    found = catalog.find_post(desc)
    if found is None:
        raise _not_found(f"No post with id {desc!r}")
    index, post = found
    return _permanent_redirect(canonical_post_url(index, post))


@router.api_route("/posts/{index}/{post_id}", methods=["GET", "HEAD"], name="post_detail", response_model=None)
def post_detail(index: str, post_id: str, catalog: ContentRepository = Depends(get_catalog)) -> Response:
    position = parse_index(index)
    post = catalog.post_at(position) if position is not None else None
    if post is None:
        raise _not_found(f"Post index {index!r} not found")

    if post.id != post_id or index != str(position):
        logger.debug("Healing permalink /posts/%s/%s", index, post_id)
        return _permanent_redirect(canonical_post_url(position, post))

    navigation = resolve_navigation(catalog, post)
    return HTMLResponse(views.render_post_page(catalog, post, navigation))
