import pytest

from www.models.project import ProjectCategory
from www.repositories.catalog import CatalogError, ContentRepository

from tests.helpers import build_catalog, build_post


def test_post_at_is_bounds_checked():
    catalog = build_catalog(3)
    assert catalog.post_at(0).id == "post-0"
    assert catalog.post_at(2).id == "post-2"
    assert catalog.post_at(3) is None
    assert catalog.post_at(-1) is None


def test_find_post_returns_index_and_post():
    catalog = build_catalog(3)
    index, post = catalog.find_post("post-1")
    assert index == 1
    assert post.title == "Post number 1"
    assert catalog.find_post("missing") is None


def test_newest_first_keeps_catalog_indices():
    catalog = build_catalog(3)
    assert [index for index, _ in catalog.newest_first()] == [2, 1, 0]
    assert [post.id for _, post in catalog.newest_first()] == ["post-2", "post-1", "post-0"]


def test_projects_in_filters_by_category():
    catalog = build_catalog()
    assert [p.id for p in catalog.projects_in(ProjectCategory.PRODUCTION)] == ["alpha", "gamma"]
    assert [p.id for p in catalog.projects_in(ProjectCategory.TOY)] == ["beta"]


def test_duplicate_post_ids_are_rejected():
    with pytest.raises(CatalogError):
        ContentRepository([build_post(0), build_post(1, id="post-0")])


@pytest.mark.parametrize("post_id", ["", "a/b", "a?b", "7", ".hidden"])
def test_ids_unusable_in_permalinks_are_rejected(post_id):
    with pytest.raises(CatalogError):
        ContentRepository([build_post(0, id=post_id)])


def test_slug_style_ids_are_accepted():
    catalog = ContentRepository([build_post(0, id="2025-gl_demo.v2~final")])
    assert catalog.find_post("2025-gl_demo.v2~final")[0] == 0


def test_catalog_is_not_mutable_through_accessors():
    catalog = build_catalog(2)
    assert isinstance(catalog.posts, tuple)
    with pytest.raises(AttributeError):
        catalog.posts[0].title = "changed"
