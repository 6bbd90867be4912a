"""
Tests for slug normalization and collision handling
"""
import re
import pytest

from app.core.exceptions import InvalidArgument
from app.models.blog import Blog
from app.services.slug_service import SlugService, normalize_slug

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@pytest.mark.parametrize("candidate,expected", [
    ("Hello World", "hello-world"),
    ("  Hello, World!  ", "hello-world"),
    ("--already-a-slug--", "already-a-slug"),
    ("Café au lait", "caf-au-lait"),
    ("MiXeD 123 Case", "mixed-123-case"),
])
def test_normalize_slug(candidate, expected):
    assert normalize_slug(candidate) == expected


def test_normalize_slug_empty_values():
    assert normalize_slug("") == ""
    assert normalize_slug(None) == ""
    assert normalize_slug("!!!") == ""


def test_generate_unique_slug_free(db_session):
    assert SlugService(db_session, Blog).generate_unique_slug("My Post") == "my-post"


def test_generate_unique_slug_collision_uses_normalized_base(db_session):
    db_session.add(Blog(slug="hello-world"))
    db_session.add(Blog(slug="hello-world-1"))
    db_session.commit()

    slug = SlugService(db_session, Blog).generate_unique_slug("Hello World!")

    assert slug == "hello-world-2"
    assert SLUG_PATTERN.match(slug)


def test_generate_unique_slug_keeps_own_slug_on_update(db_session):
    blog = Blog(slug="my-post")
    db_session.add(blog)
    db_session.commit()

    service = SlugService(db_session, Blog)
    assert service.generate_unique_slug("my-post", exclude_id=blog.id) == "my-post"
    assert service.generate_unique_slug("my-post") == "my-post-1"


def test_generate_unique_slug_rejects_empty_candidate(db_session):
    with pytest.raises(InvalidArgument) as exc_info:
        SlugService(db_session, Blog).generate_unique_slug("???")

    assert exc_info.value.message_key == "INVALID_PARAM"
    assert exc_info.value.params == {"param": "slug"}
