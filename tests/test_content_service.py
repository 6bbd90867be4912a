"""
Tests for the generic content service (aggregate CRUD + translation store)
"""
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query

from app.core.exceptions import Conflict, Internal, InvalidArgument, NotFound
from app.services.content_kinds import BLOG, BANNER, CONTACT, MEMBER
from app.services.content_service import ContentService
from app.services.slug_service import SlugService


def blog_payload(title="Hello", slug=None, languages=("en",), **extra):
    return {
        "slug": slug,
        "image": "https://cdn.example.com/cover.png",
        "type": 1,
        "translations": [
            {"language": lang, "title": f"{title} {lang}" if lang != "en" else title, "content": "<p>Body</p>"}
            for lang in languages
        ],
        **extra,
    }


@pytest.fixture
def blogs(db_session):
    return ContentService(db_session, BLOG)


# ==================== CREATE / FIND ====================

def test_create_and_find_by_slug(blogs):
    blog = blogs.create(blog_payload(slug="my-post"))

    assert blogs.get_by_slug("my-post", "en").id == blog.id

    with pytest.raises(NotFound) as exc_info:
        blogs.get_by_slug("my-post", "fr")
    assert exc_info.value.message_key == "TRANSLATION_NOT_FOUND"


def test_create_derives_distinct_slugs_from_title(blogs):
    first = blogs.create(blog_payload(title="Hello World"))
    second = blogs.create(blog_payload(title="Hello World"))

    assert first.slug == "hello-world"
    assert second.slug == "hello-world-1"


def test_create_rejects_unsupported_language(blogs):
    with pytest.raises(InvalidArgument) as exc_info:
        blogs.create(blog_payload(languages=("xx",)))

    assert exc_info.value.message_key == "INVALID_LANGUAGE"
    assert exc_info.value.params["lang"] == "xx"
    assert "en, vi, fr, es, ja" == exc_info.value.params["supported"]


def test_create_rejects_duplicate_languages_in_payload(blogs):
    with pytest.raises(Conflict):
        blogs.create(blog_payload(languages=("en", "en")))


def test_create_rejects_empty_slug_source(blogs):
    with pytest.raises(InvalidArgument):
        blogs.create({"translations": []})


def test_create_sanitizes_html_content(blogs):
    payload = blog_payload()
    payload["translations"][0]["content"] = '<p onclick="x()">Hi<script>alert(1)</script></p>'

    blog = blogs.create(payload)

    content = blog.translations[0].content
    assert "<script>" not in content
    assert "onclick" not in content
    assert "<p>Hi" in content


def test_create_rejects_long_meta_description(blogs):
    payload = blog_payload()
    payload["translations"][0]["meta_description"] = "x" * 161

    with pytest.raises(InvalidArgument) as exc_info:
        blogs.create(payload)
    assert exc_info.value.message_key == "FIELD_TOO_LONG"


def test_get_validates_id(blogs):
    with pytest.raises(InvalidArgument) as exc_info:
        blogs.get("abc")
    assert exc_info.value.params == {"param": "id"}

    with pytest.raises(InvalidArgument):
        blogs.get("0")

    with pytest.raises(NotFound):
        blogs.get("999")


def test_list_paginates(blogs):
    for i in range(3):
        blogs.create(blog_payload(title=f"Post {i}"))

    items, total = blogs.list(page=2, limit=2)

    assert total == 3
    assert [b.slug for b in items] == ["post-2"]


def test_list_rejects_limit_over_cap(blogs):
    with pytest.raises(InvalidArgument) as exc_info:
        blogs.list(page=1, limit=101)

    assert exc_info.value.message_key == "LIMIT_TOO_LARGE"
    assert exc_info.value.params == {"param": "limit", "max": 100}


# ==================== UPDATE / REMOVE ====================

def test_update_without_translations_keeps_them(blogs):
    blog = blogs.create(blog_payload(languages=("en", "fr")))

    updated = blogs.update(blog.id, {"image": "new.png"})

    assert updated.image == "new.png"
    assert sorted(t.language for t in updated.translations) == ["en", "fr"]


def test_update_with_translations_replaces_them(blogs):
    blog = blogs.create(blog_payload(languages=("en", "fr")))

    updated = blogs.update(blog.id, {
        "translations": [
            {"language": "en", "title": "Replaced", "content": "New"},
            {"language": "ja", "title": "Japanese", "content": "Body"},
        ]
    })

    assert sorted(t.language for t in updated.translations) == ["en", "ja"]
    assert next(t for t in updated.translations if t.language == "en").title == "Replaced"


def test_update_regenerates_slug_only_when_changed(blogs):
    blogs.create(blog_payload(slug="taken"))
    blog = blogs.create(blog_payload(slug="mine"))

    assert blogs.update(blog.id, {"slug": "mine"}).slug == "mine"
    assert blogs.update(blog.id, {"slug": "Taken"}).slug == "taken-1"


def test_remove_cascades_translations(blogs, db_session):
    blog = blogs.create(blog_payload(languages=("en", "vi")))

    blogs.remove(blog.id)

    with pytest.raises(NotFound):
        blogs.get(blog.id)
    assert db_session.query(BLOG.translation_model).count() == 0


# ==================== TRANSLATION STORE ====================

def test_add_translation_conflict_on_existing_language(blogs):
    blog = blogs.create(blog_payload())

    with pytest.raises(Conflict) as exc_info:
        blogs.add_translation(blog.id, {"language": "en", "title": "Again", "content": "x"})
    assert exc_info.value.message_key == "TRANSLATION_ALREADY_EXISTS"


def test_add_translation_returns_new_translation(blogs):
    blog = blogs.create(blog_payload())

    translation = blogs.add_translation(blog.id, {"language": "es", "title": "Hola", "content": "x"})

    assert translation.id is not None
    assert translation.language == "es"


def test_upsert_translation_is_idempotent(blogs):
    blog = blogs.create(blog_payload())

    blogs.add_or_update_translation(blog.id, "fr", {"title": "Premier", "content": "a"})
    result = blogs.add_or_update_translation(blog.id, "fr", {"title": "Second", "content": "b"})

    french = [t for t in result.translations if t.language == "fr"]
    assert len(french) == 1
    assert french[0].title == "Second"
    assert len(result.translations) == 2


def test_remove_translation_by_language(blogs):
    blog = blogs.create(blog_payload(languages=("en", "fr", "vi")))

    blogs.remove_translation_by_language(blog.id, "fr")

    remaining = blogs.get(blog.id).translations
    assert len(remaining) == 2
    assert "fr" not in [t.language for t in remaining]

    with pytest.raises(NotFound):
        blogs.remove_translation_by_language(blog.id, "fr")


def test_remove_translation_by_id(blogs):
    blog = blogs.create(blog_payload(languages=("en", "fr")))
    translation_id = blog.translations[1].id

    blogs.remove_translation(blog.id, translation_id)

    assert [t.language for t in blogs.get(blog.id).translations] == ["en"]

    with pytest.raises(NotFound) as exc_info:
        blogs.remove_translation(blog.id, translation_id)
    assert exc_info.value.message_key == "TRANSLATION_ID_NOT_FOUND"


# ==================== OTHER KINDS ====================

def test_member_slug_comes_from_name(db_session):
    members = ContentService(db_session, MEMBER)

    member = members.create({
        "translations": [{"language": "en", "name": "Jane Doe", "description": "<b>Lead</b>"}],
    })

    assert member.slug == "jane-doe"
    assert member.is_active is True


def test_contact_slug_comes_from_address(db_session):
    contacts = ContentService(db_session, CONTACT)

    contact = contacts.create({
        "phone": "+84 123",
        "mail": "office@example.com",
        "translations": [{"language": "en", "address": "1 Main St", "keywords": ["office"]}],
    })

    assert contact.slug == "1-main-st"
    assert contact.translations[0].keywords == ["office"]


def test_banner_ignores_unknown_fields(db_session):
    banners = ContentService(db_session, BANNER)

    banner = banners.create({
        "image": "hero.png",
        "unknown": "ignored",
        "translations": [{"language": "vi", "title": "Xin chao", "description": "Mo ta", "content": "nope"}],
    })

    assert banner.slug == "xin-chao"
    assert not hasattr(banner.translations[0], "content")


# ==================== SLUG RACE / FAILURES ====================

def test_create_retries_when_slug_taken_concurrently(blogs, monkeypatch):
    blogs.create(blog_payload(slug="hello"))
    original = SlugService.generate_unique_slug
    calls = []

    def stale_then_fresh(self, candidate, exclude_id=None):
        calls.append(candidate)
        if len(calls) == 1:
            return "hello"  # lost the race: another request inserted it first
        return original(self, candidate, exclude_id)

    monkeypatch.setattr(SlugService, "generate_unique_slug", stale_then_fresh)

    blog = blogs.create(blog_payload(title="Hello"))

    assert blog.slug == "hello-1"
    assert len(calls) == 2
    assert [t.language for t in blog.translations] == ["en"]


def test_create_gives_up_after_repeated_slug_races(blogs, monkeypatch):
    blogs.create(blog_payload(slug="hello"))
    monkeypatch.setattr(SlugService, "generate_unique_slug", lambda self, candidate, exclude_id=None: "hello")

    with pytest.raises(Conflict) as exc_info:
        blogs.create(blog_payload(title="Hello"))

    assert exc_info.value.message_key == "DUPLICATE_SLUG"
    assert exc_info.value.params == {"slug": "hello"}
    _, total = blogs.list()
    assert total == 1


def test_unexpected_database_error_becomes_internal(blogs, monkeypatch):
    def broken_count(self):
        raise OperationalError("SELECT count(*)", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Query, "count", broken_count)

    with pytest.raises(Internal) as exc_info:
        blogs.list()

    assert exc_info.value.message_key == "INTERNAL_ERROR"
    assert isinstance(exc_info.value.__cause__, OperationalError)
