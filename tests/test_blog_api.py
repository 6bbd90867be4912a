"""
API tests for blog endpoints (the shared content router)
"""
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query


def create_blog(client, auth_headers, **overrides):
    payload = {
        "slug": "my-post",
        "image": "cover.png",
        "type": 1,
        "translations": [{"language": "en", "title": "Hello", "content": "<p>Body</p>"}],
    }
    payload.update(overrides)
    response = client.post("/blog", json=payload, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_requires_auth(client):
    response = client.post("/blog", json={"translations": []})

    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"


def test_create_rejects_invalid_token(client):
    response = client.post("/blog", json={}, headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_create_and_fetch(client, auth_headers):
    blog = create_blog(client, auth_headers)

    assert blog["slug"] == "my-post"
    assert blog["translations"][0]["language"] == "en"

    response = client.get(f"/blog/{blog['id']}")
    assert response.status_code == 200
    assert response.json()["slug"] == "my-post"


def test_fetch_by_slug_and_language(client, auth_headers):
    create_blog(client, auth_headers)

    assert client.get("/en/blog/my-post").status_code == 200

    missing_translation = client.get("/fr/blog/my-post")
    assert missing_translation.status_code == 404
    assert missing_translation.json()["error"] == "not_found"

    assert client.get("/xx/blog/my-post").status_code == 400
    assert client.get("/en/blog/unknown").status_code == 404


def test_public_get_has_seo_headers(client, auth_headers):
    create_blog(client, auth_headers)

    response = client.get("/en/blog/my-post")

    assert response.headers["cache-control"] == "public, max-age=3600"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["x-content-type-options"] == "nosniff"


def test_invalid_id_names_parameter(client):
    response = client.get("/blog/abc")

    assert response.status_code == 400
    assert response.json()["message"] == "Parameter 'id' must be a positive integer."


def test_error_message_follows_lang(client):
    response = client.get("/blog/abc?lang=fr")

    assert response.status_code == 400
    assert response.json()["message"] != "Parameter 'id' must be a positive integer."


def test_list_pagination(client, auth_headers):
    for title in ("One", "Two", "Three"):
        create_blog(client, auth_headers, slug=None, translations=[
            {"language": "en", "title": title, "content": "x"}
        ])

    response = client.get("/blog?page=1&limit=2")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 2
    assert [b["slug"] for b in body["data"]] == ["one", "two"]


def test_list_rejects_bad_pagination(client):
    assert client.get("/blog?page=0").status_code == 400
    assert client.get("/blog?limit=abc").status_code == 400

    too_large = client.get("/blog?limit=500")
    assert too_large.status_code == 400
    assert too_large.json()["message"] == "Parameter 'limit' must not exceed 100."


def test_update_and_delete(client, auth_headers):
    blog = create_blog(client, auth_headers)

    response = client.put(f"/blog/{blog['id']}", json={"alt_text": "Cover"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["alt_text"] == "Cover"
    assert len(response.json()["translations"]) == 1

    assert client.delete(f"/blog/{blog['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/blog/{blog['id']}").status_code == 404


def test_translation_endpoints(client, auth_headers):
    blog = create_blog(client, auth_headers)
    base = f"/blog/{blog['id']}/translations"

    duplicate = client.post(base, json={"language": "en", "title": "Again", "content": "x"}, headers=auth_headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "conflict"

    added = client.post(base, json={"language": "vi", "title": "Xin chao", "content": "x"}, headers=auth_headers)
    assert added.status_code == 201
    translation_id = added.json()["id"]

    upserted = client.put(f"{base}/fr", json={"title": "Bonjour", "content": "y"}, headers=auth_headers)
    assert upserted.status_code == 200
    assert sorted(t["language"] for t in upserted.json()["translations"]) == ["en", "fr", "vi"]

    assert client.delete(f"{base}/{translation_id}", headers=auth_headers).status_code == 204
    assert client.delete(f"{base}/language/fr", headers=auth_headers).status_code == 204
    assert client.delete(f"{base}/language/fr", headers=auth_headers).status_code == 404

    remaining = client.get(f"/blog/{blog['id']}").json()["translations"]
    assert [t["language"] for t in remaining] == ["en"]


def test_body_validation_error_is_400(client, auth_headers):
    response = client.post(
        "/blog",
        json={"translations": [{"language": "xx", "title": "T", "content": "C"}]},
        headers=auth_headers,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "invalid_argument"
    assert body["details"]


def test_blog_sitemap(client, auth_headers):
    create_blog(client, auth_headers)

    response = client.get("/blog/sitemap?lang=en")

    assert response.status_code == 200
    assert response.json()["urls"] == ["https://example.com/en/blog/my-post"]
    assert response.json()["message"] == "Sitemap generated with 1 URLs."

    assert client.get("/blog/sitemap?lang=xx").status_code == 400


def test_combined_sitemap(client, auth_headers):
    create_blog(client, auth_headers)

    response = client.get("/sitemap?lang=en")

    assert response.status_code == 200
    assert response.json()["urls"] == ["https://example.com/en/blog/my-post"]


def test_database_failure_is_generic_500(client, monkeypatch):
    def broken_count(self):
        raise OperationalError("SELECT count(*) FROM blogs", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Query, "count", broken_count)

    response = client.get("/blog")

    assert response.status_code == 500
    assert response.json() == {
        "error": "internal_error",
        "message": "An internal error occurred. Please try again later.",
    }
    assert "disk" not in response.text
    assert "SELECT" not in response.text
