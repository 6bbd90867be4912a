"""
Tests for the rich-text HTML sanitizer
"""
from app.utils.html_sanitizer import sanitize_html


def test_keeps_allowed_markup():
    html = '<h2>Title</h2><p><strong>Bold</strong> and <em>italic</em></p><ul><li>One</li></ul>'
    assert sanitize_html(html) == html


def test_drops_script_with_content():
    assert sanitize_html("<p>Safe</p><script>alert('x')</script>") == "<p>Safe</p>"


def test_strips_disallowed_attributes():
    cleaned = sanitize_html('<a href="https://example.com" target="_blank" onclick="steal()">link</a>')

    assert 'href="https://example.com"' in cleaned
    assert 'target="_blank"' in cleaned
    assert "onclick" not in cleaned


def test_keeps_image_source_and_alt_only():
    cleaned = sanitize_html('<img src="https://cdn.example.com/a.png" alt="A" style="width:1px">')

    assert 'src="https://cdn.example.com/a.png"' in cleaned
    assert 'alt="A"' in cleaned
    assert "style" not in cleaned


def test_unwraps_disallowed_tags():
    assert sanitize_html("<section><p>Text</p></section>") == "<p>Text</p>"


def test_empty_input():
    assert sanitize_html("") == ""
    assert sanitize_html(None) == ""
