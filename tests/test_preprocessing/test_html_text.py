"""Tests for HTML text and title extraction."""

from localsearch.preprocessing.html_text import clean_title, extract_page


def test_extracts_title_and_visible_text():
    html = """
    <html><head><title>  Alan   Turing </title>
    <style>body { color: red; }</style></head>
    <body><h1>Alan Turing</h1>
    <script>var tracking = "secret";</script>
    <p>Computer   scientist
    and mathematician.</p></body></html>
    """
    title, text = extract_page(html)

    assert title == "Alan Turing"
    assert "Computer scientist and mathematician." in text
    assert "secret" not in text
    assert "color" not in text
    assert "  " not in text


def test_missing_title_uses_default():
    title, text = extract_page("<p>No head here</p>", default_title="Untitled")
    assert title == "Untitled"
    assert text == "No head here"


def test_empty_title_uses_default():
    title, _ = extract_page("<title>   </title><p>x</p>")
    assert title == "No Title"


def test_entities_are_decoded():
    _, text = extract_page("<p>Fish &amp; Chips</p>")
    assert text == "Fish & Chips"


class TestCleanTitle:
    def test_underscores_become_spaces(self):
        assert clean_title("eiffel_tower") == "Eiffel Tower"

    def test_parenthesized_parts_removed(self):
        assert clean_title("Mona_Lisa_(detail)") == "Mona Lisa"

    def test_already_clean(self):
        assert clean_title("Sunset") == "Sunset"

    def test_empty(self):
        assert clean_title("") == ""
