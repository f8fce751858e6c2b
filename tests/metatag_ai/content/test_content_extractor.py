import pytest

from metatag_ai.content import ContentExtractor, ContentItem, html_to_text, render_full
from metatag_ai.errors import ExtractionError


def _item(body: str, title: str = "Test") -> ContentItem:
    return ContentItem(id="1", bundle="article", title=title, body=body)


def test_extract_text_strips_tags(article):
    text = ContentExtractor().extract_text(article)

    assert "Test Article" in text
    assert "test content" in text
    assert "<p>" not in text
    assert "<strong>" not in text


def test_whitespace_normalization():
    item = _item("Line 1\n\n\nLine 2    with    spaces", title="")
    text = ContentExtractor().extract_text(item)

    assert text == "Line 1 Line 2 with spaces"
    assert "  " not in text
    assert "\n" not in text


def test_html_entity_decoding():
    text = ContentExtractor().extract_text(_item("Text with &amp; &lt; &gt; entities"))
    assert "Text with & < > entities" in text


def test_script_style_and_comments_are_dropped():
    html = (
        "<p>Visible</p><script>var x = '<b>';</script>"
        "<style>p { color: red }</style><!-- hidden note -->"
    )
    assert html_to_text(html) == "Visible"


def test_truncates_long_text_with_marker():
    text = ContentExtractor().extract_text(_item("word " * 2000, title=""))

    assert len(text) == 5003
    assert text.endswith("...")


def test_text_at_cap_is_untouched():
    body = "x" * 5000
    text = ContentExtractor(lambda item: item.body).extract_text(_item(body))
    assert text == body


def test_empty_item_returns_empty_string():
    assert ContentExtractor().extract_text(_item("", title="")) == ""
    assert ContentExtractor().extract_text(_item("   <p> </p> ", title="")) == ""


def test_titled_item_without_body_text_is_empty():
    assert ContentExtractor().extract_text(_item("", title="Draft")) == ""
    blank = _item("<p> <br> </p>", title="Draft")
    assert ContentExtractor().extract_text(blank) == ""


def test_inline_markup_does_not_split_words():
    html = "<p><b>Hel</b>lo for <strong>$5</strong>.</p>"
    assert html_to_text(html) == "Hello for $5."
    assert html_to_text("<p>a</p><p>b</p><ul><li>c</li><li>d</li></ul>") == "a b c d"
    assert html_to_text("one<br>two") == "one two"


def test_custom_renderer_is_used():
    extractor = ContentExtractor(lambda item: f"<main>{item.id}</main>", max_length=10)
    assert extractor.extract_text(_item("ignored")) == "1"


def test_render_failure_becomes_extraction_error():
    def boom(_item):
        raise RuntimeError("template missing")

    with pytest.raises(ExtractionError) as excinfo:
        ContentExtractor(boom).extract_text(_item("x"))
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_render_full_escapes_title_and_keeps_body():
    html = render_full(_item("<p>Body</p>", title="Fish & <Chips>"))
    assert "<h1>Fish &amp; &lt;Chips&gt;</h1>" in html
    assert "<p>Body</p>" in html
    assert render_full(_item("", title="")) == ""
    assert render_full(_item("", title="Only a title")) == ""
