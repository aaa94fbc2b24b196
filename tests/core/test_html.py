from __future__ import annotations

from webicons.html import make_html
from webicons.metadata import VendorMetadata

METADATA = VendorMetadata(
    name="OpenMoji",
    attribution='All emojis designed by <a href="https://openmoji.org/">OpenMoji</a>',
    license_name="CC BY-SA 4.0",
    license_url="https://creativecommons.org/licenses/by-sa/4.0/",
    url="https://openmoji.org/",
)


def test_body_order() -> None:
    html = str(make_html(METADATA, "😀 (1f600)"))
    body = html[html.index("<body>"):]

    name = body.index("<h1>OpenMoji</h1>")
    url = body.index('<p><a href="https://openmoji.org/">https://openmoji.org/</a></p>')
    attribution = body.index("<p>All emojis designed by")
    license = body.index(
        '<p>License: <a href="https://creativecommons.org/licenses/by-sa/4.0/">CC BY-SA 4.0</a></p>'
    )
    assert name < url < attribution < license


def test_head() -> None:
    html = make_html(METADATA, "😀 (1f600)").render()
    assert "<title>😀 (1f600)</title>" in html
    assert '<link rel="icon" type="image/x-icon" href="/favicon.ico" sizes="any">' in html


def test_document_structure() -> None:
    doc = make_html(METADATA, "title")
    assert doc.title == "title"
    assert len(doc.body) == 4
    assert doc.favicon.href == "/favicon.ico"


def test_attribution_is_html_fragment() -> None:
    html = str(make_html(METADATA, "t"))
    assert '<a href="https://openmoji.org/">OpenMoji</a>' in html


def test_text_fields_are_escaped() -> None:
    metadata = METADATA.model_copy(update={"name": "<script>x</script>"})
    html = str(make_html(metadata, "<b>"))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "<title>&lt;b&gt;</title>" in html
