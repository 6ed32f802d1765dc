import logging

import pytest

from lingo_engine.html.codec import HtmlCodec, split_path
from lingo_engine.html.converter import HtmlConverter
from lingo_engine.html.fallback import extract_simple, inject_simple

PAGE = """
<!DOCTYPE html>
<html>
  <head>
    <title>Test Page</title>
    <meta name="description" content="Page description">
  </head>
  <body>
    standalone text
    <div>
      <h1>Hello World</h1>
      <p>
        This is a paragraph with
        <a href="/test" title="Link title">a link</a>
        and an
        <img src="/test.jpg" alt="Test image">
        and some <b>bold <i>and italic</i></b> text.
      </p>
      <script>
        const doNotTranslate = "this text should be ignored";
      </script>
      <input type="text" placeholder="Enter text">
    </div>
  </body>
</html>""".strip()


def test_extract_paths():
    codec = HtmlCodec()
    html = (
        '<html><head><title>T</title></head>'
        '<body><p>Hello <a href="/x" title="Link">link</a></p></body></html>'
    )

    assert codec.extract(codec.parse(html)) == {
        "head/0/0": "T",
        "body/0/0": "Hello",
        "body/0/1#title": "Link",
        "body/0/1/0": "link",
    }


def test_extract_skips_script_and_style_but_counts_them_as_siblings():
    codec = HtmlCodec()
    html = (
        "<html><head><style>p { color: red; }</style><title>T</title></head>"
        '<body><script>var x = "y";</script><p>Hi</p></body></html>'
    )

    assert codec.extract(codec.parse(html)) == {"head/1/0": "T", "body/1/0": "Hi"}


def test_extract_ignores_comments_and_blank_text():
    codec = HtmlCodec()
    html = "<html><body>\n  <!-- note -->\n  <p>  Hi  </p>\n</body></html>"

    assert codec.extract(codec.parse(html)) == {"body/0/0": "Hi"}


def test_extract_full_page():
    codec = HtmlCodec()
    content = codec.extract(codec.parse(PAGE))

    assert content["head/0/0"] == "Test Page"
    assert content["head/1#content"] == "Page description"
    assert content["body/0"] == "standalone text"
    assert content["body/1/0/0"] == "Hello World"
    assert content["body/1/1/1#title"] == "Link title"
    assert content["body/1/1/3#alt"] == "Test image"
    assert content["body/1/3#placeholder"] == "Enter text"
    assert not any("doNotTranslate" in value for value in content.values())


def test_reinjecting_extracted_values_reproduces_document():
    codec = HtmlCodec()
    document = codec.parse(PAGE)
    codec.inject(document, codec.extract(document), "es")

    expected = codec.parse(PAGE)
    expected.html["lang"] = "es"
    assert codec.serialize(document) == codec.serialize(expected)


def test_inject_replaces_text_and_attributes_keeping_whitespace():
    codec = HtmlCodec()
    document = codec.parse('<html><body><p>\n  Hello  \n</p><img alt="Cat"></body></html>')

    codec.inject(document, {"body/0/0": "Hola", "body/1#alt": "Gato", "body/9/9": "ignored"}, "es")

    assert document.html["lang"] == "es"
    assert document.p.string == "\n  Hola  \n"
    assert document.img["alt"] == "Gato"


def test_split_path():
    assert split_path("body/0/1#title") == ("body/0/1", "title")
    assert split_path("head/2") == ("head/2", None)


def test_extract_simple():
    html = (
        '<html><head><title>Hi</title></head><body><p>Hello</p>'
        '<img alt="Pic"><script>var a = "<b>no</b>";</script></body></html>'
    )

    assert extract_simple(html) == {"text_0": "Hi", "text_1": "Hello", "attr_1_2": "Pic"}


def test_inject_simple_replaces_literals_and_sets_lang():
    html = '<html lang="en"><body><p>Hello</p><p>Hello</p><img alt="Pic"></body></html>'
    extracted = extract_simple(html)

    assert extracted == {"text_0": "Hello", "text_1": "Hello", "attr_1_2": "Pic"}

    result = inject_simple(html, extracted, {"text_0": "Hola", "attr_1_2": "Gato"}, "es")

    assert result == '<html lang="es"><body><p>Hola</p><p>Hola</p><img alt="Gato"></body></html>'


def test_converter_falls_back_without_tree_builder():
    converter = HtmlConverter(parser="no-such-parser")
    assert not converter.use_structural
    assert converter.to_payload("<html><body><p>Hello</p></body></html>") == {"text_0": "Hello"}


@pytest.mark.asyncio
async def test_localize_html(engine_factory, echo):
    engine = engine_factory(echo("ES:"))

    result = await engine.localize_html(PAGE, {"source_locale": "en", "target_locale": "es"})

    assert 'lang="es"' in result
    assert "ES:Test Page" in result
    assert "ES:Hello World" in result
    assert "ES:standalone text" in result
    assert 'alt="ES:Test image"' in result
    assert 'title="ES:Link title"' in result
    assert 'placeholder="ES:Enter text"' in result
    assert 'content="ES:Page description"' in result
    assert 'const doNotTranslate = "this text should be ignored";' in result
    assert "ES:const" not in result
    assert 'href="/test"' in result


@pytest.mark.asyncio
async def test_localize_html_regex_fallback(engine_factory, echo):
    engine = engine_factory(echo("ES:"))

    result = await engine.localize_html(
        "<html><body><h1>Hello World</h1><script>var s = 1;</script></body></html>",
        {"source_locale": "en", "target_locale": "es"},
        structural=False,
    )

    assert result == '<html lang="es"><body><h1>ES:Hello World</h1><script>var s = 1;</script></body></html>'


@pytest.mark.asyncio
async def test_missing_tree_builder_warns_once_per_document(engine_factory, echo, caplog):
    engine = engine_factory(echo("ES:"), html_parser="no-such-parser")

    with caplog.at_level(logging.WARNING, logger="lingo_engine.html.converter"):
        result = await engine.localize_html(
            "<html><body><p>Hello</p></body></html>",
            {"source_locale": "en", "target_locale": "es"},
        )

    assert result == '<html lang="es"><body><p>ES:Hello</p></body></html>'
    fallback_warnings = [r for r in caplog.records if "falling back to regex" in r.getMessage()]
    assert len(fallback_warnings) == 1
