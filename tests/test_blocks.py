import pytest
from pydantic import ValidationError

from mygen.services.blocks import CodeArtifacts, extract_code_blocks


SAMPLE = (
    "```html\n<h1>Hi</h1>\n```\n"
    "```css\nh1{color:red}\n```\n"
    "```js\nconsole.log(1)\n```\n"
)


def test_empty_response_gives_empty_blocks():
    assert extract_code_blocks("") == CodeArtifacts(html="", css="", js="")


def test_sample_response_keeps_trailing_newlines():
    blocks = extract_code_blocks(SAMPLE)
    assert blocks.html == "<h1>Hi</h1>\n"
    assert blocks.css == "h1{color:red}\n"
    assert blocks.js == "console.log(1)\n"


def test_canonical_fenced_text_reproduces_blocks():
    original = CodeArtifacts(html="  <main>\n<p>a</p>\n</main>\n\n", css="body {}\n", js="  let x = 1;\n")
    text = "".join(
        f"```{tag}\n{body}```\n" for tag, body in (("html", original.html), ("css", original.css), ("js", original.js))
    )
    assert extract_code_blocks(text) == original


def test_categories_are_extracted_independently():
    blocks = extract_code_blocks("Here you go:\n```css\nbody { margin: 0 }\n```\nand\n```js\nalert(1)\n```")
    assert blocks.html == ""
    assert blocks.css == "body { margin: 0 }\n"
    assert blocks.js == "alert(1)\n"


def test_only_style_block():
    blocks = extract_code_blocks("```css\np{}\n```")
    assert blocks == CodeArtifacts(css="p{}\n")


def test_first_block_of_a_category_wins():
    text = "```html\n<p>first</p>\n```\ntext\n```html\n<p>second</p>\n```\n"
    assert extract_code_blocks(text).html == "<p>first</p>\n"


def test_capture_stops_at_first_closing_fence():
    text = "```html\n<p>one</p>\n```css\nb{}\n```\n"
    blocks = extract_code_blocks(text)
    assert blocks.html == "<p>one</p>\n"
    assert blocks.css == "b{}\n"


def test_tag_must_be_followed_by_newline():
    blocks = extract_code_blocks("```javascript\nconsole.log(1)\n```\n```html <p>x</p>```")
    assert blocks.js == ""
    assert blocks.html == ""


def test_unclosed_block_is_empty():
    assert extract_code_blocks("```html\n<p>never closed").html == ""


def test_prose_only_response():
    assert extract_code_blocks("Sorry, I can't help with that.") == CodeArtifacts()


def test_blocks_are_immutable():
    blocks = extract_code_blocks(SAMPLE)
    with pytest.raises(ValidationError):
        blocks.html = "<p>changed</p>"
