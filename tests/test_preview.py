import html

from mygen.services.blocks import CodeArtifacts, extract_code_blocks
from mygen.services.preview import (
    LINK_SCRIPT,
    PREVIEW_CSP,
    SANDBOX_POLICY,
    compose_preview,
    preview_frame,
)


def test_sections_appear_in_order():
    artifacts = CodeArtifacts(html="<h1>Hi</h1>\n", css="h1{color:red}\n", js="console.log(1)\n")
    document = compose_preview(artifacts)
    assert document.startswith("<!DOCTYPE html>")
    positions = [
        document.index("<style>h1{color:red}\n</style>"),
        document.index("<body>"),
        document.index("<h1>Hi</h1>"),
        document.index("<script>console.log(1)\n</script>"),
        document.index(LINK_SCRIPT),
    ]
    assert positions == sorted(positions)


def test_empty_artifacts_still_compose():
    document = compose_preview(CodeArtifacts())
    assert "<style></style>" in document
    assert "<script></script>" in document
    assert LINK_SCRIPT in document


def test_link_script_rewrites_every_anchor():
    assert "querySelectorAll('a')" in LINK_SCRIPT
    assert "'target', '_blank'" in LINK_SCRIPT
    assert "'rel', 'noopener noreferrer'" in LINK_SCRIPT
    assert "addEventListener('load'" in LINK_SCRIPT


def test_content_is_embedded_verbatim():
    artifacts = CodeArtifacts(
        html='<a href="https://example.com">{link}</a>',
        css=".a { color: blue; }",
        js="const o = {a: 1}; if (1 < 2) { console.log('</div>') }",
    )
    document = compose_preview(artifacts)
    assert artifacts.html in document
    assert artifacts.css in document
    assert artifacts.js in document


def test_link_script_comes_after_generated_script():
    document = compose_preview(CodeArtifacts(js="window.onload = () => {}"))
    assert document.index("window.onload = () => {}") < document.index(LINK_SCRIPT)
    assert document.count(LINK_SCRIPT) == 1


def test_sandbox_never_shares_origin():
    assert "allow-scripts" in SANDBOX_POLICY
    assert "allow-popups" in SANDBOX_POLICY
    assert "allow-same-origin" not in SANDBOX_POLICY
    assert PREVIEW_CSP == "sandbox " + SANDBOX_POLICY


def test_preview_frame_escapes_document():
    document = compose_preview(CodeArtifacts(html='<p class="x">"quoted" & more</p>'))
    frame = preview_frame(document)
    assert frame.startswith("<iframe ")
    assert f'sandbox="{SANDBOX_POLICY}"' in frame
    assert f'srcdoc="{html.escape(document, quote=True)}"' in frame
    assert '<p class="x">' not in frame


def test_preview_roundtrip_through_fenced_text():
    artifacts = CodeArtifacts(html="<p>x</p>\n", css="p{}\n", js="1\n")
    text = f"```html\n{artifacts.html}```\n```css\n{artifacts.css}```\n```js\n{artifacts.js}```\n"
    assert compose_preview(extract_code_blocks(text)) == compose_preview(artifacts)
