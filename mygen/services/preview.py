"""Build the isolated preview document for a set of generated code blocks.

Generated code is untrusted and is not sanitized here. Safety comes from
where the document runs: an iframe sandbox without ``allow-same-origin``
(or the matching CSP ``sandbox`` directive when served directly), so the
preview gets an opaque origin and cannot reach the host page's scripts,
storage, cookies or DOM. Every document also carries LINK_SCRIPT, which
makes links open in a fresh browsing context without an opener.
"""
from __future__ import annotations

import html

from mygen.services.blocks import CodeArtifacts


SANDBOX_TOKENS = (
    "allow-scripts",
    "allow-popups",
    "allow-popups-to-escape-sandbox",
    "allow-forms",
    "allow-modals",
)
SANDBOX_POLICY = " ".join(SANDBOX_TOKENS)
PREVIEW_CSP = "sandbox " + SANDBOX_POLICY


LINK_SCRIPT = """
<script>
  window.addEventListener('load', function () {
    document.querySelectorAll('a').forEach(function (a) {
      a.setAttribute('target', '_blank');
      a.setAttribute('rel', 'noopener noreferrer');
    });
  });
</script>
"""


PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="UTF-8" />
    <style>{css}</style>
  </head>
  <body>
    {html}
    <script>{js}</script>
    {link_script}
  </body>
</html>"""


def compose_preview(artifacts: CodeArtifacts) -> str:
    return PREVIEW_TEMPLATE.format(
        css=artifacts.css,
        html=artifacts.html,
        js=artifacts.js,
        link_script=LINK_SCRIPT,
    )


def preview_frame(document: str = "") -> str:
    """Return the sandboxed ``<iframe>`` that hosts a preview document."""
    return (
        '<iframe title="preview" class="website-preview" id="previewFrame" '
        f'sandbox="{SANDBOX_POLICY}" '
        f'srcdoc="{html.escape(document, quote=True)}"></iframe>'
    )
