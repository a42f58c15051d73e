from __future__ import annotations

import io
import zipfile

from mygen.services.blocks import CodeArtifacts
from mygen.services.preview import LINK_SCRIPT

ARCHIVE_NAME = "mygen-site.zip"


def render_index(artifacts: CodeArtifacts) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        '    <meta charset="UTF-8" />\n'
        '    <link rel="stylesheet" href="style.css" />\n'
        "  </head>\n"
        "  <body>\n"
        f"    {artifacts.html}\n"
        '    <script src="script.js"></script>\n'
        f"    {LINK_SCRIPT}\n"
        "  </body>\n"
        "</html>\n"
    )


def build_archive(artifacts: CodeArtifacts) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zip_file:
        zip_file.writestr("index.html", render_index(artifacts))
        zip_file.writestr("style.css", artifacts.css)
        zip_file.writestr("script.js", artifacts.js)
    buffer.seek(0)
    return buffer.read()
