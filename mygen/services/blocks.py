from __future__ import annotations

import logging
import re
from typing import Dict

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)


class CodeArtifacts(BaseModel):
    """The three code blocks pulled out of one model response."""

    model_config = ConfigDict(frozen=True)

    html: str = ""
    css: str = ""
    js: str = ""


# Tagged opening fence, generic closing fence, shortest capture.
FENCE_PATTERNS: Dict[str, re.Pattern] = {
    "html": re.compile(r"```html\n(.*?)```", re.DOTALL),
    "css": re.compile(r"```css\n(.*?)```", re.DOTALL),
    "js": re.compile(r"```js\n(.*?)```", re.DOTALL),
}


def extract_block(text: str, category: str) -> str:
    match = FENCE_PATTERNS[category].search(text)
    return match.group(1) if match else ""


def extract_code_blocks(text: str) -> CodeArtifacts:
    blocks = {category: extract_block(text, category) for category in FENCE_PATTERNS}
    missing = [category for category, body in blocks.items() if not body]
    if missing:
        log.debug("No %s block in response (%d chars)", "/".join(missing), len(text))
    return CodeArtifacts(**blocks)
