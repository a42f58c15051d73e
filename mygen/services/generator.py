from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from mygen.config import Config

log = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are MyGen, a front-end developer that builds complete single-page websites.

Answer with exactly three fenced code blocks, in this order and with these tags:

```html
[Markup that goes inside <body>. No <html>, <head> or <body> tags, no <style> or <script> tags]
```

```css
[All styles for the page]
```

```js
[All behaviour for the page, plain browser JavaScript]
```

Rules:
- The page must work from these three blocks alone, with no build step
- Use realistic content, not placeholder text
- Links to other sites must use absolute URLs
- Do not write anything outside the three code blocks"""


class GenerationError(Exception):
    """The code generation backend could not produce a reply."""


def build_messages(prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


def build_payload(prompt: str) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"model": Config.LLM_MODEL, "messages": build_messages(prompt)}
    if Config.LLM_PROVIDER == "ollama":
        payload["stream"] = False
    return payload


def build_headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if Config.LLM_PROVIDER == "openai" and Config.LLM_API_KEY:
        headers["Authorization"] = f"Bearer {Config.LLM_API_KEY}"
    return headers


def read_reply(data: Any) -> str:
    try:
        if Config.LLM_PROVIDER == "openai":
            content = data["choices"][0]["message"]["content"]
        else:
            content = data["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise GenerationError(f"Unexpected reply shape from {Config.LLM_PROVIDER}") from exc
    return content or ""


async def generate_code(prompt: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """Send ``prompt`` to the configured model and return its raw reply text."""
    log.info("Generating with %s/%s (%d chars of prompt)", Config.LLM_PROVIDER, Config.LLM_MODEL, len(prompt))
    try:
        async with httpx.AsyncClient(timeout=Config.LLM_TIMEOUT, transport=transport) as client:
            response = await client.post(
                Config.LLM_API_URL,
                json=build_payload(prompt),
                headers=build_headers(),
            )
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as exc:
        log.warning("Model API error: %s", exc.response.status_code)
        raise GenerationError(f"Model API returned {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        log.error("Model connection error: %s", exc)
        raise GenerationError(f"Model connection error: {exc}") from exc
    except ValueError as exc:
        log.warning("Model reply was not JSON")
        raise GenerationError("Model reply was not JSON") from exc

    code = read_reply(data)
    log.info("Model replied with %d chars", len(code))
    return code
