from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from mygen.services import generator
from mygen.services.archive import ARCHIVE_NAME, build_archive
from mygen.services.blocks import CodeArtifacts, extract_code_blocks
from mygen.services.preview import PREVIEW_CSP, compose_preview

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


class GenerateRequest(BaseModel):
    prompt: str


class GenerateResponse(BaseModel):
    code: str


class ExtractRequest(BaseModel):
    code: str


@router.post("/openai/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    prompt = req.prompt.strip()
    if not prompt:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required")
    try:
        code = await generator.generate_code(prompt)
    except generator.GenerationError as exc:
        log.warning("Generation failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to generate code.") from exc
    return GenerateResponse(code=code)


@router.post("/extract", response_model=CodeArtifacts)
async def extract(req: ExtractRequest) -> CodeArtifacts:
    return extract_code_blocks(req.code)


@router.post("/preview", response_class=HTMLResponse)
async def preview(artifacts: CodeArtifacts) -> HTMLResponse:
    return HTMLResponse(
        compose_preview(artifacts),
        headers={"Content-Security-Policy": PREVIEW_CSP, "Cache-Control": "no-store"},
    )


@router.post("/download")
async def download(artifacts: CodeArtifacts) -> Response:
    return Response(
        build_archive(artifacts),
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{ARCHIVE_NAME}"'},
    )


@router.get("/health")
async def health():
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
