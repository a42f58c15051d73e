from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mygen.config import Config
from mygen.routes import api, panel

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("mygen")

app = FastAPI(title="MyGen", description="Prompt to HTML/CSS/JS with a sandboxed live preview")
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(panel.router)
app.include_router(api.router)


def run() -> None:
    import uvicorn

    log.info("MyGen on http://%s:%s (model %s/%s)", Config.HOST, Config.PORT, Config.LLM_PROVIDER, Config.LLM_MODEL)
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    run()
