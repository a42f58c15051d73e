from __future__ import annotations

import os
from typing import List


OLLAMA_CHAT_URL = "http://localhost:11434/api/chat"
OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class Config:
    """Application configuration"""
    LLM_PROVIDER = os.getenv("MYGEN_LLM_PROVIDER", "ollama").lower()
    LLM_API_URL = os.getenv(
        "MYGEN_LLM_API_URL",
        OPENAI_CHAT_URL if LLM_PROVIDER == "openai" else OLLAMA_CHAT_URL,
    )
    LLM_MODEL = os.getenv("MYGEN_LLM_MODEL", "gpt-4o-mini" if LLM_PROVIDER == "openai" else "qwen2.5-coder:14b")
    LLM_API_KEY = os.getenv("OPENAI_API_KEY", "")
    LLM_TIMEOUT = float(os.getenv("MYGEN_LLM_TIMEOUT", "120"))
    CORS_ORIGINS = os.getenv("MYGEN_CORS_ORIGINS", "*")
    HOST = os.getenv("MYGEN_HOST", "127.0.0.1")
    PORT = int(os.getenv("MYGEN_PORT", "8080"))
    LOG_LEVEL = os.getenv("MYGEN_LOG_LEVEL", "INFO").upper()

    @classmethod
    def cors_origins(cls) -> List[str]:
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]
