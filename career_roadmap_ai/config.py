"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
# Optional: any OpenAI-compatible host (Groq, Ollama /v1)
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# Model call settings
MODEL_TEMPERATURE: float = 0.0
MODEL_TIMEOUT_SECONDS: float = float(os.getenv("MODEL_TIMEOUT_SECONDS", "45"))
MODEL_MAX_ATTEMPTS: int = int(os.getenv("MODEL_MAX_ATTEMPTS", "2"))
RETRY_BACKOFF_SECONDS: float = 1.0

# How often an in-flight request checks whether its client went away
DISCONNECT_POLL_SECONDS: float = 0.5

# Prompt limits
MAX_DOCUMENT_CHARS: int = 50000  # Hard cut before the text is embedded in the prompt

# Upload handling
SUPPORTED_EXTENSIONS: tuple = (".pdf", ".docx", ".txt", ".md")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
