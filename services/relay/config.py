"""Relay Service — settings, read once from the environment at startup."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_WEBHOOK_URL = "http://localhost:5678/webhook/chat"


@dataclass(frozen=True)
class Settings:
    port: int = 5000
    frontend_url: str = "http://localhost:5173"
    webhook_url: str = DEFAULT_WEBHOOK_URL
    # Hides exception details from error responses
    production: bool = False
    webhook_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.
        A .env file next to this module is loaded first but never overrides
        variables that are already set.
        """
        load_dotenv(os.path.join(os.path.dirname(__file__), ".env"), override=False)
        return cls(
            port=int(os.getenv("PORT", "5000")),
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:5173"),
            webhook_url=os.getenv("WEBHOOK_URL", DEFAULT_WEBHOOK_URL),
            production=os.getenv("ENVIRONMENT", "").lower() == "production",
            webhook_timeout=float(os.getenv("WEBHOOK_TIMEOUT", "30")),
        )
