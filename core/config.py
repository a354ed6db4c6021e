from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    API_TITLE: str = os.getenv("API_TITLE", "Mortgage Workflow API")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # simulated background computation for the delayed variant
    PROCESSING_DELAY_S: float = float(os.getenv("PROCESSING_DELAY_S", "2.0"))

    SCORE_HIGH_THRESHOLD: float = float(os.getenv("SCORE_HIGH_THRESHOLD", "100"))
    SCORE_MODERATE_THRESHOLD: float = float(os.getenv("SCORE_MODERATE_THRESHOLD", "50"))

    CORS_ALLOW_ORIGINS: list[str] = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:8501").split(
        ","
    )


settings = Settings()
