"""Application configuration using pydantic-settings."""

import json
from ast import literal_eval
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_STEPS_LEAD_WORDS = [
    "how",
    "what",
    "why",
    "when",
    "where",
    "как",
    "что",
    "почему",
    "когда",
    "где",
    "зачем",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # HTML parsing (BeautifulSoup tree builder)
    html_parser: str = "lxml"

    # Legacy text normalizer: "steps" promotion
    steps_lead_words: Annotated[list[str], NoDecode] = DEFAULT_STEPS_LEAD_WORDS
    steps_min_sentences: int = 3
    steps_min_items: int = 3

    # Post-render CTA enhancer
    cta_button_icon: bool = True

    # Block identifiers
    block_id_length: int = 24

    @field_validator("steps_lead_words", mode="before")
    @classmethod
    def parse_steps_lead_words(cls, value: object) -> object:
        """Accept lead words as a list, JSON array, or comma-separated string."""

        def normalize(word: object) -> str:
            return str(word).strip().lower()

        if isinstance(value, list | tuple | set):
            return [normalize(word) for word in value if normalize(word)]
        if not isinstance(value, str):
            return value

        raw = value.strip()
        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            try:
                parsed = literal_eval(raw)
            except (ValueError, SyntaxError):
                parsed = raw.split(",")

        if isinstance(parsed, str):
            parsed = [parsed]
        if isinstance(parsed, tuple | set):
            parsed = list(parsed)
        if not isinstance(parsed, list):
            raise ValueError(
                "STEPS_LEAD_WORDS must be a JSON array, JSON string, or comma-separated string.",
            )
        return [normalize(word) for word in parsed if normalize(word)]

    @field_validator("steps_min_sentences", "steps_min_items")
    @classmethod
    def validate_steps_threshold(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Steps thresholds must be at least 1.")
        return value

    @property
    def steps_lead_word_set(self) -> frozenset[str]:
        """Lead words as a lowercase lookup set."""
        return frozenset(self.steps_lead_words)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()

    return settings


settings = get_settings()
