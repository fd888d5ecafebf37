"""Runtime settings, read from the environment (and .env when present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from gleamfinder.transport.http_fetch import DEFAULT_USER_AGENT, HttpFetcher


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinderSettings:
    """Settings for one discovery run, with validation."""

    request_timeout: float = 20.0
    cooldown: float = 5.0
    search_pages: int = 1
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self) -> None:
        errors = []
        if self.request_timeout < 1 or self.request_timeout > 300:
            errors.append("GLEAM_REQUEST_TIMEOUT should be between 1 and 300 seconds")
        if self.cooldown < 0:
            errors.append("GLEAM_COOLDOWN cannot be negative")
        if self.search_pages < 1 or self.search_pages > 10:
            errors.append("GLEAM_SEARCH_PAGES should be between 1 and 10")
        if not self.user_agent.strip():
            errors.append("GLEAM_USER_AGENT cannot be empty")

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in errors)
            raise ValueError(error_msg)

    def build_fetcher(self) -> HttpFetcher:
        return HttpFetcher(timeout=self.request_timeout, user_agent=self.user_agent)


def _env_number(name: str, default, cast):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings() -> FinderSettings:
    load_dotenv()
    settings = FinderSettings(
        request_timeout=_env_number("GLEAM_REQUEST_TIMEOUT", 20.0, float),
        cooldown=_env_number("GLEAM_COOLDOWN", 5.0, float),
        search_pages=_env_number("GLEAM_SEARCH_PAGES", 1, int),
        user_agent=os.environ.get("GLEAM_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
    )
    settings.validate()
    logger.info(
        f"Configuration loaded: pages={settings.search_pages} cooldown={settings.cooldown}s "
        f"timeout={settings.request_timeout}s"
    )
    return settings
