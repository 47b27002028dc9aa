"""Configuration for the console: static site content and runtime settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

DEFAULT_ABOUT = """PORTFOLIO OWNER
Full-Stack Engineer

I build production systems with a focus on architectural clarity, maintainability, and long-term scalability.

I care about systems thinking, product judgment, and delivering work that lasts."""

DEFAULT_SYSTEM_INFO = """Portfolio System Information

Console Mode:
- Read-only virtual filesystem
- Built once from the site's project data
- Restricted command set (no pipes, redirection or chaining)"""


@dataclass(frozen=True)
class SiteProfile:
    """Texts behind the static ``/base`` and ``/meta`` branches."""

    about: str = DEFAULT_ABOUT
    email: str = "hello@example.com"
    github_url: str = "https://github.com/example"
    linkedin_url: str = "https://www.linkedin.com/in/example"
    location: str = "Remote"
    resume_url: str = "https://example.com/resume.pdf"
    system_info: str = DEFAULT_SYSTEM_INFO
    version: str = "Portfolio v2.0\nLast Updated: January 2026"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SiteProfile":
        known = {f.name for f in fields(cls)}
        overrides = {key: str(value) for key, value in data.items() if key in known and value}
        return replace(cls(), **overrides)

    def contact(self) -> str:
        return (
            "Contact Information:\n\n"
            f"Email: {self.email}\n"
            f"GitHub: {self.github_url}\n"
            f"LinkedIn: {self.linkedin_url}\n"
            f"Location: {self.location}"
        )


class ConsoleConfig:
    """Runtime settings for the foliofs CLI."""

    def __init__(
        self,
        data_path: str | None = None,
        log_level: str = "WARNING",
        start_dir: str = "/",
    ) -> None:
        self.data_path = data_path
        self.log_level = log_level
        self.start_dir = start_dir

    @classmethod
    def from_env(cls) -> "ConsoleConfig":
        """Create configuration from environment variables"""
        return cls(
            data_path=os.getenv("FOLIOFS_DATA") or None,
            log_level=os.getenv("FOLIOFS_LOG_LEVEL", "WARNING").upper(),
            start_dir=os.getenv("FOLIOFS_START_DIR", "/"),
        )

    @classmethod
    def from_args(
        cls,
        data_path: str | None = None,
        log_level: str | None = None,
        start_dir: str | None = None,
    ) -> "ConsoleConfig":
        """Environment configuration overridden by command line arguments"""
        config = cls.from_env()
        if data_path:
            config.data_path = data_path
        if log_level:
            config.log_level = log_level.upper()
        if start_dir:
            config.start_dir = start_dir
        return config

    def __repr__(self) -> str:
        return (
            f"ConsoleConfig(data_path={self.data_path!r}, "
            f"log_level={self.log_level!r}, start_dir={self.start_dir!r})"
        )


__all__ = ["ConsoleConfig", "SiteProfile"]
