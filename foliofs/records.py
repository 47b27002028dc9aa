"""Content records supplied by the site and helpers to load them."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import SiteProfile
from .exceptions import ContentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExternalLink:
    label: str
    url: str


@dataclass(frozen=True)
class Attachment:
    url: str
    caption: str | None = None
    alt: str | None = None

    @property
    def is_pdf(self) -> bool:
        return self.url.lower().endswith(".pdf")


@dataclass(frozen=True)
class ContentRecord:
    """One portfolio project as it appears in ``project-data.json``."""

    id: int | str
    title: str
    role: str = ""
    description: str = ""
    problem_statement: str | None = None
    architecture_image: str | None = None
    technical_highlights: tuple[str, ...] = field(default_factory=tuple)
    design_decisions: tuple[str, ...] = field(default_factory=tuple)
    impact_metrics: tuple[str, ...] = field(default_factory=tuple)
    links: tuple[ExternalLink, ...] = field(default_factory=tuple)
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContentRecord":
        try:
            record_id = data["id"]
            title = data["title"]
        except KeyError as exc:
            raise ContentError(f"content record is missing {exc.args[0]!r}") from exc
        if not isinstance(title, str):
            raise ContentError(f"content record {record_id!r} has a non-text title")
        return cls(
            id=record_id,
            title=title,
            role=data.get("role") or "",
            description=data.get("description") or "",
            problem_statement=data.get("problem_statement") or None,
            architecture_image=data.get("architecture_image") or None,
            technical_highlights=_text_list(data, "technical_highlights"),
            design_decisions=_text_list(data, "design_decisions"),
            impact_metrics=_text_list(data, "impact_metrics"),
            links=_parse_links(data),
            attachments=_parse_attachments(data),
        )


def _object_list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ContentError(f"{key!r} of record {data.get('id')!r} must be a list")
    return value


def _text_list(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    items = _object_list(data, key)
    for item in items:
        if not isinstance(item, str):
            raise ContentError(f"{key!r} of record {data.get('id')!r} must hold text, got {item!r}")
    return tuple(items)


def _parse_attachments(data: Mapping[str, Any]) -> tuple[Attachment, ...]:
    attachments: list[Attachment] = []
    for item in _object_list(data, "attachments"):
        if not isinstance(item, Mapping):
            raise ContentError(f"attachment entries must be objects, got {item!r}")
        if not item.get("url"):
            continue
        attachments.append(
            Attachment(
                url=item["url"],
                caption=item.get("caption") or None,
                alt=item.get("alt") or None,
            )
        )
    return tuple(attachments)


def _parse_links(data: Mapping[str, Any]) -> tuple[ExternalLink, ...]:
    links: list[ExternalLink] = []
    single = data.get("link")
    if single:
        links.append(ExternalLink(label="Website", url=single))
    for item in _object_list(data, "links"):
        if isinstance(item, str):
            links.append(ExternalLink(label=item, url=item))
        elif not isinstance(item, Mapping):
            raise ContentError(f"link entries must be objects or URLs, got {item!r}")
        elif item.get("url"):
            links.append(ExternalLink(label=item.get("label") or item["url"], url=item["url"]))
    return tuple(links)


def parse_records(items: Iterable[Mapping[str, Any]]) -> list[ContentRecord]:
    records: list[ContentRecord] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise ContentError(f"expected a content record object, got {type(item).__name__}")
        records.append(ContentRecord.from_dict(item))
    return records


def load_content(path: str | Path) -> tuple[SiteProfile, list[ContentRecord]]:
    """Read a content JSON file.

    The document is either a bare list of records or an object with a
    ``projects`` list and an optional ``profile`` overriding the static pages.
    """

    source = Path(path)
    try:
        document = json.loads(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ContentError(f"cannot read {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContentError(f"invalid JSON in {source}: {exc}") from exc

    if isinstance(document, list):
        profile, items = SiteProfile(), document
    elif isinstance(document, dict):
        profile = SiteProfile.from_dict(document.get("profile") or {})
        items = document.get("projects") or []
        if not isinstance(items, list):
            raise ContentError(f"'projects' in {source} must be a list")
    else:
        raise ContentError(f"unsupported content document in {source}")

    records = parse_records(items)
    logger.debug("Loaded %d content records from %s", len(records), source)
    return profile, records


__all__ = [
    "Attachment",
    "ContentRecord",
    "ExternalLink",
    "load_content",
    "parse_records",
]
