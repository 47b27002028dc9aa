"""One-shot construction of the portfolio tree from content records."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .config import SiteProfile
from .nodes import DirectoryNode, FileNode, Node, join_path
from .records import Attachment, ContentRecord

logger = logging.getLogger(__name__)

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
EM_DASH = "—"


def slugify(text: str) -> str:
    """Derive a path-safe name: ``"Alpha Beta — v2"`` becomes ``alpha-beta``."""

    lowered = text.lower().split(EM_DASH, 1)[0].strip()
    return _NON_SLUG_RE.sub("-", lowered).strip("-")


def format_overview(record: ContentRecord) -> str:
    content = f"{record.title}\n"
    content += "=" * len(record.title) + "\n\n"
    content += f"Role: {record.role}\n\n"
    content += f"{record.description}\n\n"
    if record.problem_statement:
        content += f"Problem Statement:\n{record.problem_statement}\n"
    if record.links:
        if record.problem_statement:
            content += "\n"
        content += "Links:\n"
        for link in record.links:
            content += f"- {link.label}: {link.url}\n"
    return content


def format_architecture(record: ContentRecord) -> str:
    content = f"Architecture - {record.title}\n"
    content += "=" * (len(record.title) + 15) + "\n\n"
    if record.architecture_image:
        content += f"Architecture Diagram: /public/{record.architecture_image}\n\n"
    if record.technical_highlights:
        content += "Technical Highlights:\n"
        for idx, highlight in enumerate(record.technical_highlights, start=1):
            content += f"{idx}. {highlight}\n"
    return content


def format_decisions(record: ContentRecord) -> str:
    content = f"Design Decisions - {record.title}\n"
    content += "=" * (len(record.title) + 18) + "\n\n"
    for idx, decision in enumerate(record.design_decisions, start=1):
        content += f"[{idx}] {decision}\n\n"
    return content


def format_impact(record: ContentRecord) -> str:
    content = f"Impact Metrics - {record.title}\n"
    content += "=" * (len(record.title) + 17) + "\n\n"
    for metric in record.impact_metrics:
        content += f"• {metric}\n"
    return content


def unique_name(base: str, ext: str, taken: Iterable[str]) -> str:
    existing = set(taken)
    candidate = f"{base}.{ext}"
    counter = 1
    while candidate in existing:
        candidate = f"{base}-{counter}.{ext}"
        counter += 1
    return candidate


class TreeBuilder:
    """Builds the ``/base``, ``/projects`` and ``/meta`` hierarchy."""

    def __init__(self, profile: SiteProfile | None = None) -> None:
        self.profile = profile or SiteProfile()

    def build(self, records: Iterable[ContentRecord]) -> DirectoryNode:
        children = {
            "base": self._build_base("/base"),
            "projects": self._build_projects("/projects", records),
            "meta": self._build_meta("/meta"),
        }
        return DirectoryNode(name="", path="/", children=children)

    def _build_base(self, path: str) -> DirectoryNode:
        files = [
            FileNode("about", join_path(path, "about"), self.profile.about),
            FileNode("contact", join_path(path, "contact"), self.profile.contact()),
            FileNode(
                "resume",
                join_path(path, "resume"),
                "[Resume Link - Opens in browser]",
                url=self.profile.resume_url,
            ),
        ]
        return DirectoryNode("base", path, {node.name: node for node in files})

    def _build_meta(self, path: str) -> DirectoryNode:
        files = [
            FileNode("system.info", join_path(path, "system.info"), self.profile.system_info),
            FileNode("version", join_path(path, "version"), self.profile.version),
        ]
        return DirectoryNode("meta", path, {node.name: node for node in files})

    def _build_projects(self, path: str, records: Iterable[ContentRecord]) -> DirectoryNode:
        projects: dict[str, Node] = {}
        count = 0
        for record in records:
            slug = slugify(record.title)
            if slug in projects:
                logger.warning(
                    "Project %r maps to existing directory %s; the earlier project is replaced",
                    record.title,
                    join_path(path, slug),
                )
            projects[slug] = self._build_project(join_path(path, slug), slug, record)
            count += 1
        logger.info("Built %d project directories from %d records", len(projects), count)
        return DirectoryNode("projects", path, projects)

    def _build_project(self, path: str, slug: str, record: ContentRecord) -> DirectoryNode:
        templates = (
            ("overview", format_overview),
            ("architecture", format_architecture),
            ("decisions.log", format_decisions),
            ("impact", format_impact),
        )
        children: dict[str, Node] = {
            name: FileNode(name, join_path(path, name), render(record))
            for name, render in templates
        }
        if record.attachments:
            attachments_path = join_path(path, "attachments")
            children["attachments"] = self._build_attachments(attachments_path, record.attachments)
        return DirectoryNode(slug, path, children, project_id=record.id)

    def _build_attachments(self, path: str, attachments: Iterable[Attachment]) -> DirectoryNode:
        files: dict[str, Node] = {}
        for idx, attachment in enumerate(attachments, start=1):
            ext = "pdf" if attachment.is_pdf else "jpg"
            base = slugify(attachment.caption or "") or f"attachment-{idx}"
            name = unique_name(base, ext, files)
            caption = attachment.caption or name
            kind = "PDF Document" if attachment.is_pdf else "Image"
            content = (
                f"Attachment: {caption}\n"
                f"Type: {kind}\n"
                f"URL: {attachment.url}\n\n"
                "Use 'open' command to view."
            )
            files[name] = FileNode(name, join_path(path, name), content, url=attachment.url)
        return DirectoryNode("attachments", path, files)


__all__ = [
    "TreeBuilder",
    "format_architecture",
    "format_decisions",
    "format_impact",
    "format_overview",
    "slugify",
    "unique_name",
]
