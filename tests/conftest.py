import pytest

from foliofs import ConsoleShell, ContentRecord, VirtualFileSystem
from foliofs.records import Attachment, ExternalLink


@pytest.fixture
def records() -> list[ContentRecord]:
    return [
        ContentRecord(
            id=1,
            title="Alpha Beta — v2",
            role="Lead Engineer",
            description="A ledger platform for About-page analytics.",
            problem_statement="Reconciliation took days.",
            architecture_image="img/alpha.png",
            technical_highlights=("Event sourcing", "Idempotent consumers"),
            design_decisions=("Postgres over Mongo", "Outbox pattern"),
            impact_metrics=("40% faster close", "Zero data loss"),
            links=(ExternalLink(label="Website", url="https://alpha.example.com"),),
            attachments=(
                Attachment(url="https://cdn.example.com/shot-a.png", caption="Shot"),
                Attachment(url="https://cdn.example.com/shot-b.png", caption="Shot"),
                Attachment(url="https://cdn.example.com/spec.PDF", caption="Design Spec"),
            ),
        ),
        ContentRecord(
            id=2,
            title="Fleet Tracker",
            role="Frontend Architect",
            description="Realtime vehicle map.",
        ),
    ]


@pytest.fixture
def vfs(records: list[ContentRecord]) -> VirtualFileSystem:
    return VirtualFileSystem.from_records(records)


@pytest.fixture
def shell(vfs: VirtualFileSystem) -> ConsoleShell:
    return ConsoleShell(vfs)
