from collections import defaultdict
from pathlib import Path

import pytest
import yaml
from rich.console import Console
from rich.table import Table

from kt_app.project import ProjectSnapshot

KNOWN_MARKERS = {"unit_core", "unit_app", "unit_export", "unit_ui", "unit_common"}

SNAPSHOT_DATA = {
    "name": "Tower Block",
    "revisions": [
        {"id": 12, "sequence": 2, "date": "2024-03-01", "description": "For Tender", "numbering": "P2"},
        {"id": 11, "sequence": 1, "date": "2024-01-15", "description": "For Comment", "numbering": "P1"},
        {"id": 13, "sequence": 3, "date": "2024-06-30", "description": "For Construction", "numbering": "C1"},
    ],
    "sheets": [
        {
            "number": "A-102",
            "name": "Second Floor Plan",
            "current_revision": 12,
            "revision_numbers": {11: "P1", 12: "P2"},
        },
        {
            "number": "A-101",
            "name": "Ground Floor Plan",
            "current_revision": 13,
            "revision_numbers": {11: "P1", 13: "C1"},
        },
        {"number": "A-001", "name": "Cover", "placeholder": True},
        {"number": "A-201", "name": "Sections"},
    ],
}


@pytest.fixture
def snapshot_data() -> dict:
    return {
        "name": SNAPSHOT_DATA["name"],
        "revisions": [dict(rev) for rev in SNAPSHOT_DATA["revisions"]],
        "sheets": [dict(sheet) for sheet in SNAPSHOT_DATA["sheets"]],
    }


@pytest.fixture
def snapshot(snapshot_data: dict) -> ProjectSnapshot:
    return ProjectSnapshot.model_validate(snapshot_data)


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_data: dict) -> Path:
    path = tmp_path / "project.yaml"
    path.write_text(yaml.safe_dump(snapshot_data, sort_keys=False))
    return path


@pytest.fixture(autouse=True)
def _clear_kt_env(monkeypatch: pytest.MonkeyPatch) -> None:
    import os

    for name in list(os.environ):
        if name.startswith("KT_"):
            monkeypatch.delenv(name, raising=False)


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Custom hook to print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)  # unused in our reporting helper
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    console = Console()
    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")
    table.add_column("Avg (s)", justify="right", style="blue")

    for marker in sorted(marker_stats.keys()):
        stats = marker_stats[marker]
        if stats["total"] > 0:
            avg_duration = stats["duration"] / stats["total"]
            table.add_row(
                marker,
                str(stats["total"]),
                str(stats["passed"]),
                str(stats["failed"]),
                str(stats["skipped"]),
                f"{stats['duration']:.2f}",
                f"{avg_duration:.2f}"
            )

    console.print("\n")
    console.print(table)
