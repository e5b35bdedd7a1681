"""Project snapshot: the sheets and revisions a host application exposes."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from kt_common.errors import SnapshotError

logger = logging.getLogger(__name__)


class Revision(BaseModel):
    """A document revision as issued by the host."""

    id: int
    sequence: int = Field(ge=0)
    date: str = ""
    description: str = ""
    numbering: str | None = Field(
        default=None, description="Revision number shown on sheets (e.g. 'A', 'P1')"
    )

    model_config = {"extra": "ignore"}

    @property
    def number(self) -> str:
        return self.numbering if self.numbering else str(self.sequence)


class Sheet(BaseModel):
    """A drawing sheet and the revision numbers it carries."""

    id: int | None = None
    number: str = Field(min_length=1)
    name: str = ""
    current_revision: int | None = None
    revision_numbers: dict[int, str] = Field(default_factory=dict)
    placeholder: bool = False

    model_config = {"extra": "ignore"}

    def revision_number(self, revision_id: int) -> str | None:
        return self.revision_numbers.get(revision_id)


class ProjectSnapshot(BaseModel):
    """Everything the transmittal workflow reads from the host."""

    name: str = ""
    revisions: list[Revision] = Field(default_factory=list)
    sheets: list[Sheet] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _validate_unique_revisions(self) -> "ProjectSnapshot":
        ids = [revision.id for revision in self.revisions]
        if len(ids) != len(set(ids)):
            raise ValueError("revision ids must be unique")
        return self

    def sorted_sheets(self, include_placeholders: bool = False) -> list[Sheet]:
        sheets = [s for s in self.sheets if include_placeholders or not s.placeholder]
        return sorted(sheets, key=lambda sheet: sheet.number)

    def sorted_revisions(self) -> list[Revision]:
        return sorted(self.revisions, key=lambda revision: revision.sequence)

    def get_revision(self, revision_id: int) -> Revision | None:
        for revision in self.revisions:
            if revision.id == revision_id:
                return revision
        return None


def _read_snapshot_data(path: Path) -> Any:
    text = path.read_text()
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_snapshot(path: Path) -> ProjectSnapshot:
    """Load a snapshot from a YAML or JSON file."""
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}", context={"path": path})
    try:
        data = _read_snapshot_data(path) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SnapshotError(
            f"Snapshot file could not be parsed: {path}",
            context={"path": path},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise SnapshotError(
            "Snapshot file must contain a mapping at the top level.",
            context={"path": path},
        )
    try:
        snapshot = ProjectSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(
            f"Snapshot file is invalid: {path}",
            context={"path": path, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
    logger.info(
        "Loaded snapshot %s with %d sheets and %d revisions",
        path,
        len(snapshot.sheets),
        len(snapshot.revisions),
    )
    return snapshot
