"""
Retitle — Run result contracts.

Every run returns a RenameResult with full traceability:
per-phase timings, resolved fragments, and the directories it renamed.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class RunState(str, enum.Enum):
    INIT = "INIT"
    EVALUATED = "EVALUATED"
    SANITIZED = "SANITIZED"
    PERSISTED = "PERSISTED"
    RECONCILED = "RECONCILED"
    DONE = "DONE"
    ERROR = "ERROR"


class RunOutcome(str, enum.Enum):
    FINISH = "FINISH"
    ERROR = "ERROR"


class StepTiming(BaseModel):
    step: str
    duration_ms: int
    status: str = "ok"  # ok | failed
    detail: str = ""


class RenameJob(BaseModel):
    process_id: int
    old_title: str
    new_title: str
    images_root: str


class DirectoryRename(BaseModel):
    old_name: str
    new_name: str


class RenameResult(BaseModel):
    """Complete output contract for one title update run."""

    run_id: str
    outcome: RunOutcome
    state: RunState
    job: RenameJob | None = None
    fragments: list[str] = Field(default_factory=list)
    renamed: list[DirectoryRename] = Field(default_factory=list)
    timings: list[StepTiming] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
