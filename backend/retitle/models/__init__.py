"""Retitle data models — typed contracts for the whole run."""

from retitle.models.fragment import Fragment, FragmentType, FRAGMENT_DESCRIPTIONS
from retitle.models.process import ProcessRecord, StepRecord
from retitle.models.job import (
    RunState,
    RunOutcome,
    StepTiming,
    RenameJob,
    DirectoryRename,
    RenameResult,
)

__all__ = [
    "Fragment",
    "FragmentType",
    "FRAGMENT_DESCRIPTIONS",
    "ProcessRecord",
    "StepRecord",
    "RunState",
    "RunOutcome",
    "StepTiming",
    "RenameJob",
    "DirectoryRename",
    "RenameResult",
]
