"""
Retitle — Ruleset preferences.

A ruleset declares which metadata types a process may carry. An empty
declaration means every metadata field is visible to the variable replacer.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from retitle.errors import PreferencesError
from retitle.models.process import ProcessRecord


class RulesetPreferences(BaseModel):
    name: str = ""
    metadata_types: list[str] = Field(default_factory=list)

    def allows(self, metadata_type: str) -> bool:
        return not self.metadata_types or metadata_type in self.metadata_types


def load_preferences(process: ProcessRecord) -> RulesetPreferences:
    if not process.ruleset:
        return RulesetPreferences()

    path = Path(process.ruleset)
    if not path.is_absolute():
        path = Path(process.process_dir) / path
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return RulesetPreferences.model_validate(data)
    except OSError as exc:
        raise PreferencesError(process.ruleset, exc.strerror or str(exc))
    except (ValueError, PydanticValidationError) as exc:
        raise PreferencesError(process.ruleset, str(exc))
