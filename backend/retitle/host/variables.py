"""
Retitle — Variable replacement.

Expands ``{placeholder}`` expressions against the process, the step and the
metadata document:

  {processtitle}  {processid}  {projectname}  {stepname}  {stepid}
  {meta.NAME}     first value of metadata field NAME

Anything that cannot be resolved expands to the empty string.
"""

from __future__ import annotations

import re
from typing import Any

from retitle.host.preferences import RulesetPreferences
from retitle.models.process import ProcessRecord, StepRecord

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class VariableReplacer:
    def __init__(
        self,
        document: dict[str, Any] | None,
        preferences: RulesetPreferences,
        process: ProcessRecord,
        step: StepRecord,
    ):
        self.document = document or {}
        self.preferences = preferences
        self.process = process
        self.step = step

    def _metadata(self, name: str) -> str:
        if not self.preferences.allows(name):
            return ""
        value = self.document.get(name)
        if isinstance(value, list):
            value = value[0] if value else None
        return "" if value is None else str(value)

    def _lookup(self, key: str) -> str:
        if key.lower().startswith("meta."):
            return self._metadata(key[len("meta."):])

        builtins = {
            "processtitle": self.process.title,
            "processid": str(self.process.id),
            "projectname": self.process.project,
            "stepname": self.step.name,
            "stepid": str(self.step.id),
        }
        return builtins.get(key.lower(), "")

    def replace(self, template: str) -> str:
        return _PLACEHOLDER.sub(lambda m: self._lookup(m.group(1).strip()), template)
