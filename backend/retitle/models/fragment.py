"""
Retitle — Title template fragments.

A template is an ordered list of fragments. The ``type`` string is carried
verbatim from configuration; evaluation dispatches on ``kind``, the closed
FragmentType it maps to.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class FragmentType(str, enum.Enum):
    STATIC = "static"
    VARIABLE = "variable"
    RANDOM = "random"
    TIMESTAMP = "timestamp"
    UUID = "uuid"

    @classmethod
    def from_config(cls, raw: str) -> FragmentType:
        """Case-insensitive lookup; anything unrecognised is static."""
        try:
            return cls(raw.lower())
        except ValueError:
            return cls.STATIC


FRAGMENT_DESCRIPTIONS: dict[FragmentType, str] = {
    FragmentType.STATIC: "Value is copied into the title unchanged.",
    FragmentType.VARIABLE: "Value is expanded by the variable replacer, e.g. {meta.CatalogIDDigital}.",
    FragmentType.RANDOM: "Value is a digit count N; emits N random digits, zero-padded.",
    FragmentType.TIMESTAMP: "Emits the current time in milliseconds since the Unix epoch.",
    FragmentType.UUID: "Emits a fresh random UUID in canonical hyphenated form.",
}


class Fragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(default="")
    type: str = Field(default="static")

    @property
    def kind(self) -> FragmentType:
        return FragmentType.from_config(self.type)
