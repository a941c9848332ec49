"""
Retitle — Process and step records as handed over by the workflow host.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

IMAGES_DIRNAME = "images"


class ProcessRecord(BaseModel):
    """
    One digitised item. ``title`` is the identifier that gets recomposed;
    ``process_dir`` holds the metadata document and the images root.
    """

    id: int
    title: str
    project: str = ""
    ruleset: str | None = None
    process_dir: str
    swapped_out: bool = False

    @property
    def images_directory(self) -> Path:
        return Path(self.process_dir) / IMAGES_DIRNAME


class StepRecord(BaseModel):
    id: int
    name: str = Field(min_length=1)
    process: ProcessRecord
