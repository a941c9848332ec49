"""
Retitle — Metadata document reader.

Each process keeps its descriptive metadata as a flat JSON object next to
the images root. A missing document is not an error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from retitle.errors import MetadataReadError
from retitle.models.process import ProcessRecord


class MetadataReader:
    def __init__(self, filename: str = "meta.json"):
        self.filename = filename

    def path_for(self, process: ProcessRecord) -> Path:
        return Path(process.process_dir) / self.filename

    def read(self, process: ProcessRecord) -> dict[str, Any] | None:
        path = self.path_for(process)
        if not path.is_file():
            return None
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise MetadataReadError(str(path), exc.strerror or str(exc))
        except ValueError as exc:
            raise MetadataReadError(str(path), f"invalid JSON ({exc})")
        if not isinstance(document, dict):
            raise MetadataReadError(str(path), "document is not a JSON object")
        return document
