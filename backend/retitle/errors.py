"""
Retitle — Structured error catalog.

Every error has a code, human message, and suggested fix.
The step converts any of these into the Error outcome; nothing else leaks
to the host.
"""

from __future__ import annotations

from typing import Any


class RetitleError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class MetadataReadError(RetitleError):
    def __init__(self, path: str, reason: str):
        super().__init__(
            code="METADATA_READ_FAILED",
            message=f"Could not read metadata file {path}: {reason}",
            suggestion="Check that the metadata document exists and is a valid JSON object.",
        )


class PreferencesError(RetitleError):
    def __init__(self, ruleset: str, reason: str):
        super().__init__(
            code="PREFERENCES_FAILED",
            message=f"Ruleset preferences unusable ({ruleset}): {reason}",
            suggestion="Check the ruleset file assigned to the process.",
        )


class FilesystemError(RetitleError):
    def __init__(self, path: str, reason: str):
        super().__init__(
            code="FILESYSTEM_FAILED",
            message=f"Filesystem operation failed on {path}: {reason}",
            suggestion="Check permissions and that no folder with the target name exists already.",
            detail=path,
        )


class StorageSwapError(RetitleError):
    def __init__(self, process_id: int):
        super().__init__(
            code="STORAGE_SWAPPED",
            message=f"Process {process_id} is swapped out of the active storage",
            suggestion="Swap the process back in before renaming it.",
        )


class PersistenceError(RetitleError):
    def __init__(self, process_id: int, reason: str):
        super().__init__(
            code="PERSISTENCE_FAILED",
            message=f"Could not save process {process_id}: {reason}",
            suggestion="Check the process store is reachable and writable.",
        )


class FragmentValueError(RetitleError):
    def __init__(self, fragment_type: str, value: str):
        super().__init__(
            code="FRAGMENT_INVALID",
            message=f"Invalid value {value!r} for {fragment_type} fragment",
            suggestion="Random fragments need an integer digit count as their value.",
        )


class ConfigurationError(RetitleError):
    def __init__(self, message: str):
        super().__init__(
            code="CONFIG_INVALID",
            message=message,
            suggestion="Check the plugin configuration file and its project/step blocks.",
        )


class ProcessNotFoundError(RetitleError):
    def __init__(self, process_id: int):
        super().__init__(
            code="PROCESS_NOT_FOUND",
            message=f"Process {process_id} does not exist",
            suggestion="Check the process id.",
        )
