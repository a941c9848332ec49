"""Unit tests for the structured error catalog."""

import pytest
from retitle.errors import (
    RetitleError, MetadataReadError, PreferencesError, FilesystemError,
    StorageSwapError, PersistenceError, FragmentValueError,
    ConfigurationError, ProcessNotFoundError,
)


class TestErrorCatalog:
    """Verify all error types have correct codes and serialization."""

    def test_base_error(self):
        e = RetitleError(code="TEST", message="test msg", suggestion="try this")
        d = e.to_dict()
        assert d["error_code"] == "TEST"
        assert d["message"] == "test msg"
        assert d["suggestion"] == "try this"
        assert "detail" not in d

    def test_metadata_read(self):
        e = MetadataReadError("/p/meta.json", "invalid JSON")
        assert e.code == "METADATA_READ_FAILED"
        assert "meta.json" in e.message

    def test_preferences(self):
        e = PreferencesError("ruleset.json", "missing")
        assert e.code == "PREFERENCES_FAILED"
        assert "ruleset.json" in e.message

    def test_filesystem(self):
        e = FilesystemError("/p/images/x", "target already exists")
        assert e.code == "FILESYSTEM_FAILED"
        assert e.to_dict()["detail"] == "/p/images/x"

    def test_storage_swap(self):
        e = StorageSwapError(12)
        assert e.code == "STORAGE_SWAPPED"
        assert "12" in e.message

    def test_persistence(self):
        e = PersistenceError(3, "disk full")
        assert e.code == "PERSISTENCE_FAILED"
        assert "disk full" in e.message

    def test_fragment_value(self):
        e = FragmentValueError("random", "five")
        assert e.code == "FRAGMENT_INVALID"
        assert "'five'" in e.message

    def test_configuration(self):
        e = ConfigurationError("No configuration block")
        assert e.code == "CONFIG_INVALID"

    def test_process_not_found(self):
        e = ProcessNotFoundError(99)
        assert e.code == "PROCESS_NOT_FOUND"

    @pytest.mark.parametrize("cls", [
        MetadataReadError, PreferencesError, FilesystemError, StorageSwapError,
        PersistenceError, FragmentValueError, ConfigurationError, ProcessNotFoundError,
    ])
    def test_all_errors_are_retitle_errors(self, cls):
        assert issubclass(cls, RetitleError)
        assert issubclass(cls, Exception)
