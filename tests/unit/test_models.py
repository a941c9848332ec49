"""Unit tests for Pydantic data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from retitle.models.fragment import Fragment, FragmentType, FRAGMENT_DESCRIPTIONS
from retitle.models.job import RenameResult, RunOutcome, RunState, StepTiming
from retitle.models.process import ProcessRecord, StepRecord


class TestFragmentType:
    @pytest.mark.parametrize("raw,expected", [
        ("static", FragmentType.STATIC),
        ("variable", FragmentType.VARIABLE),
        ("RANDOM", FragmentType.RANDOM),
        ("TimeStamp", FragmentType.TIMESTAMP),
        ("uuid", FragmentType.UUID),
    ])
    def test_case_insensitive(self, raw, expected):
        assert FragmentType.from_config(raw) is expected

    def test_unknown_is_static(self):
        assert FragmentType.from_config("counter") is FragmentType.STATIC
        assert FragmentType.from_config("") is FragmentType.STATIC

    def test_surrounding_whitespace_is_not_ignored(self):
        assert FragmentType.from_config(" random") is FragmentType.STATIC
        assert FragmentType.from_config("uuid ") is FragmentType.STATIC

    def test_every_type_described(self):
        assert set(FRAGMENT_DESCRIPTIONS) == set(FragmentType)


class TestFragment:
    def test_defaults(self):
        f = Fragment()
        assert f.value == ""
        assert f.type == "static"
        assert f.kind is FragmentType.STATIC

    def test_type_kept_verbatim(self):
        f = Fragment(value="{meta.Title}", type="Variable")
        assert f.type == "Variable"
        assert f.kind is FragmentType.VARIABLE

    def test_frozen(self):
        f = Fragment(value="a")
        with pytest.raises(ValidationError):
            f.value = "b"


class TestProcessRecord:
    def test_images_directory(self):
        p = ProcessRecord(id=1, title="t", process_dir="/data/1")
        assert p.images_directory == Path("/data/1/images")

    def test_title_is_mutable(self):
        p = ProcessRecord(id=1, title="t", process_dir="/data/1")
        p.title = "u"
        assert p.title == "u"

    def test_step_requires_name(self):
        p = ProcessRecord(id=1, title="t", process_dir="/data/1")
        with pytest.raises(ValidationError):
            StepRecord(id=1, name="", process=p)


class TestRenameResult:
    def test_minimal(self):
        r = RenameResult(run_id="abc", outcome=RunOutcome.FINISH, state=RunState.DONE)
        assert r.job is None
        assert r.renamed == []
        assert r.timings == []

    def test_states(self):
        assert RunState.INIT == "INIT"
        assert RunState.ERROR == "ERROR"
        assert RunOutcome.FINISH == "FINISH"

    def test_step_timing_defaults(self):
        st = StepTiming(step="evaluate", duration_ms=1)
        assert st.status == "ok"
        assert st.detail == ""
