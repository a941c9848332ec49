"""
Retitle — Title update orchestrator.

Runs one rename as a state machine:

  INIT → EVALUATED → SANITIZED → PERSISTED → RECONCILED → DONE

Each phase is timed, logged, and recorded in the RenameResult. A failure
moves the run to ERROR; phases already completed are not undone.
"""

from __future__ import annotations

import time
import uuid
from typing import Sequence

from retitle.core.plugin_config import StepConfig
from retitle.host.services import StepHost
from retitle.models.fragment import Fragment
from retitle.models.job import (
    DirectoryRename,
    RenameJob,
    RenameResult,
    RunOutcome,
    RunState,
    StepTiming,
)
from retitle.models.process import StepRecord
from retitle.pipeline.evaluate import EntropySources, Replacer, compose_title, evaluate_template
from retitle.pipeline.reconcile import commit_title, reconcile_directories
from retitle.pipeline.sanitize import sanitize_title
from retitle.utils.logging import logger, step_timer


class RunContext:
    """Mutable context passed through the phases."""

    def __init__(self):
        self.resolved: list[str] = []
        self.raw_title: str = ""
        self.new_title: str = ""
        self.job: RenameJob | None = None
        self.renamed: list[DirectoryRename] = []


class TitleUpdateJob:
    """
    State-machine orchestrator for a single title update.

    The record is saved before any folder is touched; folders are
    reconciled against the saved title.
    """

    def __init__(self, step: StepRecord, config: StepConfig, host: StepHost):
        self.run_id = uuid.uuid4().hex[:12]
        self.step = step
        self.config = config
        self.host = host
        self.state = RunState.INIT
        self.ctx = RunContext()
        self.timings: list[StepTiming] = []

    def _record_step(self, name: str, start: float, status: str = "ok", detail: str = ""):
        ms = int((time.perf_counter() - start) * 1000)
        self.timings.append(StepTiming(step=name, duration_ms=ms, status=status, detail=detail))
        symbol = "✓" if status == "ok" else "✗"
        logger.info("  %s %s — %dms %s", symbol, name, ms, detail)

    def run(self) -> RenameResult:
        """Execute every phase. Raises RetitleError with the run left in ERROR."""
        process = self.step.process
        logger.info("[%s] Title update starting (process=%d)", self.run_id, process.id)

        phases = [
            ("evaluate", self._step_evaluate),
            ("sanitize", self._step_sanitize),
            ("persist", self._step_persist),
            ("reconcile", self._step_reconcile),
        ]
        for name, phase in phases:
            t = time.perf_counter()
            try:
                detail = phase()
            except Exception as exc:
                self.state = RunState.ERROR
                self._record_step(name, t, "failed", str(exc))
                raise
            self._record_step(name, t, detail=detail)

        self.state = RunState.DONE
        logger.info(
            "[%s] Title update complete — %r, %d folders renamed",
            self.run_id, self.ctx.new_title, len(self.ctx.renamed),
        )
        return self.result(RunOutcome.FINISH)

    def result(self, outcome: RunOutcome, errors: list[str] | None = None) -> RenameResult:
        return RenameResult(
            run_id=self.run_id,
            outcome=outcome,
            state=self.state,
            job=self.ctx.job,
            fragments=self.ctx.resolved,
            renamed=self.ctx.renamed,
            timings=self.timings,
            errors=errors or [],
        )

    def _step_evaluate(self) -> str:
        process = self.step.process
        with step_timer("Read metadata"):
            document = self.host.metadata.read(process)
            preferences = self.host.preferences_loader(process)
        replacer = self.host.replacer_factory(document, preferences, process, self.step)

        self.ctx.resolved = evaluate_template(self.config.template, replacer, self.host.sources)
        self.ctx.raw_title = compose_title(self.ctx.resolved)
        self.state = RunState.EVALUATED
        return f"raw={self.ctx.raw_title!r}"

    def _step_sanitize(self) -> str:
        self.ctx.new_title = sanitize_title(
            self.ctx.raw_title, self.host.replacement_regex, self.config.regex_check,
        )
        if not self.ctx.new_title:
            logger.warning("[%s] Composed title is empty", self.run_id)
        self.state = RunState.SANITIZED
        return f"title={self.ctx.new_title!r} regexCheck={self.config.regex_check}"

    def _step_persist(self) -> str:
        self.ctx.job = commit_title(self.step.process, self.ctx.new_title, self.host.store)
        self.state = RunState.PERSISTED
        return f"{self.ctx.job.old_title!r} → {self.ctx.job.new_title!r}"

    def _step_reconcile(self) -> str:
        with step_timer("Reconcile image folders"):
            self.ctx.renamed = reconcile_directories(self.ctx.job)
        self.state = RunState.RECONCILED
        return f"{len(self.ctx.renamed)} folders"


def preview_title(
    template: Sequence[Fragment],
    replacer: Replacer,
    replacement_regex: str,
    regex_check: bool = True,
    sources: EntropySources | None = None,
) -> str:
    """Evaluate and sanitize a template without touching the record or the filesystem."""
    raw = compose_title(evaluate_template(template, replacer, sources))
    return sanitize_title(raw, replacement_regex, regex_check)

