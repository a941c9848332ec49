"""
Retitle — Workflow step plugin.

The host calls ``initialize`` once with the step, then ``execute`` (or
``run``). Configuration is read from the block matching the process's
project and the step's name.
"""

from __future__ import annotations

import enum

from retitle.core.plugin_config import StepConfig, load_step_config
from retitle.errors import RetitleError
from retitle.host.journal import LogLevel
from retitle.host.services import StepHost
from retitle.models.fragment import Fragment
from retitle.models.job import RenameResult, RunOutcome
from retitle.models.process import StepRecord
from retitle.pipeline.orchestrator import TitleUpdateJob
from retitle.utils.logging import logger

ERROR_MESSAGE = "Error while renaming the process."


class PluginType(str, enum.Enum):
    STEP = "Step"


class PluginGuiType(str, enum.Enum):
    NONE = "none"


class UpdateProcessTitleStep:
    title = "intranda_step_updateProcessTitle"
    page_path = "/uii/plugin_step_updateProcessTitle.xhtml"

    def __init__(self, host: StepHost):
        self.host = host
        self.step: StepRecord | None = None
        self.return_path = ""
        self.config = StepConfig()
        self.last_result: RenameResult | None = None

    @property
    def regex_check(self) -> bool:
        return self.config.regex_check

    @property
    def template(self) -> list[Fragment]:
        return self.config.template

    def initialize(self, step: StepRecord, return_path: str) -> None:
        self.step = step
        self.return_path = return_path
        self.config = load_step_config(self.host.plugin_config_path, step.process.project, step.name)
        logger.info("UpdateProcessTitle step plugin initialized")

    def get_plugin_gui_type(self) -> PluginGuiType:
        return PluginGuiType.NONE

    def get_page_path(self) -> str:
        return self.page_path

    def get_type(self) -> PluginType:
        return PluginType.STEP

    def get_interface_version(self) -> int:
        return 0

    def cancel(self) -> str:
        return "/uii" + self.return_path

    def finish(self) -> str:
        return "/uii" + self.return_path

    def validate(self) -> dict[str, str]:
        return {}

    def execute(self) -> bool:
        return self.run() is not RunOutcome.ERROR

    def run(self) -> RunOutcome:
        if self.step is None:
            raise RuntimeError("run() called before initialize()")

        job = TitleUpdateJob(self.step, self.config, self.host)
        try:
            self.last_result = job.run()
        except RetitleError as exc:
            logger.error("%s [%s] %s", ERROR_MESSAGE, exc.code, exc.message)
            self._report_failure(job, exc)
        except Exception as exc:
            logger.exception(ERROR_MESSAGE)
            self._report_failure(job, exc)

        logger.info("UpdateProcessTitle step plugin executed")
        return self.last_result.outcome

    def _report_failure(self, job: TitleUpdateJob, exc: Exception) -> None:
        self.host.messages.error(ERROR_MESSAGE, exc)
        self.host.journal.add(self.step.process.id, LogLevel.ERROR, f"{ERROR_MESSAGE} {exc}")
        self.last_result = job.result(RunOutcome.ERROR, [str(exc)])
