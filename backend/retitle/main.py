"""
Retitle — FastAPI Backend

Endpoints:
  POST /v1/processes/{id}/update-title — Run the title update step on a process
  POST /v1/preview                     — Evaluate a template without saving anything
  GET  /v1/fragment-types              — List the supported fragment types
  GET  /health                         — Health check
"""

import time
import uuid

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from retitle.core.config import settings
from retitle.errors import ProcessNotFoundError, RetitleError
from retitle.host.services import StepHost
from retitle.host.store import JsonProcessStore
from retitle.models.fragment import FRAGMENT_DESCRIPTIONS, Fragment
from retitle.models.job import RunOutcome
from retitle.models.process import StepRecord
from retitle.pipeline.orchestrator import preview_title
from retitle.plugin import UpdateProcessTitleStep
from retitle.utils.logging import logger

VERSION = "1.0.0"

app = FastAPI(
    title="Retitle API",
    description=(
        "Compose a new process title from configured fragments and "
        "propagate it to the process's image folders."
    ),
    version=VERSION,
)


@app.on_event("startup")
async def _startup_banner():
    logger.info("")
    logger.info("╔══════════════════════════════════════════════════╗")
    logger.info("║           Retitle  ·  API Server v1              ║")
    logger.info("╠══════════════════════════════════════════════════╣")
    logger.info("║  POST /v1/processes/{id}/update-title            ║")
    logger.info("║  POST /v1/preview       → Title preview          ║")
    logger.info("║  GET  /v1/fragment-types → Fragment types        ║")
    logger.info("║  GET  /health           → Health check           ║")
    logger.info("╠══════════════════════════════════════════════════╣")
    logger.info("║  Store       : %-34s║", settings.store_path)
    logger.info("║  Plugin conf : %-34s║", settings.plugin_config_path)
    logger.info("╚══════════════════════════════════════════════════╝")
    logger.info("")


def get_host() -> StepHost:
    return StepHost(store=JsonProcessStore(settings.store_path))


# ──────────────────────────────────────────────────────────
# Request models
# ──────────────────────────────────────────────────────────

class UpdateTitleRequest(BaseModel):
    step_name: str = Field(..., min_length=1, description="Workflow step name, selects the config block")
    step_id: int = Field(default=0, description="Workflow step id")
    return_path: str = Field(default="", description="Navigation path handed to the step")


class PreviewRequest(BaseModel):
    process_id: int = Field(..., description="Process whose metadata feeds the variables")
    template: list[Fragment] = Field(default_factory=list)
    regex_check: bool = True


# ──────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {"status": "ok", "service": "retitle-api", "version": VERSION}


@app.get("/v1/fragment-types")
async def get_fragment_types():
    """List the closed set of fragment types with a short description each."""
    return [{"type": t.value, "description": d} for t, d in FRAGMENT_DESCRIPTIONS.items()]


@app.post("/v1/preview")
def preview(req: PreviewRequest, host: StepHost = Depends(get_host)):
    """Compose and sanitize a title for a process; nothing is saved or renamed."""
    request_id = uuid.uuid4().hex[:12]
    logger.info("[%s] POST /v1/preview — process %d, %d fragments", request_id, req.process_id, len(req.template))

    try:
        process = host.store.get(req.process_id)
        step = StepRecord(id=0, name="preview", process=process)
        replacer = host.replacer_factory(
            host.metadata.read(process), host.preferences_loader(process), process, step,
        )
        title = preview_title(req.template, replacer, host.replacement_regex, req.regex_check, host.sources)
    except ProcessNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.to_dict())
    except RetitleError as exc:
        logger.warning("[%s] Retitle error: %s", request_id, exc.code)
        raise HTTPException(status_code=422, detail=exc.to_dict())

    return {"process_id": process.id, "current_title": process.title, "title": title}


@app.post("/v1/processes/{process_id}/update-title")
def update_title(process_id: int, req: UpdateTitleRequest, host: StepHost = Depends(get_host)):
    """
    Run the title update step on one process.

    Returns the RenameResult. A run that ends in the Error outcome answers
    422 with the same result as detail.
    """
    request_id = uuid.uuid4().hex[:12]
    start = time.perf_counter()
    logger.info("[%s] POST /v1/processes/%d/update-title — step=%s", request_id, process_id, req.step_name)

    try:
        process = host.store.get(process_id)
        plugin = UpdateProcessTitleStep(host)
        plugin.initialize(StepRecord(id=req.step_id, name=req.step_name, process=process), req.return_path)
    except ProcessNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.to_dict())
    except RetitleError as exc:
        logger.warning("[%s] Retitle error: %s", request_id, exc.code)
        raise HTTPException(status_code=422, detail=exc.to_dict())

    outcome = plugin.run()
    result = plugin.last_result.model_dump(mode="json")

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("[%s] %s in %.0f ms", request_id, outcome.value, elapsed_ms)

    if outcome is RunOutcome.ERROR:
        raise HTTPException(status_code=422, detail=result)
    return result
