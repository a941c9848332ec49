"""Shared test configuration and fixtures for the Retitle test suite."""

import sys
import uuid
from pathlib import Path

import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from retitle.host.journal import InMemoryJournal, InMemoryMessages  # noqa: E402
from retitle.host.services import StepHost  # noqa: E402
from retitle.host.store import InMemoryProcessStore  # noqa: E402
from retitle.models.process import ProcessRecord, StepRecord  # noqa: E402
from retitle.pipeline.evaluate import EntropySources  # noqa: E402

FIXED_UUID = uuid.UUID("123e4567-e89b-42d3-a456-426614174000")

PLUGIN_CONFIG = """<config_plugin>
  <config>
    <project>*</project>
    <step>*</step>
    <regexCheck>true</regexCheck>
    <content type="static">PPN_</content>
    <content type="variable">{meta.CatalogIDDigital}</content>
    <content type="static">_v1</content>
  </config>
</config_plugin>
"""


@pytest.fixture
def fixed_sources():
    return EntropySources(
        randint=lambda: 42,
        clock_ms=lambda: 1_700_000_000_000,
        new_uuid=lambda: FIXED_UUID,
    )


@pytest.fixture
def process_dir(tmp_path):
    root = tmp_path / "processes" / "1"
    (root / "images").mkdir(parents=True)
    return root


@pytest.fixture
def process(process_dir):
    return ProcessRecord(id=1, title="oldX", project="Archive", process_dir=str(process_dir))


@pytest.fixture
def step(process):
    return StepRecord(id=7, name="Update title", process=process)


@pytest.fixture
def plugin_config(tmp_path):
    path = tmp_path / "plugin_intranda_step_updateProcessTitle.xml"
    path.write_text(PLUGIN_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def host(process, plugin_config, fixed_sources):
    return StepHost(
        store=InMemoryProcessStore([process]),
        journal=InMemoryJournal(),
        messages=InMemoryMessages(),
        plugin_config_path=str(plugin_config),
        replacement_regex=r"[\W]",
        sources=fixed_sources,
    )
