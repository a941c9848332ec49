"""
Retitle — Per-project / per-step plugin configuration.

The plugin config is an XML file with one or more ``<config>`` blocks::

    <config_plugin>
      <config>
        <project>*</project>
        <step>*</step>
        <regexCheck>true</regexCheck>
        <content type="static">PPN_</content>
        <content type="variable">{meta.CatalogIDDigital}</content>
      </config>
    </config_plugin>

The block used for a step is the most specific match on (project, step),
``*`` acting as a wildcard.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import BaseModel, Field

from retitle.errors import ConfigurationError
from retitle.models.fragment import Fragment
from retitle.utils.logging import logger

WILDCARD = "*"


class StepConfig(BaseModel):
    regex_check: bool = True
    template: list[Fragment] = Field(default_factory=list)


TRUE_VALUES = {"true", "yes", "on", "y", "t"}
FALSE_VALUES = {"false", "no", "off", "n", "f"}


def _parse_bool(name: str, text: str | None, default: bool) -> bool:
    if text is None or not text.strip():
        return default
    value = text.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {text.strip()!r}")


def _values(block: ET.Element, tag: str) -> set[str]:
    return {(e.text or "").strip() for e in block.findall(tag)}


def select_block(root: ET.Element, project: str, step: str) -> ET.Element:
    """Pick the ``<config>`` block for (project, step); exact names beat wildcards."""
    precedence = [(project, step), (WILDCARD, step), (project, WILDCARD), (WILDCARD, WILDCARD)]
    for want_project, want_step in precedence:
        for block in root.findall("config"):
            if want_project in _values(block, "project") and want_step in _values(block, "step"):
                return block
    raise ConfigurationError(f"No configuration block for project {project!r} and step {step!r}")


def parse_block(block: ET.Element) -> StepConfig:
    template = [
        Fragment(value=(e.text or "").strip(), type=e.get("type", "static"))
        for e in block.findall("content")
    ]
    return StepConfig(
        regex_check=_parse_bool("regexCheck", block.findtext("regexCheck"), True),
        template=template,
    )


def load_step_config(path: str | Path, project: str, step: str) -> StepConfig:
    """Read ``path`` and return the settings for the given project and step."""
    try:
        root = ET.parse(path).getroot()
    except FileNotFoundError:
        raise ConfigurationError(f"Plugin configuration not found: {path}")
    except ET.ParseError as exc:
        raise ConfigurationError(f"Plugin configuration is not valid XML: {path} ({exc})")

    cfg = parse_block(select_block(root, project, step))
    logger.info(
        "  Loaded config for project=%s step=%s: %d fragments, regexCheck=%s",
        project, step, len(cfg.template), cfg.regex_check,
    )
    return cfg
