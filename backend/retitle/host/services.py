"""
Retitle — Host services bundle.

Everything the step needs from the workflow host, injected as one object.
Defaults come from the application settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from retitle.core.config import settings
from retitle.host.journal import InMemoryJournal, InMemoryMessages, MessageSink, ProcessJournal
from retitle.host.metadata import MetadataReader
from retitle.host.preferences import RulesetPreferences, load_preferences
from retitle.host.store import ProcessStore
from retitle.host.variables import VariableReplacer
from retitle.models.process import ProcessRecord, StepRecord
from retitle.pipeline.evaluate import EntropySources, Replacer

ReplacerFactory = Callable[[dict[str, Any] | None, RulesetPreferences, ProcessRecord, StepRecord], Replacer]


@dataclass
class StepHost:
    store: ProcessStore
    metadata: MetadataReader = field(default_factory=lambda: MetadataReader(settings.metadata_filename))
    journal: ProcessJournal = field(default_factory=InMemoryJournal)
    messages: MessageSink = field(default_factory=InMemoryMessages)
    replacer_factory: ReplacerFactory = VariableReplacer
    preferences_loader: Callable[[ProcessRecord], RulesetPreferences] = load_preferences
    plugin_config_path: str = settings.plugin_config_path
    replacement_regex: str = settings.replacement_regex
    sources: EntropySources = field(default_factory=EntropySources)
