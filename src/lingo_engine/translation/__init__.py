"""
Translation module - Core localization functionality

This module provides:
- LocalizationEngine: Main localization workflow coordinator
- LocalizationParams: Per-call locale pair and options
- Word counting and chunking of flat payloads
- Sequential chunk localization with progress
- Payload converters for text, objects, arrays and chat
"""

from lingo_engine.translation.params import LocalizationParams, validate_localization_params
from lingo_engine.translation.utils import (
    count_words,
    extract_payload_chunks,
    create_workflow_id,
)
from lingo_engine.translation.processor import localize_chunks_sequential
from lingo_engine.translation.payloads import (
    CONVERTERS,
    get_converter,
)
from lingo_engine.translation.engine import LocalizationEngine
from lingo_engine.translation.deprecated import ReplexicaEngine, LingoEngine
