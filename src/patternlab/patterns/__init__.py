"""Pattern identity, entity and discovery."""

from patternlab.patterns.identifiers import (
    PatternId,
    parse_identifier,
    split_setting,
    strip_ordinals,
    strip_pattern_parameters,
    to_display_case,
)
from patternlab.patterns.models import DATA_EXTENSIONS, Pattern
from patternlab.patterns.registry import (
    FOLDER_NAME_META,
    FOLDER_NAME_PATTERNS,
    PatternRegistry,
    find_pattern,
)

__all__ = [
    "PatternId",
    "parse_identifier",
    "split_setting",
    "strip_ordinals",
    "strip_pattern_parameters",
    "to_display_case",
    "DATA_EXTENSIONS",
    "Pattern",
    "FOLDER_NAME_META",
    "FOLDER_NAME_PATTERNS",
    "PatternRegistry",
    "find_pattern",
]
