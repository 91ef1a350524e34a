"""CEFR vocabulary dictionaries and transcript difficulty estimation."""

from transcriptkit.cefr.dictionary import (
    CEFR_LEVELS,
    DictionaryCache,
    LoadedDictionary,
    default_cache,
    default_data_dir,
)
from transcriptkit.cefr.estimator import (
    INDETERMINATE,
    estimate_breakdown,
    estimate_cefr_level,
)

__all__ = [
    "CEFR_LEVELS",
    "INDETERMINATE",
    "DictionaryCache",
    "LoadedDictionary",
    "default_cache",
    "default_data_dir",
    "estimate_breakdown",
    "estimate_cefr_level",
]
