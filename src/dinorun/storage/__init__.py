"""Persistence for DINORUN."""

from dinorun.storage.preferences import (
    HIGH_SCORE_KEY,
    JsonPreferenceStore,
    MemoryPreferenceStore,
    PreferenceStore,
)

__all__ = [
    "HIGH_SCORE_KEY",
    "JsonPreferenceStore",
    "MemoryPreferenceStore",
    "PreferenceStore",
]
