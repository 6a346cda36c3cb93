"""Shared view-model state enums."""

from enum import Enum

__all__ = ["LoadingState"]


class LoadingState(str, Enum):
    LOADING = "loading"
    LOADED  = "loaded"
    FAILED  = "failed"
