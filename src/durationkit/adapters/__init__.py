"""Thin bindings of the duration engine into form and template layers."""

from durationkit.adapters.filters import FILTERS, register_filters
from durationkit.adapters.form import DurationTransformer

__all__ = ["DurationTransformer", "FILTERS", "register_filters"]
