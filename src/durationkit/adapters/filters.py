"""Template filters: ``duration``, ``to_seconds`` and ``hhmm``.

Usage with Jinja2::

    env = register_filters(jinja2.Environment())
    env.from_string("{{ task.duration|duration(false) }}")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from durationkit.formatter import format_duration, to_hhmm
from durationkit.parser import parse

FILTERS: dict[str, Callable[..., Any]] = {
    "duration": format_duration,
    "to_seconds": parse,
    "hhmm": to_hhmm,
}

EnvT = TypeVar("EnvT")


def register_filters(env: EnvT) -> EnvT:
    """Add the duration filters to ``env.filters`` and return ``env``."""
    env.filters.update(FILTERS)  # type: ignore[attr-defined]
    return env
