"""
Cell — tagged union for raw spreadsheet values.

A cell is exactly one of ``Number``, ``Text`` or ``Empty``. Raw values
from the ingestion service are classified once by ``classify`` and the
rest of the pipeline works on the tag instead of re-inspecting types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from chartdeck.core.exceptions import SchemaError


@dataclass(frozen=True, slots=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Empty:
    pass


Cell = Union[Number, Text, Empty]

EMPTY = Empty()


def classify(raw: Any) -> Cell:
    """
    Tag a raw value.

    ``None`` → Empty, ``int``/``float`` → Number, ``str`` → Text.
    ``bool`` is rejected along with any other type: the ingestion
    contract only carries numbers, text and blanks.
    """
    if raw is None:
        return EMPTY
    if isinstance(raw, bool):
        raise SchemaError(f"Unsupported cell value {raw!r} (boolean)")
    if isinstance(raw, (int, float)):
        return Number(raw)
    if isinstance(raw, str):
        return Text(raw)
    raise SchemaError(
        f"Unsupported cell value {raw!r} ({type(raw).__name__})"
    )
