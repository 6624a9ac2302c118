"""
Core type definitions for metaprompt.

This module contains the type aliases shared by the form collector, the
template compiler and the export layer.
"""

from collections.abc import Iterable, Mapping, Sequence

FormValue = str | list[str] | bool

FormData = dict[str, FormValue]

SubmittedValue = str | bool

# Either a mapping (multi-value widgets as sequences, numbers as-is) or raw
# (name, value) pairs
Submission = (
    Mapping[str, SubmittedValue | int | float | Sequence[str] | None]
    | Iterable[tuple[str, SubmittedValue]]
)

CompiledPrompt = str
