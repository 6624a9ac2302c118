"""
Core metaprompt type aliases.
"""

from metaprompt.core.types import (
    CompiledPrompt,
    FormData,
    FormValue,
    Submission,
    SubmittedValue,
)

__all__ = [
    "CompiledPrompt",
    "FormData",
    "FormValue",
    "Submission",
    "SubmittedValue",
]
