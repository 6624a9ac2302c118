"""
metaprompt exception classes.

This package provides all exception types used when loading schemas,
rendering forms and compiling prompts.
"""

from metaprompt.exceptions.core import (
    MetapromptError,
    MissingAssetError,
    ParseError,
)

__all__ = [
    "MetapromptError",
    "MissingAssetError",
    "ParseError",
]
