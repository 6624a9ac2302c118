"""
Schema document parsing and loading.
"""

from metaprompt.parsing.loader import load_schema, read_schema_file
from metaprompt.parsing.parser import (
    element_text,
    extract_metadata,
    extract_prompt_template,
    extract_range_labels,
    extract_ui_config,
    extract_variable,
    extract_variables,
    parse_schema,
    parse_schema_text,
)

__all__ = [
    "element_text",
    "extract_metadata",
    "extract_prompt_template",
    "extract_range_labels",
    "extract_ui_config",
    "extract_variable",
    "extract_variables",
    "load_schema",
    "parse_schema",
    "parse_schema_text",
    "read_schema_file",
]
