"""
metaprompt - Compile declarative prompt schemas into forms and prompts

metaprompt reads an XML schema describing a prompt template and its fillable
variables, describes the input form it implies, and compiles the template
with the values collected from that form.
"""

from importlib.metadata import version

from metaprompt.exceptions import MetapromptError, MissingAssetError, ParseError
from metaprompt.export import ExportRecord
from metaprompt.forms import collect_form_data, render_field, render_form
from metaprompt.generator import MetapromptGenerator
from metaprompt.parsing import load_schema, parse_schema, parse_schema_text
from metaprompt.schema import Schema, VariableDef, VariableType
from metaprompt.templates import compile_prompt
from metaprompt.texts import DisplayTexts

__version__ = version("metaprompt")

__all__ = [
    "__version__",
    "DisplayTexts",
    "ExportRecord",
    "MetapromptError",
    "MetapromptGenerator",
    "MissingAssetError",
    "ParseError",
    "Schema",
    "VariableDef",
    "VariableType",
    "collect_form_data",
    "compile_prompt",
    "load_schema",
    "parse_schema",
    "parse_schema_text",
    "render_field",
    "render_form",
]
