"""
Prompt template compilation.
"""

from metaprompt.templates.compiler import (
    cleanup_template,
    compile_prompt,
    conditional_block_pattern,
    is_truthy,
    normalize_whitespace,
    render_value,
    resolve_conditionals,
    strip_template_syntax,
    substitute_variables,
)

__all__ = [
    "cleanup_template",
    "compile_prompt",
    "conditional_block_pattern",
    "is_truthy",
    "normalize_whitespace",
    "render_value",
    "resolve_conditionals",
    "strip_template_syntax",
    "substitute_variables",
]
