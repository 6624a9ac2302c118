"""
Prompt template compilation.

Compiles a prompt template against collected form data in four steps:

1. substitute every `{{key}}` token of a form data key with its rendered value,
2. resolve `{{#key}}...{{/key}}` conditional blocks against the original values,
3. strip any remaining `{{...}}` syntax,
4. collapse runs of blank lines and trim the result.

Malformed or unmatched conditional delimiters are not rejected; they fall
through to step 3 and are stripped like any other leftover token.
"""

import logging
import re
from collections.abc import Mapping

from metaprompt.core.types import CompiledPrompt, FormValue
from metaprompt.texts import DEFAULT_TEXTS, DisplayTexts

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ", "

LEFTOVER_TOKEN_PATTERN = re.compile(r"\{\{[^}]*\}\}")
BLANK_LINES_PATTERN = re.compile(r"\n\s*\n")


def render_value(value: FormValue | None, texts: DisplayTexts | None = None) -> str:
    """
    Render a form value as template text.

    Params:
        value: Collected value of one variable
        texts: Display literals used for booleans

    Returns:
        List items joined by ", ", the affirmative/negative literal for
        booleans, the string itself otherwise (empty for None)
    """
    if isinstance(value, bool):
        return (texts or DEFAULT_TEXTS).boolean(value)
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(str(item) for item in value)
    if value is None:
        return ""
    return str(value)


def is_truthy(value: FormValue | None) -> bool:
    """Conditional truthiness: non-empty string, True, or non-empty list."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return bool(value)


def substitute_variables(
    template: str,
    form_data: Mapping[str, FormValue],
    texts: DisplayTexts | None = None,
) -> str:
    """Replace every exact `{{key}}` token of each form data key."""
    for key, value in form_data.items():
        template = template.replace(f"{{{{{key}}}}}", render_value(value, texts))
    return template


def conditional_block_pattern(key: str) -> re.Pattern[str]:
    """Non-greedy pattern of a `{{#key}}...{{/key}}` block, spanning lines."""
    return re.compile(
        re.escape(f"{{{{#{key}}}}}") + r"(.*?)" + re.escape(f"{{{{/{key}}}}}"),
        re.DOTALL,
    )


def resolve_conditionals(template: str, form_data: Mapping[str, FormValue]) -> str:
    """
    Keep or drop the conditional blocks of each form data key.

    The test consults the form data value, never the substituted text.

    Params:
        template: Template text, usually after substitution
        form_data: Collected values

    Returns:
        The text with each block replaced by its inner content when the
        key's value is truthy, or removed otherwise
    """
    for key, value in form_data.items():
        pattern = conditional_block_pattern(key)
        if is_truthy(value):
            template = pattern.sub(lambda match: match.group(1), template)
        else:
            template = pattern.sub("", template)
    return template


def strip_template_syntax(text: str) -> str:
    """
    Remove every remaining `{{...}}` token.

    Removing a token can join the characters around it into a new token
    (`{{}{{a}}}` leaves `{{}}`), so the pattern is applied until nothing
    matches.
    """
    stripped = LEFTOVER_TOKEN_PATTERN.sub("", text)
    while stripped != text:
        text = stripped
        stripped = LEFTOVER_TOKEN_PATTERN.sub("", text)
    return stripped


def normalize_whitespace(text: str) -> str:
    """Collapse consecutive blank lines into one and trim the result."""
    return BLANK_LINES_PATTERN.sub("\n\n", text).strip()


def cleanup_template(text: str) -> str:
    """Strip leftover template syntax and normalize whitespace."""
    return normalize_whitespace(strip_template_syntax(text))


def compile_prompt(
    template: str,
    form_data: Mapping[str, FormValue],
    texts: DisplayTexts | None = None,
) -> CompiledPrompt:
    """
    Compile a prompt template with collected form data.

    Params:
        template: The schema's prompt template
        form_data: Collected values keyed by variable name
        texts: Display literals used for booleans

    Returns:
        The compiled prompt text
    """
    prompt = substitute_variables(template, form_data, texts)
    prompt = resolve_conditionals(prompt, form_data)
    prompt = cleanup_template(prompt)
    logger.debug(
        "Compiled template of %d chars into %d chars", len(template), len(prompt)
    )
    return prompt
