"""LangChain runnable helpers for compiled prompts.

This module exposes schema compilation as LangChain `Runnable` objects so the
compiled prompt can be composed with chat models and parsers:
    - `build_prompt_runnable` maps a raw form submission to the compiled prompt
    - `prepare_chain` pipes that prompt into a chat model

Functions return runnables rather than executing eagerly so callers can
compose additional operators before invocation.
"""

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable, RunnableLambda

from metaprompt.core.types import CompiledPrompt, Submission
from metaprompt.forms.collector import collect_form_data
from metaprompt.schema.models import Schema
from metaprompt.templates.compiler import compile_prompt
from metaprompt.texts import DisplayTexts


def build_prompt_runnable(
    schema: Schema, texts: DisplayTexts | None = None
) -> Runnable:
    """
    Wrap collection and compilation of a schema in a runnable.

    Params:
        schema: The parsed schema whose template is compiled
        texts: Display literals used for booleans

    Returns:
        A runnable taking a raw submission and returning the compiled prompt
    """

    def compile_submission(submission: Submission) -> CompiledPrompt:
        form_data = collect_form_data(schema.variables, submission)
        return compile_prompt(schema.prompt_template, form_data, texts)

    return RunnableLambda(compile_submission, name="compile_prompt")


def prepare_chain(
    schema: Schema,
    llm: BaseChatModel,
    texts: DisplayTexts | None = None,
    parse_as_string: bool = False,
) -> Runnable:
    """
    Assemble a chain sending the compiled prompt to a chat model.

    The compiled prompt is passed as a single human message; it is not
    reinterpreted as a LangChain prompt template, so literal braces in the
    compiled text are preserved.

    Params:
        schema: The parsed schema whose template is compiled
        llm: Chat model receiving the compiled prompt
        texts: Display literals used for booleans
        parse_as_string: Append a `StrOutputParser` to return plain text

    Returns:
        A composed runnable taking a raw submission
    """
    chain = build_prompt_runnable(schema, texts) | llm
    if parse_as_string:
        chain = chain | StrOutputParser()
    return chain
