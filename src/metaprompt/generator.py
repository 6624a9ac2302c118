"""
Metaprompt generator.

`MetapromptGenerator` wires the stateless components together for an entry
point (CLI, service handler, UI shell): load a schema, render its form,
collect submitted values, compile the prompt and build the export record.
Each instance owns one current schema; loading a new document replaces it
wholesale, and a failed load leaves it untouched.
"""

import logging
from datetime import datetime
from pathlib import Path

from metaprompt.core.types import CompiledPrompt, FormData, Submission
from metaprompt.exceptions import MissingAssetError
from metaprompt.export import ExportRecord, utc_now
from metaprompt.forms.collector import collect_form_data, initial_submission
from metaprompt.forms.renderer import render_form
from metaprompt.forms.widgets import FormView
from metaprompt.parsing.loader import load_schema
from metaprompt.parsing.parser import parse_schema_text
from metaprompt.schema.models import Schema
from metaprompt.templates.compiler import compile_prompt
from metaprompt.texts import DEFAULT_TEXTS, DisplayTexts

logger = logging.getLogger(__name__)


class MetapromptGenerator:
    """Load a schema and turn form submissions into compiled prompts.

    Notes:
      - Compiled prompts are recomputed on every request, never cached.
      - `ParseError` and `MissingAssetError` propagate to the caller; every
        other irregularity in a schema resolves to a default value.
    """

    def __init__(self, schema: Schema | None = None, texts: DisplayTexts | None = None):
        self._schema = schema
        self.texts = texts or DEFAULT_TEXTS

    @property
    def schema(self) -> Schema:
        """The current schema.

        Raises:
            MissingAssetError: If no schema has been loaded yet.
        """
        if self._schema is None:
            raise MissingAssetError(None, "no schema loaded")
        return self._schema

    @property
    def has_schema(self) -> bool:
        return self._schema is not None

    def load_file(self, path: str | Path | None) -> Schema:
        """Load a schema file, replacing the current schema on success.

        Params:
            path: Location of the XML schema file.

        Returns:
            The newly loaded schema.

        Raises:
            MissingAssetError: If the file is missing, not XML, or unreadable.
            ParseError: If the file is not well-formed XML.
        """
        schema = load_schema(path)
        self._schema = schema
        return schema

    def load_text(self, text: str | bytes, source: str = "<string>") -> Schema:
        """Parse schema text, replacing the current schema on success.

        Raises:
            ParseError: If the text is not well-formed XML.
        """
        schema = parse_schema_text(text, source=source)
        self._schema = schema
        return schema

    def render_form(self) -> FormView:
        """Build the form description of the current schema."""
        return render_form(self.schema, self.texts)

    def default_submission(self) -> list[tuple[str, str | bool]]:
        """The submission of the freshly rendered, untouched form."""
        return initial_submission(self.render_form())

    def collect(self, submission: Submission) -> FormData:
        """Normalize a raw submission against the current schema's variables."""
        return collect_form_data(self.schema.variables, submission)

    def compile(self, form_data: FormData) -> CompiledPrompt:
        """Compile the current schema's template with collected form data."""
        return compile_prompt(self.schema.prompt_template, form_data, self.texts)

    def generate_prompt(self, submission: Submission) -> CompiledPrompt:
        """Collect a submission and compile it in one step."""
        return self.compile(self.collect(submission))

    def export(
        self, submission: Submission, timestamp: datetime | None = None
    ) -> ExportRecord:
        """Build the export record of a submission.

        Params:
            submission: Raw submitted values.
            timestamp: Compile moment; defaults to now (UTC).

        Returns:
            The export record with metadata, form data and compiled prompt.
        """
        form_data = self.collect(submission)
        record = ExportRecord(
            metadata=self.schema.metadata,
            form_data=form_data,
            generated_prompt=self.compile(form_data),
            timestamp=timestamp or utc_now(),
        )
        logger.info("Exported prompt for schema '%s'", self.schema.metadata.name)
        return record
