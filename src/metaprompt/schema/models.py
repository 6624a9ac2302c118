"""
Schema data model.

This module defines the immutable pydantic models produced by the schema
parser: document metadata, variable definitions and the optional UI layout
configuration. Every optional element has a documented default so that a
partially specified document still yields a complete `Schema`.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class VariableType(str, Enum):
    """Closed set of variable type tags understood by the form renderer."""

    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    CHECKBOX_GROUP = "checkbox_group"
    RANGE = "range"
    RADIO = "radio"

    @classmethod
    def coerce(cls, tag: Any) -> "VariableType":
        """Map a raw type tag to a member, falling back to TEXT for unknown tags."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip())
        except ValueError:
            return cls.TEXT


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Metadata(_FrozenModel):
    """Descriptive metadata of a schema document."""

    name: str = ""
    description: str = ""
    version: str = ""
    tags: list[str] = Field(default_factory=list)


class OptionDef(_FrozenModel):
    """One choice of a select, checkbox group or radio variable."""

    value: str
    label: str


class ValidationRules(_FrozenModel):
    """Optional length bounds of a text variable, kept as raw text."""

    min_length: str = ""
    max_length: str = ""


class VariableDef(_FrozenModel):
    """
    Definition of one fillable template variable.

    Params:
        name: Unique key, also the substitution token ({{name}})
        type: Widget type tag; unknown tags are coerced to text
        required: Whether the form must provide a value
        label: Human-readable caption (defaults to the name)
        placeholder: Hint text for free-text widgets
        default: Initial value; its meaning depends on the type
        min: Lower bound for number/range widgets, raw text
        max: Upper bound for number/range widgets, raw text
        step: Step for number widgets, raw text
        options: Ordered choices for select/checkbox_group/radio
        labels: Sparse tick captions for range widgets keyed by position
        validation: Optional length bounds for text widgets
    """

    name: str
    type: VariableType = VariableType.TEXT
    required: bool = False
    label: str = ""
    placeholder: str = ""
    default: str = ""
    min: str | None = None
    max: str | None = None
    step: str | None = None
    options: list[OptionDef] = Field(default_factory=list)
    labels: dict[int, str] = Field(default_factory=dict)
    validation: ValidationRules | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> VariableType:
        return VariableType.coerce(value)

    @model_validator(mode="before")
    @classmethod
    def _label_defaults_to_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            data = {**data, "label": data.get("name", "")}
        return data

    @property
    def display_label(self) -> str:
        """Label as shown next to the widget, starred when required."""
        return f"{self.label} *" if self.required else self.label


class SectionDef(_FrozenModel):
    """A named group of variables in the UI layout."""

    name: str = ""
    order: int = 0
    collapsible: bool = False
    fields: list[str] = Field(default_factory=list)


class UIConfig(_FrozenModel):
    """Optional layout hints for the generated form."""

    theme: str = "default"
    layout: str = "vertical"
    sections: list[SectionDef] = Field(default_factory=list)

    def ordered_sections(self) -> list[SectionDef]:
        """Sections sorted ascending by order; ties keep document order."""
        return sorted(self.sections, key=lambda section: section.order)


class Schema(_FrozenModel):
    """Parsed representation of a prompt schema document."""

    metadata: Metadata = Field(default_factory=Metadata)
    prompt_template: str = ""
    variables: dict[str, VariableDef] = Field(default_factory=dict)
    ui_config: UIConfig | None = None
