"""
Field rendering: variable definitions to widget descriptions.

`render_field` dispatches on the closed `VariableType` set through a table of
builder functions, one per widget kind. `render_form` assembles the fields of
a whole schema, either grouped by the UI configuration sections or as one
unsectioned group in declaration order.
"""

import json
import logging
from collections.abc import Callable

from metaprompt.forms.widgets import (
    Checkbox,
    CheckboxGroup,
    Choice,
    FieldView,
    FormView,
    NumberInput,
    RadioGroup,
    RangeSlider,
    SectionView,
    Select,
    TextArea,
    TextInput,
    ToggleItem,
    Widget,
)
from metaprompt.schema.models import Schema, VariableDef, VariableType
from metaprompt.texts import DEFAULT_TEXTS, DisplayTexts

logger = logging.getLogger(__name__)


def decode_default_list(default: str) -> set[str]:
    """
    Best-effort decode of a JSON array of strings.

    Params:
        default: Serialized default value of a checkbox group

    Returns:
        The decoded values, or an empty set when the value is empty,
        malformed, or not an array
    """
    if not default:
        return set()
    try:
        decoded = json.loads(default)
    except ValueError:
        logger.debug("Ignoring malformed checkbox group default %r", default)
        return set()
    if not isinstance(decoded, list):
        return set()
    return {item for item in decoded if isinstance(item, str)}


def _item_id(variable: VariableDef, value: str) -> str:
    return f"{variable.name}_{value}"


def render_text(variable: VariableDef, texts: DisplayTexts) -> TextInput:
    rules = variable.validation
    return TextInput(
        name=variable.name,
        required=variable.required,
        placeholder=variable.placeholder,
        value=variable.default or None,
        min_length=(rules.min_length or None) if rules else None,
        max_length=(rules.max_length or None) if rules else None,
    )


def render_number(variable: VariableDef, texts: DisplayTexts) -> NumberInput:
    return NumberInput(
        name=variable.name,
        required=variable.required,
        value=variable.default or None,
        min=variable.min or None,
        max=variable.max or None,
        step=variable.step or None,
    )


def render_textarea(variable: VariableDef, texts: DisplayTexts) -> TextArea:
    return TextArea(
        name=variable.name,
        required=variable.required,
        placeholder=variable.placeholder,
        value=variable.default or None,
    )


def render_select(variable: VariableDef, texts: DisplayTexts) -> Select:
    choices = []
    if not variable.required:
        choices.append(Choice(value="", label=texts.select_placeholder))
    choices.extend(
        Choice(
            value=option.value,
            label=option.label,
            selected=option.value == variable.default,
        )
        for option in variable.options
    )
    return Select(name=variable.name, required=variable.required, choices=tuple(choices))


def render_checkbox(variable: VariableDef, texts: DisplayTexts) -> Checkbox:
    return Checkbox(
        name=variable.name,
        caption=variable.label,
        checked=variable.default == "true",
    )


def render_checkbox_group(variable: VariableDef, texts: DisplayTexts) -> CheckboxGroup:
    defaults = decode_default_list(variable.default)
    items = tuple(
        ToggleItem(
            id=_item_id(variable, option.value),
            value=option.value,
            label=option.label,
            checked=option.value in defaults,
        )
        for option in variable.options
    )
    return CheckboxGroup(name=variable.name, items=items)


def render_radio(variable: VariableDef, texts: DisplayTexts) -> RadioGroup:
    # Every button carries `required` so the group demands exactly one choice
    items = tuple(
        ToggleItem(
            id=_item_id(variable, option.value),
            value=option.value,
            label=option.label,
            checked=option.value == variable.default,
            required=variable.required,
        )
        for option in variable.options
    )
    return RadioGroup(name=variable.name, items=items)


def render_range(variable: VariableDef, texts: DisplayTexts) -> RangeSlider:
    minimum = variable.min or "0"
    maximum = variable.max or "100"
    value = variable.default or variable.min or "0"
    tick_labels = tuple(
        caption for _, caption in sorted(variable.labels.items(), key=lambda item: item[0])
    )
    return RangeSlider(
        name=variable.name,
        min=minimum,
        max=maximum,
        value=value,
        readout=texts.range_readout(value),
        tick_labels=tick_labels,
    )


FIELD_RENDERERS: dict[VariableType, Callable[[VariableDef, DisplayTexts], Widget]] = {
    VariableType.TEXT: render_text,
    VariableType.NUMBER: render_number,
    VariableType.TEXTAREA: render_textarea,
    VariableType.SELECT: render_select,
    VariableType.CHECKBOX: render_checkbox,
    VariableType.CHECKBOX_GROUP: render_checkbox_group,
    VariableType.RADIO: render_radio,
    VariableType.RANGE: render_range,
}


def render_field(variable: VariableDef, texts: DisplayTexts | None = None) -> Widget:
    """
    Build the widget description of one variable.

    Params:
        variable: The variable definition
        texts: Display literals (reference locale when omitted)

    Returns:
        The widget matching the variable's type; unknown types were already
        coerced to text when the definition was built
    """
    renderer = FIELD_RENDERERS.get(variable.type, render_text)
    return renderer(variable, texts or DEFAULT_TEXTS)


def render_field_view(variable: VariableDef, texts: DisplayTexts | None = None) -> FieldView:
    """Build a widget together with its (starred when required) label."""
    return FieldView(
        name=variable.name,
        label=variable.display_label,
        widget=render_field(variable, texts),
    )


def render_form(schema: Schema, texts: DisplayTexts | None = None) -> FormView:
    """
    Assemble the form description of a schema.

    When the UI configuration declares sections, they are rendered sorted by
    `order` (stable) and each renders only the variables it references;
    names that do not resolve to a variable are skipped. Otherwise all
    variables are rendered in declaration order in a single unnamed section.

    Params:
        schema: The parsed schema
        texts: Display literals (reference locale when omitted)

    Returns:
        The complete FormView
    """
    ui_config = schema.ui_config

    if ui_config is not None and ui_config.sections:
        sections = []
        for section in ui_config.ordered_sections():
            fields = []
            for field_name in section.fields:
                variable = schema.variables.get(field_name)
                if variable is None:
                    logger.debug(
                        "Section '%s' references unknown variable '%s'",
                        section.name,
                        field_name,
                    )
                    continue
                fields.append(render_field_view(variable, texts))
            sections.append(
                SectionView(
                    name=section.name,
                    fields=tuple(fields),
                    collapsible=section.collapsible,
                )
            )
    else:
        sections = [
            SectionView(
                name=None,
                fields=tuple(
                    render_field_view(variable, texts)
                    for variable in schema.variables.values()
                ),
            )
        ]

    return FormView(
        title=schema.metadata.name,
        description=schema.metadata.description,
        tags=tuple(schema.metadata.tags),
        theme=ui_config.theme if ui_config else "default",
        layout=ui_config.layout if ui_config else "vertical",
        sections=tuple(sections),
    )
