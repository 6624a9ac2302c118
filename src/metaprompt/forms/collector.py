"""
Form data collection.

Reconciles the raw values submitted by a rendered form with the variable
definitions of the schema. The submission follows HTML form semantics: every
field contributes `(name, value)` pairs and unchecked boxes contribute
nothing.

Collection runs in two passes. The first copies every submitted pair,
coalescing repeated names into a list. The second re-derives the two
type-sensitive cases from the variable definitions: a `checkbox` always
yields a bool (False when absent) and a `checkbox_group` always yields a
list of checked option values (empty when nothing is checked).
"""

from collections.abc import Iterable, Iterator, Mapping

from metaprompt.core.types import FormData, Submission, SubmittedValue
from metaprompt.forms.widgets import (
    Checkbox,
    CheckboxGroup,
    FormView,
    NumberInput,
    RadioGroup,
    RangeSlider,
    Select,
    TextArea,
    TextInput,
)
from metaprompt.schema.models import VariableDef, VariableType

# Submitted checkbox values that mean "not checked"
UNCHECKED_VALUES = frozenset({"", "false", "off", "0"})

# Value a browser submits for a checked box without an explicit value
CHECKED_VALUE = "on"


def iter_submission(submission: Submission) -> Iterator[tuple[str, SubmittedValue]]:
    """
    Flatten a submission into `(name, value)` pairs.

    Params:
        submission: Mapping of name to value (sequences for multi-value
            fields, None for absent fields, other scalars such as numbers
            are submitted as their string form) or an iterable of pairs

    Yields:
        One pair per submitted value, in submission order
    """
    if isinstance(submission, Mapping):
        for name, value in submission.items():
            if value is None:
                continue
            if isinstance(value, (str, bool)):
                yield name, value
            elif isinstance(value, Iterable):
                for item in value:
                    yield name, item
            else:
                yield name, str(value)
    else:
        yield from submission


def is_checked(value: SubmittedValue) -> bool:
    """Whether a submitted checkbox value counts as checked."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in UNCHECKED_VALUES


def collect_form_data(
    variables: Mapping[str, VariableDef], submission: Submission
) -> FormData:
    """
    Normalize a raw submission into typed form data.

    Params:
        variables: Variable definitions of the schema, the typing authority
        submission: Raw submitted values

    Returns:
        Mapping of variable name to value where checkbox variables are bool,
        checkbox groups are lists in option declaration order, and all other
        submitted fields are strings (lists when submitted more than once)
    """
    pairs = list(iter_submission(submission))

    form_data: FormData = {}
    for name, value in pairs:
        if name in form_data:
            existing = form_data[name]
            if isinstance(existing, list):
                existing.append(value)
            else:
                form_data[name] = [existing, value]
        else:
            form_data[name] = value

    for name, variable in variables.items():
        if variable.type is VariableType.CHECKBOX_GROUP:
            submitted = {value for key, value in pairs if key == name}
            form_data[name] = [
                option.value for option in variable.options if option.value in submitted
            ]
        elif variable.type is VariableType.CHECKBOX:
            form_data[name] = any(is_checked(value) for key, value in pairs if key == name)

    return form_data


def initial_submission(form: FormView) -> list[tuple[str, SubmittedValue]]:
    """
    Build the submission an untouched form would send.

    Mirrors what a browser posts for the pre-filled widgets: text-like
    fields send their value (empty when unset), checked boxes send their
    value, and radio groups send nothing unless one button is checked.

    Params:
        form: A rendered form description

    Returns:
        The `(name, value)` pairs in render order
    """
    pairs: list[tuple[str, SubmittedValue]] = []
    for field in form.fields:
        widget = field.widget
        if isinstance(widget, (TextInput, NumberInput, TextArea)):
            pairs.append((widget.name, widget.value or ""))
        elif isinstance(widget, Select):
            pairs.append((widget.name, widget.selected_value))
        elif isinstance(widget, RangeSlider):
            pairs.append((widget.name, widget.value))
        elif isinstance(widget, Checkbox):
            if widget.checked:
                pairs.append((widget.name, CHECKED_VALUE))
        elif isinstance(widget, CheckboxGroup):
            pairs.extend((widget.name, value) for value in widget.checked_values)
        elif isinstance(widget, RadioGroup):
            if widget.checked_value is not None:
                pairs.append((widget.name, widget.checked_value))
    return pairs


def merge_submission(
    base: Submission, updates: Mapping[str, SubmittedValue | list[str] | None]
) -> list[tuple[str, SubmittedValue]]:
    """
    Replace the values of some fields in a submission.

    Every name present in `updates` drops all its pairs from `base`; a None
    update leaves the field absent (an unchecked box, an unselected radio).

    Params:
        base: The submission to start from, usually `initial_submission`
        updates: New values keyed by field name

    Returns:
        The merged `(name, value)` pairs
    """
    pairs = [(name, value) for name, value in iter_submission(base) if name not in updates]
    pairs.extend(iter_submission(updates))
    return pairs

