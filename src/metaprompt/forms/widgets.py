"""
Abstract widget descriptions.

Each class describes one kind of interactive input control independently of
any rendering technology. A rendering layer turns them into on-screen
controls and sends the submitted values back keyed by `name`.

The set of widget kinds is closed and mirrors `VariableType`; `Widget` is the
union of all of them.
"""

from attrs import frozen


@frozen
class Choice:
    """One entry of a select widget."""

    value: str
    label: str
    selected: bool = False


@frozen
class ToggleItem:
    """One checkbox or radio button of a group, sharing the group's name."""

    id: str
    value: str
    label: str
    checked: bool = False
    required: bool = False


@frozen
class TextInput:
    name: str
    required: bool = False
    placeholder: str = ""
    value: str | None = None
    min_length: str | None = None
    max_length: str | None = None


@frozen
class NumberInput:
    name: str
    required: bool = False
    value: str | None = None
    min: str | None = None
    max: str | None = None
    step: str | None = None


@frozen
class TextArea:
    name: str
    required: bool = False
    placeholder: str = ""
    value: str | None = None


@frozen
class Select:
    name: str
    required: bool = False
    choices: tuple[Choice, ...] = ()

    @property
    def selected_value(self) -> str:
        """Value of the pre-selected choice, or of the first one when none is."""
        for choice in self.choices:
            if choice.selected:
                return choice.value
        return self.choices[0].value if self.choices else ""


@frozen
class Checkbox:
    """A single boolean control; `caption` is shown inline next to the box."""

    name: str
    caption: str
    checked: bool = False


@frozen
class CheckboxGroup:
    name: str
    items: tuple[ToggleItem, ...] = ()

    @property
    def checked_values(self) -> list[str]:
        return [item.value for item in self.items if item.checked]


@frozen
class RadioGroup:
    name: str
    items: tuple[ToggleItem, ...] = ()

    @property
    def checked_value(self) -> str | None:
        for item in self.items:
            if item.checked:
                return item.value
        return None


@frozen
class RangeSlider:
    """A bounded numeric slider with a live readout and optional tick captions."""

    name: str
    min: str = "0"
    max: str = "100"
    value: str = "0"
    readout: str = ""
    tick_labels: tuple[str, ...] = ()


Widget = (
    TextInput
    | NumberInput
    | TextArea
    | Select
    | Checkbox
    | CheckboxGroup
    | RadioGroup
    | RangeSlider
)


@frozen
class FieldView:
    """A widget together with the label shown above it."""

    name: str
    label: str
    widget: Widget


@frozen
class SectionView:
    """A titled group of fields; `name` is None for the unsectioned layout."""

    name: str | None
    fields: tuple[FieldView, ...] = ()
    collapsible: bool = False


@frozen
class FormView:
    """The complete form description built from a schema."""

    title: str
    description: str
    tags: tuple[str, ...] = ()
    theme: str = "default"
    layout: str = "vertical"
    sections: tuple[SectionView, ...] = ()

    @property
    def fields(self) -> list[FieldView]:
        """All fields across sections, in render order."""
        return [field for section in self.sections for field in section.fields]
