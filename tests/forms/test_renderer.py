"""
Tests for field rendering and form assembly.

This module checks the widget produced for every variable type and the
ordering rules of sectioned and unsectioned forms.
"""

import pytest

from metaprompt.forms import (
    FIELD_RENDERERS,
    Checkbox,
    CheckboxGroup,
    Choice,
    NumberInput,
    RadioGroup,
    RangeSlider,
    Select,
    TextArea,
    TextInput,
    decode_default_list,
    render_field,
    render_field_view,
    render_form,
)
from metaprompt.parsing import parse_schema_text
from metaprompt.schema import (
    OptionDef,
    Schema,
    SectionDef,
    UIConfig,
    ValidationRules,
    VariableDef,
    VariableType,
)
from metaprompt.texts import DisplayTexts

COLORS = [
    OptionDef(value="red", label="Red"),
    OptionDef(value="green", label="Green"),
    OptionDef(value="blue", label="Blue"),
]


class TestDispatchTable:
    """Test the type dispatch table covers the closed type set."""

    def test_every_type_has_renderer(self):
        """Test no variable type is missing from the dispatch table."""
        assert set(FIELD_RENDERERS) == set(VariableType)


class TestTextLikeWidgets:
    """Test text, number and textarea widgets."""

    def test_text_with_validation(self):
        """Test text applies length bounds and pre-fills the default."""
        variable = VariableDef(
            name="title",
            type="text",
            required=True,
            placeholder="Title",
            default="Draft",
            validation=ValidationRules(min_length="2", max_length="40"),
        )
        assert render_field(variable) == TextInput(
            name="title",
            required=True,
            placeholder="Title",
            value="Draft",
            min_length="2",
            max_length="40",
        )

    def test_text_partial_validation(self):
        """Test empty bounds are not applied."""
        variable = VariableDef(
            name="title", validation=ValidationRules(max_length="10")
        )
        widget = render_field(variable)
        assert widget.min_length is None
        assert widget.max_length == "10"

    def test_text_without_default(self):
        """Test no default leaves the widget empty."""
        widget = render_field(VariableDef(name="title"))
        assert widget.value is None
        assert widget.min_length is None

    def test_number_bounds_verbatim(self):
        """Test number bounds are passed through unchanged."""
        variable = VariableDef(
            name="n", type="number", default="5", min="0.5", max="10", step="0.5"
        )
        assert render_field(variable) == NumberInput(
            name="n", value="5", min="0.5", max="10", step="0.5"
        )

    def test_number_without_bounds(self):
        """Test absent bounds stay unset."""
        widget = render_field(VariableDef(name="n", type="number"))
        assert (widget.min, widget.max, widget.step, widget.value) == (
            None,
            None,
            None,
            None,
        )

    def test_textarea(self):
        """Test textarea keeps default and placeholder, no length bounds."""
        variable = VariableDef(
            name="body",
            type="textarea",
            placeholder="Write here",
            default="Once upon a time",
            validation=ValidationRules(min_length="10"),
        )
        widget = render_field(variable)
        assert widget == TextArea(
            name="body", placeholder="Write here", value="Once upon a time"
        )
        assert not hasattr(widget, "min_length")

    def test_unknown_type_renders_text(self):
        """Test unknown type tags render as a text input."""
        widget = render_field(VariableDef(name="when", type="datetime"))
        assert isinstance(widget, TextInput)


class TestSelect:
    """Test select widgets."""

    def test_optional_select_has_placeholder_choice(self):
        """Test the empty choice is prepended when not required."""
        widget = render_field(
            VariableDef(name="c", type="select", options=COLORS, default="green")
        )
        assert isinstance(widget, Select)
        assert widget.choices[0] == Choice(value="", label="Sélectionnez une option")
        assert [c.value for c in widget.choices] == ["", "red", "green", "blue"]
        assert [c.selected for c in widget.choices] == [False, False, True, False]
        assert widget.selected_value == "green"

    def test_required_select_has_no_placeholder(self):
        """Test required selects only list the options."""
        widget = render_field(
            VariableDef(name="c", type="select", options=COLORS, required=True)
        )
        assert [c.value for c in widget.choices] == ["red", "green", "blue"]
        assert widget.required is True
        assert widget.selected_value == "red"

    def test_placeholder_text_configurable(self):
        """Test the empty choice label comes from the display texts."""
        texts = DisplayTexts(select_placeholder="Pick one")
        widget = render_field(VariableDef(name="c", type="select", options=COLORS), texts)
        assert widget.choices[0].label == "Pick one"
        assert widget.selected_value == ""


class TestCheckbox:
    """Test single checkbox widgets."""

    @pytest.mark.parametrize(
        "default,checked",
        [("true", True), ("false", False), ("", False), ("TRUE", False), ("1", False)],
    )
    def test_checked_only_for_literal_true(self, default, checked):
        """Test the box is pre-checked iff default is exactly 'true'."""
        widget = render_field(VariableDef(name="ok", type="checkbox", default=default))
        assert widget == Checkbox(name="ok", caption="ok", checked=checked)

    def test_caption_is_plain_label(self):
        """Test the inline caption is never starred."""
        variable = VariableDef(name="ok", type="checkbox", label="Agree", required=True)
        assert render_field(variable).caption == "Agree"
        assert render_field_view(variable).label == "Agree *"


class TestCheckboxGroup:
    """Test checkbox group widgets."""

    def test_defaults_from_json_array(self):
        """Test options listed in the JSON default are pre-checked."""
        widget = render_field(
            VariableDef(
                name="colors",
                type="checkbox_group",
                options=COLORS,
                default='["blue", "red"]',
            )
        )
        assert isinstance(widget, CheckboxGroup)
        assert [item.id for item in widget.items] == [
            "colors_red",
            "colors_green",
            "colors_blue",
        ]
        assert widget.checked_values == ["red", "blue"]

    @pytest.mark.parametrize(
        "default", ["", "not json", '{"red": true}', '"red"', "[1, 2]", "[red]"]
    )
    def test_malformed_default_checks_nothing(self, default):
        """Test malformed defaults yield no pre-checked options."""
        widget = render_field(
            VariableDef(name="colors", type="checkbox_group", options=COLORS, default=default)
        )
        assert widget.checked_values == []

    def test_decode_default_list(self):
        """Test the best-effort decoder keeps only strings."""
        assert decode_default_list('["a", 1, "b"]') == {"a", "b"}
        assert decode_default_list("[") == set()


class TestRadio:
    """Test radio group widgets."""

    def test_default_selected_and_required_propagated(self):
        """Test the default is checked and every button is required."""
        widget = render_field(
            VariableDef(
                name="size", type="radio", options=COLORS, default="blue", required=True
            )
        )
        assert isinstance(widget, RadioGroup)
        assert widget.checked_value == "blue"
        assert all(item.required for item in widget.items)
        assert [item.id for item in widget.items][0] == "size_red"

    def test_no_default_checks_nothing(self):
        """Test no button is checked without a matching default."""
        widget = render_field(VariableDef(name="size", type="radio", options=COLORS))
        assert widget.checked_value is None
        assert not any(item.required for item in widget.items)


class TestRange:
    """Test range slider widgets."""

    def test_default_bounds(self):
        """Test bounds default to 0..100 and value to 0."""
        widget = render_field(VariableDef(name="r", type="range"))
        assert widget == RangeSlider(
            name="r", min="0", max="100", value="0", readout="Valeur: 0"
        )

    def test_value_falls_back_to_min(self):
        """Test the initial value is min when no default is given."""
        widget = render_field(VariableDef(name="r", type="range", min="10", max="20"))
        assert widget.value == "10"
        assert widget.readout == "Valeur: 10"

    def test_value_from_default(self):
        """Test the default wins over min."""
        widget = render_field(
            VariableDef(name="r", type="range", min="10", max="20", default="15")
        )
        assert widget.value == "15"

    def test_tick_labels_sorted_numerically(self):
        """Test tick captions are ordered by numeric position."""
        widget = render_field(
            VariableDef(
                name="r", type="range", labels={10: "High", 2: "Low", 5: "Mid"}
            )
        )
        assert widget.tick_labels == ("Low", "Mid", "High")

    def test_readout_caption_configurable(self):
        """Test the readout caption comes from the display texts."""
        texts = DisplayTexts(range_value_label="Value")
        widget = render_field(VariableDef(name="r", type="range", default="3"), texts)
        assert widget.readout == "Value: 3"


class TestFieldLabels:
    """Test field labels."""

    def test_required_label_starred(self):
        """Test required fields get a trailing star."""
        view = render_field_view(VariableDef(name="a", label="Name", required=True))
        assert view.label == "Name *"

    def test_optional_label_unchanged(self):
        """Test optional fields keep their label."""
        view = render_field_view(VariableDef(name="a", label="Name"))
        assert view.label == "Name"


class TestFormAssembly:
    """Test sectioned and unsectioned form assembly."""

    def test_sections_sorted_by_order(self, sample_schema):
        """Test sections render by ascending order, not document order."""
        form = render_form(sample_schema)
        assert [s.name for s in form.sections] == ["Content", "Style"]

    def test_unknown_fields_skipped(self, sample_schema):
        """Test unresolved field names are silently skipped."""
        form = render_form(sample_schema)
        style = form.sections[1]
        assert [f.name for f in style.fields] == ["tone", "creativity"]
        assert style.collapsible is True

    def test_form_metadata_and_hints(self, sample_schema):
        """Test metadata and layout hints are carried on the form."""
        form = render_form(sample_schema)
        assert form.title == "Article writer"
        assert form.tags == ("writing", "blog")
        assert form.theme == "dark"
        assert form.layout == "horizontal"

    def test_fields_in_render_order(self, sample_schema):
        """Test the flattened field list follows section order."""
        form = render_form(sample_schema)
        assert [f.name for f in form.fields] == [
            "topic",
            "keywords",
            "include_sources",
            "length",
            "tone",
            "creativity",
        ]

    def test_stable_sort_on_ties(self):
        """Test sections with equal order keep document order."""
        schema = Schema(
            variables={"a": VariableDef(name="a"), "b": VariableDef(name="b")},
            ui_config=UIConfig(
                sections=[
                    SectionDef(name="second", order=1, fields=["b"]),
                    SectionDef(name="first", order=1, fields=["a"]),
                    SectionDef(name="zero", order=0, fields=[]),
                ]
            ),
        )
        form = render_form(schema)
        assert [s.name for s in form.sections] == ["zero", "second", "first"]

    def test_unsectioned_declaration_order(self, minimal_schema):
        """Test schemas without UI configuration use one unnamed section."""
        form = render_form(minimal_schema)
        assert len(form.sections) == 1
        assert form.sections[0].name is None
        assert [f.name for f in form.fields] == ["who"]
        assert form.theme == "default"
        assert form.layout == "vertical"

    def test_empty_sections_fall_back_to_unsectioned(self):
        """Test a configuration without sections renders every variable."""
        schema = parse_schema_text(
            "<root>"
            '<variable name="x"/><variable name="y"/>'
            "<ui_configuration><theme>light</theme></ui_configuration>"
            "</root>"
        )
        form = render_form(schema)
        assert [f.name for f in form.fields] == ["x", "y"]
        assert form.theme == "light"
