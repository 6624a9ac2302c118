"""
Form rendering and form data collection.

This package maps schema variables to abstract widget descriptions and
reconciles submitted widget values back into typed form data.
"""

from metaprompt.forms.collector import (
    collect_form_data,
    initial_submission,
    is_checked,
    iter_submission,
    merge_submission,
)
from metaprompt.forms.renderer import (
    FIELD_RENDERERS,
    decode_default_list,
    render_field,
    render_field_view,
    render_form,
)
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

__all__ = [
    # Widget descriptions
    "Checkbox",
    "CheckboxGroup",
    "Choice",
    "FieldView",
    "FormView",
    "NumberInput",
    "RadioGroup",
    "RangeSlider",
    "SectionView",
    "Select",
    "TextArea",
    "TextInput",
    "ToggleItem",
    "Widget",
    # Rendering
    "FIELD_RENDERERS",
    "decode_default_list",
    "render_field",
    "render_field_view",
    "render_form",
    # Collection
    "collect_form_data",
    "initial_submission",
    "is_checked",
    "iter_submission",
    "merge_submission",
]
