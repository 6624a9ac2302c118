"""
metaprompt schema data model.
"""

from metaprompt.schema.models import (
    Metadata,
    OptionDef,
    Schema,
    SectionDef,
    UIConfig,
    ValidationRules,
    VariableDef,
    VariableType,
)

__all__ = [
    "Metadata",
    "OptionDef",
    "Schema",
    "SectionDef",
    "UIConfig",
    "ValidationRules",
    "VariableDef",
    "VariableType",
]
