"""
Display text configuration for metaprompt.

This module provides the localized literals used when rendering widgets and
compiling prompts: the affirmative/negative words substituted for checkbox
values, the empty choice of optional selects and the caption of the range
readout.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class DisplayTexts:
    """Localized literals shown in forms and compiled prompts.

    The defaults are the French literals of the reference forms. A locale
    file only needs the keys it translates; the rest stay French.

    Examples:
        # Reference (French) locale
        texts = DisplayTexts()

        # English yes/no, French placeholders
        texts = DisplayTexts.from_dict({"affirmative": "Yes", "negative": "No"})

        # Locale file
        texts = DisplayTexts.from_yaml("texts.en.yaml")
    """

    affirmative: str = "Oui"
    negative: str = "Non"
    select_placeholder: str = "Sélectionnez une option"
    range_value_label: str = "Valeur"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> DisplayTexts:
        """Build texts from a mapping of literal name to replacement.

        Args:
            config: Replacement literals keyed by field name; unknown keys
                are dropped and values are converted to strings

        Returns:
            DisplayTexts with the given literals replaced
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: str(v) for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> DisplayTexts:
        """Build texts from a YAML locale file.

        Args:
            yaml_path: Locale file holding a mapping of literal overrides;
                an empty file keeps every default

        Returns:
            DisplayTexts with the file's literals replaced

        Example YAML:
            affirmative: "Yes"
            negative: "No"
            select_placeholder: "Choose an option"
        """
        import yaml

        path = Path(yaml_path)
        with path.open(encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    def boolean(self, value: bool) -> str:
        """Return the literal used for a boolean value."""
        return self.affirmative if value else self.negative

    def range_readout(self, value: str) -> str:
        """Return the live-value caption of a range slider."""
        return f"{self.range_value_label}: {value}"


DEFAULT_TEXTS = DisplayTexts()
