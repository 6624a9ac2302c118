"""
Schema document parser.

This module turns an XML element tree describing a prompt schema into a
`Schema` value. The markup parser itself (`xml.etree.ElementTree`) is the only
source of fatal errors; every missing optional element resolves to the default
documented on the schema models.

Expected document shape:

    <metaprompt>
      <metadata>
        <name>...</name> <description>...</description> <version>...</version>
        <tags><tag>...</tag></tags>
      </metadata>
      <prompt_template>Hello {{name}}</prompt_template>
      <variables>
        <variable name="name" required="true">
          <type>text</type> <label>...</label> <default>...</default>
          <options><option value="a">A</option></options>
          <labels><label value="0">Low</label></labels>
          <validation><min_length>2</min_length></validation>
        </variable>
      </variables>
      <ui_configuration>
        <theme>...</theme> <layout>...</layout>
        <section name="Main" order="1" collapsible="true">
          <fields>name, tone</fields>
        </section>
      </ui_configuration>
    </metaprompt>
"""

import logging
import re
import xml.etree.ElementTree as ET

from metaprompt.exceptions import ParseError
from metaprompt.schema.models import (
    Metadata,
    OptionDef,
    Schema,
    SectionDef,
    UIConfig,
    ValidationRules,
    VariableDef,
)

logger = logging.getLogger(__name__)

_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def parse_schema_text(text: str | bytes, source: str = "<string>") -> Schema:
    """
    Parse raw XML text into a Schema.

    Params:
        text: XML document content
        source: Name used in error messages (usually the file path)

    Returns:
        The parsed Schema

    Raises:
        ParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        line, column = e.position if e.position else (None, None)
        raise ParseError(source, str(e), line=line, column=column) from e

    schema = parse_schema(root)
    logger.debug(
        "Parsed schema '%s' from %s with %d variables",
        schema.metadata.name,
        source,
        len(schema.variables),
    )
    return schema


def parse_schema(root: ET.Element) -> Schema:
    """
    Build a Schema from an already parsed element tree.

    Params:
        root: Root element of the schema document

    Returns:
        The Schema with all missing optional parts set to their defaults
    """
    return Schema(
        metadata=extract_metadata(root),
        prompt_template=extract_prompt_template(root),
        variables=extract_variables(root),
        ui_config=extract_ui_config(root),
    )


def extract_metadata(root: ET.Element) -> Metadata:
    """Read the metadata block; an absent block yields empty metadata."""
    metadata = _find_element(root, "metadata")
    if metadata is None:
        return Metadata()

    return Metadata(
        name=_child_text(metadata, "name"),
        description=_child_text(metadata, "description"),
        version=_child_text(metadata, "version"),
        tags=[element_text(tag) for tag in metadata.iter("tag")],
    )


def extract_prompt_template(root: ET.Element) -> str:
    """Read the trimmed template text, or an empty string when absent."""
    template = _find_element(root, "prompt_template")
    if template is None:
        return ""
    return element_text(template).strip()


def extract_variables(root: ET.Element) -> dict[str, VariableDef]:
    """
    Read every variable element in document order.

    A variable without a name is skipped. A repeated name replaces the
    earlier definition while keeping its original position.

    Params:
        root: Root element of the schema document

    Returns:
        Mapping of variable name to definition, in declaration order
    """
    variables: dict[str, VariableDef] = {}
    for element in root.iter("variable"):
        name = element.get("name")
        if not name:
            logger.warning("Skipping variable without a name attribute")
            continue
        if name in variables:
            logger.debug("Variable '%s' is declared more than once", name)
        variables[name] = extract_variable(element)
    return variables


def extract_variable(element: ET.Element) -> VariableDef:
    """Read one variable element into a VariableDef."""
    name = element.get("name", "")

    options = [
        OptionDef(
            value=option.get("value") or element_text(option),
            label=element_text(option),
        )
        for option in element.iter("option")
    ]

    validation = None
    validation_element = element.find(".//validation")
    if validation_element is not None:
        validation = ValidationRules(
            min_length=_child_text(validation_element, "min_length"),
            max_length=_child_text(validation_element, "max_length"),
        )

    return VariableDef(
        name=name,
        required=element.get("required") == "true",
        type=_child_text(element, "type") or "text",
        label=_child_text(element, "label") or name,
        placeholder=_child_text(element, "placeholder"),
        default=_child_text(element, "default"),
        min=_child_text(element, "min") or None,
        max=_child_text(element, "max") or None,
        step=_child_text(element, "step") or None,
        options=options,
        labels=extract_range_labels(element, name),
        validation=validation,
    )


def extract_range_labels(element: ET.Element, name: str = "") -> dict[int, str]:
    """
    Read the sparse tick captions of a range variable.

    Params:
        element: The variable element
        name: Variable name for log messages

    Returns:
        Caption per integer position, in document order (sorted at render time)
    """
    labels: dict[int, str] = {}
    for label in element.findall(".//labels/label"):
        position = label.get("value")
        try:
            labels[int(position)] = element_text(label)
        except (TypeError, ValueError):
            logger.warning(
                "Ignoring range label with non-integer value %r in variable '%s'",
                position,
                name,
            )
    return labels


def extract_ui_config(root: ET.Element) -> UIConfig | None:
    """Read the optional UI configuration; None means unsectioned layout."""
    ui_config = _find_element(root, "ui_configuration")
    if ui_config is None:
        return None

    sections = []
    for section in ui_config.iter("section"):
        fields_element = section.find("fields")
        fields = []
        if fields_element is not None:
            fields = [
                field.strip()
                for field in element_text(fields_element).split(",")
                if field.strip()
            ]
        sections.append(
            SectionDef(
                name=section.get("name", ""),
                order=_parse_order(section.get("order")),
                collapsible=section.get("collapsible") == "true",
                fields=fields,
            )
        )

    return UIConfig(
        theme=_child_text(ui_config, "theme") or "default",
        layout=_child_text(ui_config, "layout") or "vertical",
        sections=sections,
    )


def element_text(element: ET.Element) -> str:
    """Concatenated text of an element and all its descendants."""
    return "".join(element.itertext())


def _find_element(root: ET.Element, tag: str) -> ET.Element | None:
    if root.tag == tag:
        return root
    return root.find(f".//{tag}")


def _child_text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None:
        return ""
    return element_text(child)


def _parse_order(value: str | None) -> int:
    # Leading-integer parse; anything unparsable sorts as 0
    match = _LEADING_INT_PATTERN.match(value or "")
    return int(match.group(1)) if match else 0
