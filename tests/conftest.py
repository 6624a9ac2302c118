"""
Shared test fixtures and utilities for the metaprompt test suite.
"""

import pytest

from metaprompt.parsing import parse_schema_text

SAMPLE_SCHEMA_XML = """<?xml version="1.0" encoding="UTF-8"?>
<metaprompt>
  <metadata>
    <name>Article writer</name>
    <description>Writes a blog article</description>
    <version>1.2</version>
    <tags>
      <tag>writing</tag>
      <tag>blog</tag>
    </tags>
  </metadata>
  <prompt_template><![CDATA[
Write an article about {{topic}}.
Tone: {{tone}}
{{#keywords}}Keywords: {{keywords}}{{/keywords}}


{{#include_sources}}Cite your sources.{{/include_sources}}
Length: {{length}} words. Creativity: {{creativity}}
]]></prompt_template>
  <variables>
    <variable name="topic" required="true">
      <type>text</type>
      <label>Topic</label>
      <placeholder>e.g. solar energy</placeholder>
      <validation>
        <min_length>3</min_length>
        <max_length>80</max_length>
      </validation>
    </variable>
    <variable name="tone">
      <type>select</type>
      <label>Tone</label>
      <default>casual</default>
      <options>
        <option value="formal">Formal</option>
        <option value="casual">Casual</option>
      </options>
    </variable>
    <variable name="keywords">
      <type>checkbox_group</type>
      <label>Keywords</label>
      <default>["seo"]</default>
      <options>
        <option value="seo">SEO</option>
        <option value="news">News</option>
        <option value="howto">How-to</option>
      </options>
    </variable>
    <variable name="include_sources">
      <type>checkbox</type>
      <label>Include sources</label>
      <default>true</default>
    </variable>
    <variable name="length">
      <type>number</type>
      <label>Length</label>
      <default>800</default>
      <min>100</min>
      <max>3000</max>
      <step>50</step>
    </variable>
    <variable name="creativity">
      <type>range</type>
      <label>Creativity</label>
      <min>1</min>
      <max>5</max>
      <labels>
        <label value="5">Wild</label>
        <label value="1">Strict</label>
        <label value="3">Balanced</label>
      </labels>
    </variable>
  </variables>
  <ui_configuration>
    <theme>dark</theme>
    <layout>horizontal</layout>
    <section name="Style" order="2" collapsible="true">
      <fields>tone, creativity, missing_field</fields>
    </section>
    <section name="Content" order="1">
      <fields>topic, keywords, include_sources, length</fields>
    </section>
  </ui_configuration>
</metaprompt>
"""


MINIMAL_SCHEMA_XML = """<metaprompt>
  <prompt_template>Hello {{who}}</prompt_template>
  <variable name="who"><type>text</type></variable>
</metaprompt>
"""


@pytest.fixture
def sample_schema_xml():
    """Complete schema document exercising every section of the format."""
    return SAMPLE_SCHEMA_XML


@pytest.fixture
def sample_schema(sample_schema_xml):
    """Parsed sample schema."""
    return parse_schema_text(sample_schema_xml, source="sample.xml")


@pytest.fixture
def minimal_schema():
    """Schema without metadata or UI configuration."""
    return parse_schema_text(MINIMAL_SCHEMA_XML)


@pytest.fixture
def schema_file(tmp_path, sample_schema_xml):
    """Sample schema written to a temporary .xml file."""
    path = tmp_path / "article.xml"
    path.write_text(sample_schema_xml, encoding="utf-8")
    return path
