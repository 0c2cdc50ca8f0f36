# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for story module rendering."""

from tsxprops.model import Component, ExpandProps, NamedProps, ObjectType, PrimitiveType, PrimitiveTypeRef, Property
from tsxprops.storybook.template import render_story, story_title


def _alert() -> Component:
    props = ObjectType()
    props.insert(Property(name="timeOut", type=PrimitiveTypeRef(primitive=PrimitiveType.NUMBER)))
    props.insert(Property(name="errorMessage", optional=True, type=PrimitiveTypeRef(primitive=PrimitiveType.STRING)))
    return Component(name="ErrorAlert", props=NamedProps(name="Props", type=props))


def test_story_title() -> None:
    assert story_title(_alert()) == "Example/ErrorAlert"
    assert story_title(_alert(), "Feedback") == "Feedback/ErrorAlert"


def test_story_for_named_props() -> None:
    """Alias-typed props import the alias and parameterize the template with it."""
    assert render_story(_alert(), "ErrorAlert") == (
        'import type { Meta, StoryFn } from "@storybook/react";\n'
        'import { ErrorAlert } from "./ErrorAlert";\n'
        'import type { Props } from "./ErrorAlert";\n'
        "\n"
        "export default {\n"
        '  title: "Example/ErrorAlert",\n'
        "  component: ErrorAlert,\n"
        "} as Meta<typeof ErrorAlert>;\n"
        "\n"
        "const Template: StoryFn<Props> = (args) => <ErrorAlert {...args} />;\n"
        "\n"
        "export const Default = Template.bind({});\n"
        'Default.args = { errorMessage: "", timeOut: 0 };\n'
    )


def test_story_for_inline_props() -> None:
    component = Component(name="Footer", props=ExpandProps())
    story = render_story(component, "Footer", title_prefix="Layout")

    assert "import type { Meta, StoryFn }" in story
    assert 'import { Footer } from "./Footer";' in story
    assert story.count("import") == 2
    assert '  title: "Layout/Footer",' in story
    assert "const Template: StoryFn<{}> = (args) => <Footer {...args} />;" in story
    assert story.endswith("Default.args = {};\n")


def test_default_export_is_imported_without_braces() -> None:
    component = Component(name="Page", props=ExpandProps(), is_default=True)
    story = render_story(component, "Page")

    assert 'import Page from "./Page";' in story
    assert "import { Page }" not in story
    assert "component: Page," in story


def test_default_export_with_named_props() -> None:
    component = Component(name="Page", props=NamedProps(name="PageProps"), is_default=True)
    story = render_story(component, "Page")

    assert 'import Page from "./Page";\nimport type { PageProps } from "./Page";\n' in story


def test_non_identifier_alias_is_not_imported() -> None:
    component = Component(name="List", props=NamedProps(name="ListProps<T>"))
    story = render_story(component, "List")

    assert "import type { ListProps<T> }" not in story
    assert "StoryFn<ListProps<T>>" in story
