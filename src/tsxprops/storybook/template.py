# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of a Storybook story module for a parsed component."""

from tsxprops.model.entities import Component, NamedProps

# ###############
# Public Interface
# ###############


def story_title(component: Component, title_prefix: str = "Example") -> str:
    """Return the story title shown in the Storybook sidebar, e.g. ``Example/Button``."""
    return f"{title_prefix}/{component.name}"


def render_story(component: Component, module_name: str, title_prefix: str = "Example") -> str:
    """Render a story module that previews *component* with placeholder props.

    The props type (alias name or inline object type) parameterizes the
    story template, and the sampled props pre-fill the default story.

    Args:
        component: The parsed component.
        module_name: Import path of the component module relative to the
            story file, without extension (e.g. ``Button``).
        title_prefix: Prefix of the story title.

    Returns:
        The TSX source of the story module.
    """
    name = component.name
    binding = name if component.is_default else f"{{ {name} }}"
    lines = [
        'import type { Meta, StoryFn } from "@storybook/react";',
        f'import {binding} from "./{module_name}";',
    ]
    if isinstance(component.props, NamedProps) and component.props.name.isidentifier():
        lines.append(f'import type {{ {component.props.name} }} from "./{module_name}";')
    lines += [
        "",
        "export default {",
        f'  title: "{story_title(component, title_prefix)}",',
        f"  component: {name},",
        f"}} as Meta<typeof {name}>;",
        "",
        f"const Template: StoryFn<{component.props_str()}> = (args) => <{name} {{...args}} />;",
        "",
        "export const Default = Template.bind({});",
        f"Default.args = {component.fill_sample()};",
    ]
    return "\n".join(lines) + "\n"
