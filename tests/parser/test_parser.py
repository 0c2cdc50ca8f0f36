# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the TSX component parser."""

from pathlib import Path

import pytest

from tsxprops.model.entities import Component, ExpandProps, NamedProps
from tsxprops.model.types import (
    AliasType,
    ArrayType,
    IntersectionType,
    LiteralType,
    ObjectType,
    PrimitiveType,
    PrimitiveTypeRef,
    Property,
    UnionType,
)
from tsxprops.parser.parser import ComponentParser, ParseError, UnexpectedTokenError, parse, parse_type

DATA_DIR = Path(__file__).parent.parent / "data"

# ###############
# Test Helpers
# ###############


def _parse(source: str) -> Component:
    """Parse a source string that is expected to export a component."""
    component = parse(source)
    assert component is not None
    return component


def _parse_file(relative: str) -> Component | None:
    return parse((DATA_DIR / relative).read_text(encoding="utf-8"))


def _primitive(primitive: PrimitiveType) -> PrimitiveTypeRef:
    return PrimitiveTypeRef(primitive=primitive)


def _object(*props: Property) -> ObjectType:
    obj = ObjectType()
    for prop in props:
        obj.insert(prop)
    return obj


def _props_type(component: Component) -> ObjectType:
    assert isinstance(component.props.type, ObjectType)
    return component.props.type


# ###############
# No Component
# ###############


class TestNoComponent:
    def test_empty_source(self) -> None:
        assert parse("") is None

    def test_source_without_export(self) -> None:
        assert parse("type Props = { a: number };\nconst Local = (props: Props) => null;") is None

    @pytest.mark.parametrize(
        "source",
        [
            "export const value = 42;",
            "export const ONE: number = 1;",
            "export const sum = (1 + 2);",
            "export const Memo = React.memo(Inner);",
            "export default Button;",
            "export class Button {}",
            "export { Button };",
            "export * from './button';",
            "export const",
        ],
    )
    def test_export_that_is_not_a_component(self, source: str) -> None:
        assert parse(source) is None

    def test_scan_continues_past_non_component_exports(self) -> None:
        source = "export const SIZE = 3;\nexport default SIZE;\nexport const Panel = () => null;"
        assert _parse(source).name == "Panel"

    def test_module_of_values(self) -> None:
        assert _parse_file("components/theme.tsx") is None


# ###############
# Component Forms
# ###############


class TestComponentForms:
    def test_arrow_function_without_parameters(self) -> None:
        component = _parse("export const Footer = () => <div/>")
        assert component == Component(name="Footer", props=ExpandProps())
        assert component.fill_sample() == "{}"
        assert component.props_str() == "{}"

    def test_arrow_function_with_return_annotation(self) -> None:
        component = _parse("export const Title = (props: { text: string }): JSX.Element => null;")
        assert component.name == "Title"
        assert component.expand_str() == "{ text: string }"

    def test_function_expression(self) -> None:
        component = _parse("export const Button = function (props: { label: string }) { return null; };")
        assert component.name == "Button"
        assert isinstance(component.props, ExpandProps)
        assert component.expand_str() == "{ label: string }"

    def test_named_function_expression(self) -> None:
        component = _parse("export const Button = function ButtonImpl() { return null; };")
        assert component == Component(name="Button", props=ExpandProps())

    def test_function_declaration(self) -> None:
        component = _parse("export function Card(props: { title: string }) { return null; }")
        assert component.name == "Card"
        assert component.expand_str() == "{ title: string }"

    def test_default_function_declaration(self) -> None:
        component = _parse("export default function Page() { return null; }")
        assert component == Component(name="Page", props=ExpandProps(), is_default=True)

    @pytest.mark.parametrize(
        "source",
        [
            "export function Card() { return null; }",
            "export const Card = () => null;",
            "export const Card = function () { return null; };",
        ],
    )
    def test_named_export_is_not_default(self, source: str) -> None:
        assert _parse(source).is_default is False

    def test_generic_function_declaration(self) -> None:
        component = _parse("export function List<T>(props: ListProps<T>) { return null; }")
        assert component.props == NamedProps(name="ListProps<T>")

    def test_fc_annotation_without_props(self) -> None:
        component = _parse("export const Box: React.FC = () => null;")
        assert component == Component(name="Box", props=ExpandProps())

    @pytest.mark.parametrize("annotation", ["FC", "VFC", "FunctionComponent", "VoidFunctionComponent", "React.FC"])
    def test_fc_annotation_with_inline_props(self, annotation: str) -> None:
        component = _parse(f"export const Box: {annotation}<{{ size: number }}> = (props) => null;")
        assert component.props == ExpandProps(
            type=_object(Property(name="size", type=_primitive(PrimitiveType.NUMBER)))
        )

    def test_untyped_parameter_gives_empty_props(self) -> None:
        component = _parse("export const Plain = (props) => null;")
        assert component.props == ExpandProps()

    def test_optional_parameter(self) -> None:
        component = _parse("export const Maybe = (props?: { a: number }) => null;")
        assert component.expand_str() == "{ a: number }"

    def test_destructured_parameter(self) -> None:
        source = "type P = { a: number; b: string };\nexport function Pair({ a, b }: P) { return null; }"
        component = _parse(source)
        assert component.props_str() == "P"
        assert component.expand_str() == "{ a: number, b: string }"

    def test_non_alias_props_type(self) -> None:
        component = _parse("export const Either = (props: A | B) => null;")
        assert isinstance(component.props, NamedProps)
        assert component.props_str() == "A|B"
        assert isinstance(component.props.type, UnionType)

    def test_only_first_component_is_returned(self) -> None:
        source = "export const First = () => null;\nexport const Second = () => null;"
        assert _parse(source).name == "First"


# ###############
# Type Declarations and Alias Resolution
# ###############


class TestAliasResolution:
    def test_named_props_resolved_from_alias(self) -> None:
        source = "type X = { a: number; b?: string };\nexport const Y: FC<X> = (props: X) => null;"
        expected = Component(
            name="Y",
            props=NamedProps(
                name="X",
                type=_object(
                    Property(name="a", type=_primitive(PrimitiveType.NUMBER)),
                    Property(name="b", optional=True, type=_primitive(PrimitiveType.STRING)),
                ),
            ),
        )
        assert parse(source) == expected

    def test_exported_type_declaration(self) -> None:
        source = "export type X = { a: number };\nexport const Y = (props: X) => null;"
        assert _parse(source).expand_str() == "{ a: number }"

    def test_generic_type_declaration(self) -> None:
        source = "type Box<T> = { value: T };\nexport const Y = (props: Box) => null;"
        assert _parse(source).expand_str() == "{ value: T }"

    def test_intersection_alias(self) -> None:
        source = "type P = { a: number } & Base;\nexport const Y = (props: P) => null;"
        component = _parse(source)
        assert isinstance(component.props.type, IntersectionType)
        assert component.expand_str() == "{ a: number }&Base"
        assert component.fill_sample() == "{ a: 0 }"

    def test_unresolved_alias_gives_empty_named_props(self) -> None:
        source = 'import { ButtonProps } from "./types";\nexport const Button = (props: ButtonProps) => null;'
        component = _parse(source)
        assert component.props == NamedProps(name="ButtonProps", type=ObjectType())
        assert component.fill_sample() == "{}"

    def test_non_object_alias_is_not_stored(self) -> None:
        source = "type Size = 'small' | 'large';\nexport const Y = (props: Size) => null;"
        assert _parse(source).props == NamedProps(name="Size")

    def test_alias_declared_after_component_is_not_resolved(self) -> None:
        source = "export const Y = (props: X) => null;\ntype X = { a: number };"
        assert _parse(source).props == NamedProps(name="X")

    def test_type_only_import_is_ignored(self) -> None:
        source = 'import { type X } from "./x";\ntype X = { a: number };\nexport const Y = (props: X) => null;'
        assert _parse(source).expand_str() == "{ a: number }"

    def test_type_attribute_in_markup_is_ignored(self) -> None:
        source = 'const b = <button type="button" />;\nexport const Y = () => null;'
        assert _parse(source).name == "Y"


class TestAliasClaiming:
    _SOURCE = (
        "type X = { a: number };\n"
        "export const First: FC<X> = (props: X) => null;\n"
        "export const Second = (props: X) => null;\n"
    )

    def test_claimed_alias_leaves_table(self) -> None:
        parser = ComponentParser(self._SOURCE)
        first = parser.search_component()
        assert first is not None
        assert first.expand_str() == "{ a: number }"
        assert "X" not in parser.aliases
        assert parser.aliases.is_claimed("X")

    def test_second_component_gets_unresolved_alias(self) -> None:
        parser = ComponentParser(self._SOURCE)
        parser.search_component()
        second = parser.search_component()
        assert second is not None
        assert second.name == "Second"
        assert second.props == NamedProps(name="X", type=ObjectType())

    def test_search_after_last_component_returns_none(self) -> None:
        parser = ComponentParser(self._SOURCE)
        parser.search_component()
        parser.search_component()
        assert parser.search_component() is None


class TestForwardReferences:
    _SOURCE = "export const Y = (props: X) => null;\ntype X = { a: number };"

    def test_alias_declared_below_is_resolved(self) -> None:
        component = parse(self._SOURCE, forward_references=True)
        assert component is not None
        assert component.props_str() == "X"
        assert component.expand_str() == "{ a: number }"

    def test_claimed_alias_stays_claimed_on_rescan(self) -> None:
        parser = ComponentParser(self._SOURCE, forward_references=True)
        parser.search_component()
        assert parser.search_component() is None
        assert "X" not in parser.aliases

    def test_backward_references_still_work(self) -> None:
        source = "type X = { a: number };\nexport const Y = (props: X) => null;"
        component = parse(source, forward_references=True)
        assert component is not None
        assert component.expand_str() == "{ a: number }"


# ###############
# Type Expressions
# ###############


class TestTypeExpressions:
    @pytest.mark.parametrize(
        ("source", "primitive"),
        [("number", PrimitiveType.NUMBER), ("string", PrimitiveType.STRING), ("boolean", PrimitiveType.BOOLEAN)],
    )
    def test_primitive(self, source: str, primitive: PrimitiveType) -> None:
        assert parse_type(source) == _primitive(primitive)

    @pytest.mark.parametrize(
        "source",
        [
            "Dispatch<SetStateAction<boolean>>",
            "Record<string, number>",
            "React.ReactNode",
            "React.MouseEvent<HTMLButtonElement>",
            "Map<string, Array<Set<number>>>",
        ],
    )
    def test_alias_text_reproduced(self, source: str) -> None:
        type_ref = parse_type(source)
        assert type_ref == AliasType(name=source)
        assert type_ref.to_str() == source

    def test_array(self) -> None:
        assert parse_type("string[]") == ArrayType(element=_primitive(PrimitiveType.STRING))

    def test_nested_array(self) -> None:
        assert parse_type("number[][]").to_str() == "number[][]"

    def test_array_of_grouped_union(self) -> None:
        type_ref = parse_type("(string | number)[]")
        assert isinstance(type_ref, ArrayType)
        assert isinstance(type_ref.element, UnionType)
        assert type_ref.to_str() == "(string|number)[]"

    def test_union_of_generic_and_name(self) -> None:
        type_ref = parse_type("Dispatch<SetStateAction<boolean>> | OtherType")
        assert type_ref == UnionType(
            members=[AliasType(name="Dispatch<SetStateAction<boolean>>"), AliasType(name="OtherType")]
        )
        assert type_ref.to_str() == "Dispatch<SetStateAction<boolean>>|OtherType"

    def test_union_with_leading_pipe(self) -> None:
        type_ref = parse_type("| 'primary' | 'secondary'")
        assert type_ref == UnionType(members=[LiteralType(text="'primary'"), LiteralType(text="'secondary'")])

    def test_intersection_binds_tighter_than_union(self) -> None:
        type_ref = parse_type("A & B | C")
        assert isinstance(type_ref, UnionType)
        assert isinstance(type_ref.members[0], IntersectionType)
        assert type_ref.to_str() == "A&B|C"

    @pytest.mark.parametrize("source", ["true", "false", "42", "'small'", '"large"'])
    def test_literal(self, source: str) -> None:
        assert parse_type(source) == LiteralType(text=source)

    def test_negative_number_literal(self) -> None:
        assert parse_type("-1") == LiteralType(text="-1")

    def test_type_operator(self) -> None:
        assert parse_type("keyof Props") == AliasType(name="keyof Props")

    def test_grouping(self) -> None:
        assert parse_type("(string)") == _primitive(PrimitiveType.STRING)

    @pytest.mark.parametrize(
        "source",
        [
            "Foo<{ a: string }>",
            "Bar<{}>",
            "Partial<{ a: number; b: string }>",
            "Record<string, { id: number }>",
        ],
    )
    def test_object_type_argument_keeps_brace_spacing(self, source: str) -> None:
        assert parse_type(source) == AliasType(name=source)

    def test_indexed_access(self) -> None:
        obj = parse_type("{ size: Props['size'] }")
        assert obj == _object(Property(name="size", type=AliasType(name="Props['size']")))
        assert obj.sample() == "{ size: null }"

    def test_indexed_access_on_generic(self) -> None:
        assert parse_type("Parameters<F>[0]") == AliasType(name="Parameters<F>[0]")

    def test_indexed_access_on_grouped_union(self) -> None:
        assert parse_type("(A | B)['kind']") == AliasType(name="(A|B)['kind']")

    def test_tuple(self) -> None:
        assert parse_type("[string, number]") == AliasType(name="[string, number]")

    def test_array_of_tuples(self) -> None:
        type_ref = parse_type("[string, number][]")
        assert type_ref == ArrayType(element=AliasType(name="[string, number]"))
        assert type_ref.to_str() == "[string, number][]"


class TestFunctionTypes:
    def test_no_arguments(self) -> None:
        assert parse_type("() => void") == AliasType(name="() => void")

    def test_arguments_reconstructed(self) -> None:
        type_ref = parse_type("(value: string, index: number) => void")
        assert type_ref.to_str() == "(value: string, index: number) => void"

    def test_generic_argument_type(self) -> None:
        type_ref = parse_type("(e: React.MouseEvent<HTMLButtonElement>) => void")
        assert type_ref.to_str() == "(e: React.MouseEvent<HTMLButtonElement>) => void"

    def test_object_argument_reconstructed(self) -> None:
        source = "(opts: { a: number; b: string }) => void"
        assert parse_type(source).to_str() == source

    def test_empty_object_argument(self) -> None:
        assert parse_type("(opts: {}) => void").to_str() == "(opts: {}) => void"

    def test_return_type_parsed_recursively(self) -> None:
        assert parse_type("() => Promise<string[]>").to_str() == "() => Promise<string[]>"

    def test_function_in_union_is_parenthesized(self) -> None:
        type_ref = parse_type("(() => void) | null")
        assert isinstance(type_ref, UnionType)
        assert type_ref.to_str() == "(() => void)|null"

    def test_function_prop_samples_as_null(self) -> None:
        assert parse_type("{ onClick: () => void }").sample() == "{ onClick: null }"


class TestObjectTypes:
    def test_empty_object(self) -> None:
        assert parse_type("{}") == ObjectType()

    def test_optional_property(self) -> None:
        obj = parse_type("{ label?: string }")
        assert isinstance(obj, ObjectType)
        assert obj.properties["label"].optional

    def test_comma_and_semicolon_separators(self) -> None:
        obj = parse_type("{ a: number, b: string; c: boolean }")
        assert isinstance(obj, ObjectType)
        assert list(obj.properties) == ["a", "b", "c"]

    def test_missing_separator_before_next_key(self) -> None:
        obj = parse_type("{\n  node: React<Hoge>\n  size: number\n}")
        assert obj == _object(
            Property(name="node", type=AliasType(name="React<Hoge>")),
            Property(name="size", type=_primitive(PrimitiveType.NUMBER)),
        )

    def test_readonly_modifier_dropped(self) -> None:
        obj = parse_type("{ readonly id: string }")
        assert isinstance(obj, ObjectType)
        assert list(obj.properties) == ["id"]

    def test_property_named_readonly(self) -> None:
        obj = parse_type("{ readonly: boolean }")
        assert isinstance(obj, ObjectType)
        assert list(obj.properties) == ["readonly"]

    def test_keyword_and_quoted_property_names(self) -> None:
        obj = parse_type('{ type: string; "data-id": string }')
        assert isinstance(obj, ObjectType)
        assert set(obj.properties) == {"type", '"data-id"'}

    def test_nested_object(self) -> None:
        obj = parse_type("{ style: { color: string } }")
        assert obj.to_str() == "{ style: { color: string } }"
        assert obj.sample() == '{ style: { color: "" } }'

    def test_later_property_replaces_earlier(self) -> None:
        obj = parse_type("{ a: number; a: string }")
        assert obj == _object(Property(name="a", type=_primitive(PrimitiveType.STRING)))

    def test_rendering_is_idempotent(self) -> None:
        obj = parse_type("{ z: number; a?: string; m: boolean[] }")
        assert obj.to_str() == obj.to_str() == "{ a?: string, m: boolean[], z: number }"
        assert obj.sample() == obj.sample() == '{ a: "", m: [false], z: 0 }'

    def test_generic_field(self) -> None:
        obj = parse_type("{ setOpen: Dispatch<SetStateAction<boolean>>; }")
        assert obj == _object(Property(name="setOpen", type=AliasType(name="Dispatch<SetStateAction<boolean>>")))


# ###############
# Parse Errors
# ###############


class TestParseErrors:
    def test_missing_colon(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_type("{ label string }")
        assert exc_info.value.expected == ("':'",)
        assert exc_info.value.found.value == "string"

    def test_missing_arrow_after_empty_parentheses(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_type("{ onClick: (); }")
        assert exc_info.value.expected == ("'=>'",)

    def test_unterminated_type_arguments(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_type("Foo<Bar")
        assert exc_info.value.expected == ("'>'",)
        assert exc_info.value.found.describe() == "end of input"

    def test_unterminated_object(self) -> None:
        with pytest.raises(ParseError):
            parse_type("{ a: number;")

    def test_unexpected_token_after_property(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            parse_type("{ a: number ) }")

    def test_trailing_tokens(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_type("string number")
        assert exc_info.value.expected == ("end of input",)

    def test_comment_inside_object_type(self) -> None:
        with pytest.raises(ParseError):
            parse_type("{ /** the label */ label: string }")

    def test_missing_parameter_type(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            parse("export const Y = (props: ) => null;")

    def test_error_carries_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("type P = {\n  label string;\n};")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 9
        assert str(exc_info.value) == "Line 2, column 9: Expected ':', got 'string'"


# ###############
# Component Files
# ###############


class TestComponentFiles:
    def test_error_alert(self) -> None:
        component = _parse_file("components/ErrorAlert.tsx")
        assert component is not None
        assert component.name == "ErrorAlert"
        assert component.props_str() == "Props"
        assert component.expand_str() == "{ errorMessage?: string, size: number, timeOut: number }"
        assert component.fill_sample() == '{ errorMessage: "", size: 0, timeOut: 0 }'

    def test_footer(self) -> None:
        component = _parse_file("components/layout/Footer.tsx")
        assert component == Component(name="Footer", props=ExpandProps())

    def test_sidebar(self) -> None:
        component = _parse_file("components/layout/Sidebar.tsx")
        assert component is not None
        assert component.name == "Sidebar"
        props = _props_type(component)
        assert props.properties["setOpen"].type == AliasType(name="Dispatch<SetStateAction<boolean>>")
        assert props.properties["onSelect"].type == AliasType(name="(index: number) => void")
        assert props.properties["items"].type == ArrayType(element=_primitive(PrimitiveType.STRING))
        assert props.properties["header"] == Property(
            name="header", optional=True, type=AliasType(name="React.ReactNode")
        )
        assert component.fill_sample() == '{ header: null, items: [""], onSelect: null, open: false, setOpen: null }'

    def test_broken_props(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            _parse_file("negative/BrokenProps.tsx")
        assert (exc_info.value.line, exc_info.value.column) == (2, 9)
