"""Schema list aggregation tests."""

from __future__ import annotations

import pytest
from gschema_builder.schema_definitions import (
    DefinitionError,
    Enumeration,
    FlagSet,
    KeyRange,
    SchemaBuilder,
)
from gschema_builder.schema_list import build_schema_list, define_schema_list


def test_single_typed_key_document() -> None:
    builder = SchemaBuilder.create("org.example.app").key("count", "i", default=5)

    assert define_schema_list([builder]) == (
        '<schemalist><schema id="org.example.app">'
        '<key name="count" type="i"><default><![CDATA[ 5 ]]></default></key>'
        "</schema></schemalist>"
    )


def test_shared_enumeration_instance_is_declared_once() -> None:
    mode = Enumeration("org.example.Mode", ["light", "dark"])
    first = SchemaBuilder.create("org.example.first").key("mode", mode, default="dark")
    second = SchemaBuilder.create("org.example.second").key("mode", mode, default="light")

    schema_list = build_schema_list([first, second])
    document = define_schema_list([first, second])

    assert schema_list.enumerations == (mode,)
    assert document.count("<enum ") == 1


def test_distinct_instances_sharing_an_id_are_declared_separately() -> None:
    first = SchemaBuilder.create("org.example.first").key(
        "mode", Enumeration("org.example.Mode", ["light"]), default="light"
    )
    second = SchemaBuilder.create("org.example.second").key(
        "mode", Enumeration("org.example.Mode", ["light"]), default="light"
    )

    document = define_schema_list([first, second])

    assert document.count('<enum id="org.example.Mode">') == 2


def test_declarations_precede_schemas_enums_before_flags() -> None:
    features = FlagSet("org.example.Features", ["search", "sync"])
    mode = Enumeration("org.example.Mode", ["light", "dark"])
    builder = (
        SchemaBuilder.create("org.example.app")
        .key("features", features, default=["search", "sync"])
        .key("mode", mode, default="light")
    )

    document = define_schema_list([builder])

    assert document.index("<enum ") < document.index("<flags ") < document.index("<schema ")
    assert (
        '<flags id="org.example.Features">'
        '<value nick="search" value="1" /><value nick="sync" value="2" /></flags>'
    ) in document
    assert "<![CDATA[ ['search', 'sync'] ]]>" in document


def test_schemas_follow_the_supplied_order() -> None:
    builders = [SchemaBuilder.create(f"org.example.s{index}") for index in (3, 1, 2)]

    document = define_schema_list(builders)

    assert document == (
        '<schemalist><schema id="org.example.s3" /><schema id="org.example.s1" />'
        '<schema id="org.example.s2" /></schemalist>'
    )


def test_full_key_metadata_is_rendered() -> None:
    mode = Enumeration("org.example.Mode", ["light", "dark"])
    builder = (
        SchemaBuilder.create("org.example.app", path="/org/example/app/", gettext_domain="app")
        .key(
            "zoom",
            "d",
            default=1.0,
            summary="Zoom level",
            description="Magnification factor",
            range=KeyRange(min=0.5, max=4),
        )
        .key("mode", mode, default="dark", summary="Theme")
    )

    assert define_schema_list([builder], gettext_domain="my-app") == (
        '<schemalist gettextDomain="my-app">'
        '<enum id="org.example.Mode">'
        '<value nick="light" value="0" /><value nick="dark" value="1" />'
        "</enum>"
        '<schema id="org.example.app" path="/org/example/app/" gettextDomain="app">'
        '<key name="zoom" type="d"><default><![CDATA[ 1.0 ]]></default>'
        "<summary>Zoom level</summary><description>Magnification factor</description>"
        '<range min="0.5" max="4" /></key>'
        '<key name="mode" enum="org.example.Mode"><default><![CDATA[ \'dark\' ]]></default>'
        "<summary>Theme</summary></key>"
        "</schema></schemalist>"
    )


def test_range_with_one_bound_emits_only_that_bound() -> None:
    builder = SchemaBuilder.create("org.example.app").key(
        "count", "u", default=1, range=KeyRange(min=1.0)
    )

    assert '<range min="1" />' in define_schema_list([builder])


def test_empty_schema_list_is_rejected() -> None:
    with pytest.raises(DefinitionError):
        define_schema_list([])


def test_non_builder_members_are_rejected() -> None:
    with pytest.raises(DefinitionError, match="SchemaBuilder"):
        build_schema_list(["org.example.app"])  # type: ignore[list-item]
