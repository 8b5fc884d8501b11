"""Tests for the Rust declaration writer."""

from __future__ import annotations

import pytest

from cdd_rust.config import WriterConfig
from cdd_rust.extractor import extract_from_source
from cdd_rust.models import Model, Project, Variable, VariableType
from cdd_rust.writers import RustWriter, variable_type_to_rust_type, write_model, write_project


class TestVariableTypeToRustType:
    @pytest.mark.parametrize(
        ("variable_type", "expected"),
        [
            (VariableType.string(), "String"),
            (VariableType.boolean(), "bool"),
            (VariableType.floating(), "f64"),
            (VariableType.integer(), "i32"),
            (VariableType.complex("Person"), "Person"),
            (VariableType.array(VariableType.integer()), "Vec<i32>"),
            (VariableType.array(VariableType.array(VariableType.string())), "Vec<Vec<String>>"),
        ],
    )
    def test_rendering(self, variable_type: VariableType, expected: str) -> None:
        assert variable_type_to_rust_type(variable_type) == expected


class TestWriteModel:
    def test_fields_in_order(self) -> None:
        model = Model(
            name="Dog",
            vars=[
                Variable(name="name", variable_type=VariableType.string()),
                Variable(name="age", variable_type=VariableType.floating()),
            ],
        )
        assert write_model(model) == (
            "pub struct Dog {\n    pub name: String,\n    pub age: f64,\n}"
        )

    def test_empty_model(self) -> None:
        assert write_model(Model(name="Marker")) == "pub struct Marker {}"

    def test_optional_wraps_rendered_type(self) -> None:
        model = Model(
            name="A",
            vars=[
                Variable(
                    name="tags",
                    optional=True,
                    variable_type=VariableType.array(VariableType.string()),
                )
            ],
        )
        assert "pub tags: Option<Vec<String>>," in write_model(model)

    def test_custom_visibility_and_indent(self) -> None:
        writer = RustWriter(visibility="", indent=2)
        model = Model(name="A", vars=[Variable(name="x", variable_type=VariableType.boolean())])
        assert writer.write_model(model) == "struct A {\n  x: bool,\n}"

    def test_from_config(self) -> None:
        writer = RustWriter.from_config(WriterConfig(visibility="pub(crate)", indent=8))
        model = Model(name="A", vars=[Variable(name="x", variable_type=VariableType.boolean())])
        assert writer.write_model(model) == (
            "pub(crate) struct A {\n        pub(crate) x: bool,\n}"
        )


class TestWriteProject:
    def test_concatenates_models(self) -> None:
        project = Project(
            models=[
                Model(name="A"),
                Model(name="B", vars=[Variable(name="x", variable_type=VariableType.integer())]),
            ]
        )
        assert write_project(project) == (
            "pub struct A {}\n\npub struct B {\n    pub x: i32,\n}\n"
        )

    def test_empty_project(self) -> None:
        assert write_project(Project()) == ""


class TestRoundTrip:
    def test_flat_struct_survives(self) -> None:
        source = """
        // leading comment
        struct Dog {
            name: String,   // trailing comment
            age: f64,
        }
        """
        output = write_project(Project(models=extract_from_source(source)))
        assert "name: String" in output
        assert "age: f64" in output
        assert output.index("name: String") < output.index("age: f64")

    def test_output_extracts_to_same_models(self) -> None:
        models = extract_from_source("struct A { a: String, b: bool, c: Person }\nstruct B;")
        regenerated = extract_from_source(write_project(Project(models=models)))
        assert regenerated == models

    def test_integer_width_normalizes(self) -> None:
        models = extract_from_source("struct A { big: u64 }")
        assert "pub big: i32," in write_model(models[0])

    def test_legacy_optional_loses_inner_type(self) -> None:
        models = extract_from_source("struct A { nick: Option<String> }")
        assert "pub nick: Option<None>," in write_model(models[0])

    def test_faithful_optional_keeps_inner_type(self) -> None:
        models = extract_from_source(
            "struct A { nick: Option<String>, ids: Vec<i64> }", faithful_generics=True
        )
        output = write_model(models[0])
        assert "pub nick: Option<String>," in output
        assert "pub ids: Vec<i32>," in output
