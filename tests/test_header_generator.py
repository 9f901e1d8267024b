"""
Tests for the C header generator.

Tests cover:
    - Banner, include guard and includes
    - One terminated declaration per plan entry
    - Comment escaping
    - No output when a declaration fails
    - Saving to a file
"""

import pytest
from cdeclgen.backends import generate_header, save_header_file
from cdeclgen.errors import PlanError, TypeMismatchError
from cdeclgen.examples import build_example_geometry_plan
from cdeclgen.plan import Call, Plan
from cdeclgen.serialization import plan_from_yaml


class TestHeaderStructure:
    """Test the overall header layout."""

    def test_full_header(self):
        plan = Plan(name="geometry", include_guard="GEOMETRY_H", includes=["stddef.h"])
        plan.add(
            Call("typedef", ["Point", Call("struct", ["Point", Call("indexedFields", [["int", "int"]])])]),
            comment="Point with two int coordinates",
        )
        assert generate_header(plan) == (
            "/* generated by cdeclgen: geometry */\n"
            "#ifndef GEOMETRY_H\n"
            "#define GEOMETRY_H\n"
            "\n"
            "#include <stddef.h>\n"
            "\n"
            "/* Point with two int coordinates */\n"
            "typedef struct Point{int _0; int _1;} Point;\n"
            "\n"
            "#endif /* GEOMETRY_H */\n"
        )

    def test_without_guard(self):
        plan = Plan(name="bare")
        plan.add(Call("typedef", ["Int", "int"]))
        header = generate_header(plan)
        assert "#ifndef" not in header
        assert "#endif" not in header
        assert header.endswith("typedef int Int;\n")

    def test_empty_plan(self):
        """An empty plan still gives a valid (empty) header."""
        header = generate_header(Plan(name="empty", include_guard="EMPTY_H"))
        assert header.startswith("/* generated by cdeclgen: empty */")
        assert "#endif /* EMPTY_H */" in header

    def test_quoted_include_kept(self):
        plan = Plan(name="p", includes=['"local.h"', "<stdint.h>"])
        header = generate_header(plan)
        assert '#include "local.h"' in header
        assert "#include <stdint.h>" in header

    def test_struct_declaration_terminated(self):
        plan = Plan(name="p")
        plan.add(Call("enum", ["Shape", "CIRCLE, SQUARE"]))
        assert "enum Shape{CIRCLE, SQUARE};" in generate_header(plan)

    def test_comment_cannot_close_early(self):
        plan = Plan(name="p")
        plan.add(Call("typedef", ["Int", "int"]), comment="evil */ comment")
        header = generate_header(plan)
        assert "/* evil * / comment */" in header


class TestHeaderErrors:
    def test_bad_guard(self):
        with pytest.raises(PlanError):
            generate_header(Plan(name="p", include_guard="NOT A MACRO"))

    def test_yaml_list_body_rejected(self):
        plan = plan_from_yaml(
            "name: p\n"
            "declarations:\n"
            "  - term: {op: struct, args: [P, [int, int]]}\n"
        )
        with pytest.raises(TypeMismatchError):
            generate_header(plan)

    def test_bad_include_type(self):
        with pytest.raises(PlanError):
            generate_header(Plan(name="p", includes=[123]))

    def test_bad_guard_type(self):
        with pytest.raises(PlanError):
            generate_header(Plan(name="p", include_guard=5))

    def test_failed_declaration_produces_nothing(self, tmp_path):
        plan = Plan(name="p")
        plan.add(Call("indexedArgs", [-2]))
        target = tmp_path / "p.h"
        with pytest.raises(TypeMismatchError):
            save_header_file(plan, str(target))
        assert not target.exists()


class TestExamplePlan:
    def test_example_header(self):
        header = generate_header(build_example_geometry_plan(coordinates=3))
        assert "typedef struct Point{double _0; double _1; double _2;} Point;" in header
        assert "typedef union {int _0; double _1; const char * _2;} Value;" in header
        assert "enum Shape{SHAPE_CIRCLE, SHAPE_SQUARE};" in header

    def test_yaml_plan_to_header(self):
        plan = plan_from_yaml(
            "name: args\n"
            "declarations:\n"
            "  - term: {op: typedef, args: [Args, {op: anonStruct, args: [{op: indexedFields, args: [[int]]}]}]}\n"
        )
        assert "typedef struct {int _0;} Args;" in generate_header(plan)

    def test_save(self, tmp_path):
        plan = build_example_geometry_plan()
        target = tmp_path / "geometry.h"
        save_header_file(plan, str(target))
        assert target.read_text() == generate_header(plan)
