from cdeclgen.examples import build_example_geometry_plan
from cdeclgen.plan import render_declarations


def test_build_example_plan_has_expected_declarations():
    plan = build_example_geometry_plan(coordinates=2)
    assert plan.name == "geometry"
    assert plan.include_guard == "GEOMETRY_H"
    assert len(plan.declarations) == 3
    assert all(d.comment for d in plan.declarations)


def test_zero_coordinates_gives_empty_struct():
    rendered = render_declarations(build_example_geometry_plan(coordinates=0))
    assert rendered[0] == "typedef struct Point{} Point;"
