"""
Example plan builder.

Builds a small geometry header: a Point typedef, an anonymous
value union and a Shape enum. Used by the demo script and the tests.
"""
from cdeclgen.plan import Call, Plan


def build_example_geometry_plan(coordinates: int = 2) -> Plan:
    plan = Plan(name="geometry", include_guard="GEOMETRY_H", includes=["stddef.h"])

    coordinate_types = ["double"] * coordinates

    # typedef struct Point{double _0; double _1;} Point;
    plan.add(
        Call("typedef", [
            "Point",
            Call("struct", ["Point", Call("indexedFields", [coordinate_types])]),
        ]),
        comment=f"Point with {coordinates} coordinates",
    )

    # typedef union {int _0; double _1; const char * _2;} Value;
    plan.add(
        Call("typedef", [
            "Value",
            Call("anonUnion", [Call("indexedFields", [["int", "double", "const char *"]])]),
        ]),
        comment="Untagged value",
    )

    plan.add(
        Call("enum", ["Shape", "SHAPE_CIRCLE, SHAPE_SQUARE"]),
        comment="Shape kinds",
    )

    return plan
