#!/usr/bin/env python3
"""
Demo: Generate a C header and statement chains.

Shows the example plan as YAML, the header it renders to, and a chain
of statement prefixes.
"""

from cdeclgen.backends import generate_header, save_header_file
from cdeclgen.chaining import chain, chain_expr_stmt, introduce_non_null_ptr_to_stmt, introduce_var_to_stmt
from cdeclgen.examples import build_example_geometry_plan
from cdeclgen.logging_utils import setup_logging
from cdeclgen.serialization import plan_to_yaml


def main():
    setup_logging()

    plan = build_example_geometry_plan(coordinates=3)

    print("=" * 80)
    print("HEADER GENERATOR DEMO")
    print("=" * 80)

    print("\nPLAN (YAML):")
    print("-" * 80)
    print(plan_to_yaml(plan))

    print("HEADER:")
    print("-" * 80)
    print(generate_header(plan))

    filename = f"{plan.name}.h"
    save_header_file(plan, filename)
    print(f"Saved to: {filename}")

    print("\nSTATEMENT CHAIN:")
    print("-" * 80)
    statement = chain(
        [
            introduce_var_to_stmt("double x = 5.0", "y = 7.0", suppress_shadow=False),
            introduce_non_null_ptr_to_stmt("double", "x_ptr", "&x", suppress_shadow=False),
            chain_expr_stmt('printf("%f\\n", *x_ptr)', suppress_shadow=False),
        ],
        'puts("done");',
        indent="    ",
    )
    print("for (int i = 0; i < 10; i++)")
    print("\n".join("    " + line for line in statement.splitlines()))
    print("=" * 80)


if __name__ == "__main__":
    main()
