"""
cdeclgen: build-time generators for C declarations and statement prefixes.

Layers, leaves first:
    sequence       - Nil/Cons sequences of opaque terms, Fragment text
    dispatch       - matching on sequences, iterative traversal
    indexed        - (T _0, U _1) parameter lists, fields, initializers, args
    declarations   - braces, typedef, struct/union/enum
    chaining       - C statement chaining prefixes
    guards         - the same protocol as Python context managers
    symbols        - position-disambiguated identifier synthesis
    registry       - every generator by name, arity checked
    plan           - headers described as data
    backends       - plan -> C header text

Everything here runs at build time. Generated text is handed to the C
compiler unchanged.
"""

__version__ = "0.1.0"
