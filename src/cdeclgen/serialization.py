"""
Serialization helpers for declaration plans.

Provides lossless JSON/YAML round-trip via an intermediate dict
representation. Calls are written as {"op": name, "args": [...]};
lists, strings and ints are written as themselves.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from cdeclgen.errors import PlanError
from cdeclgen.plan import Call, Declaration, Plan
from cdeclgen.sequence import Sequence, to_list


def term_to_dict(term: Any) -> Any:
    if isinstance(term, Call):
        return {"op": term.op, "args": [term_to_dict(a) for a in term.args]}
    if isinstance(term, Sequence):
        return [term_to_dict(t) for t in to_list(term)]
    if isinstance(term, (list, tuple)):
        return [term_to_dict(t) for t in term]
    if isinstance(term, (str, int)) and not isinstance(term, bool):
        return term
    raise PlanError("term_to_dict", "a Call, list, Sequence, str or int", term)


def term_from_dict(d: Any) -> Any:
    if isinstance(d, dict):
        if "op" not in d:
            raise PlanError("term_from_dict", "a call with an 'op' key", d)
        op = d["op"]
        if not isinstance(op, str):
            raise PlanError("term_from_dict", "an operation name string", op)
        args = d.get("args", [])
        if not isinstance(args, list):
            raise PlanError("term_from_dict", "a list of args", args)
        return Call(op=op, args=[term_from_dict(a) for a in args])
    if isinstance(d, list):
        return [term_from_dict(t) for t in d]
    if isinstance(d, (str, int)) and not isinstance(d, bool):
        return d
    raise PlanError("term_from_dict", "a call, list, string or int", d)


def declaration_to_dict(decl: Declaration) -> Dict[str, Any]:
    return {"term": term_to_dict(decl.term), "comment": decl.comment}


def declaration_from_dict(d: Dict[str, Any]) -> Declaration:
    if not isinstance(d, dict) or "term" not in d:
        raise PlanError("declaration_from_dict", "a mapping with a 'term' key", d)
    return Declaration(term=term_from_dict(d["term"]), comment=d.get("comment"))


def plan_to_dict(p: Plan) -> Dict[str, Any]:
    return {
        "name": p.name,
        "include_guard": p.include_guard,
        "includes": list(p.includes),
        "declarations": [declaration_to_dict(d) for d in p.declarations],
    }


def plan_from_dict(d: Dict[str, Any]) -> Plan:
    if not isinstance(d, dict):
        raise PlanError("plan_from_dict", "a mapping", d)
    if "name" not in d:
        raise PlanError("plan_from_dict", "a 'name' key", sorted(d))
    p = Plan(name=str(d["name"]))
    guard = d.get("include_guard")
    if guard is not None and not isinstance(guard, str):
        raise PlanError("plan_from_dict", "an include guard string or null", guard)
    includes = d.get("includes") or []
    if not isinstance(includes, list) or not all(isinstance(h, str) for h in includes):
        raise PlanError("plan_from_dict", "a list of header names", includes)
    declarations = d.get("declarations") or []
    if not isinstance(declarations, list):
        raise PlanError("plan_from_dict", "a list of declarations", declarations)
    p.include_guard = guard
    p.includes = list(includes)
    p.declarations = [declaration_from_dict(x) for x in declarations]
    return p


def plan_to_json(p: Plan) -> str:
    return json.dumps(plan_to_dict(p), sort_keys=True)


def plan_from_json(s: str) -> Plan:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise PlanError("plan_from_json", "a JSON document", str(e)) from e
    return plan_from_dict(d)


def plan_to_yaml(p: Plan) -> str:
    return yaml.safe_dump(plan_to_dict(p), sort_keys=False)


def plan_from_yaml(s: str) -> Plan:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise PlanError("plan_from_yaml", "a YAML document", str(e)) from e
    return plan_from_dict(d)


def load_plan(filename: str) -> Plan:
    """Read a plan from a .json file, or from YAML otherwise."""
    with open(filename, "r", encoding="utf-8") as f:
        text = f.read()
    if filename.endswith(".json"):
        return plan_from_json(text)
    return plan_from_yaml(text)
