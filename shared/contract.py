"""
OpenAPI contract helpers for the jsonplaceholder API suite.

The contract file describes only the endpoints and fields the suite relies
on. Payloads are validated with ``jsonschema`` against the response schema
for an endpoint/status pair.
"""

from __future__ import annotations

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
import yaml

CONTRACT_PATH = Path(__file__).resolve().parent / "contracts" / "jsonplaceholder.yaml"


@lru_cache(maxsize=1)
def load_openapi_spec() -> dict[str, Any]:
    """Load the raw OpenAPI document from disk."""
    with CONTRACT_PATH.open("r", encoding="utf-8") as contract_file:
        return yaml.safe_load(contract_file)


@lru_cache(maxsize=1)
def _load_jsonschema_ready_spec() -> dict[str, Any]:
    """
    Return a JSON-schema-friendly copy of the OpenAPI spec.

    OpenAPI 3.0 uses `nullable: true`, while jsonschema expects an explicit
    `null` type.
    """
    spec_copy = copy.deepcopy(load_openapi_spec())
    convert_nullable_fields_in_place(spec_copy)
    return spec_copy


def convert_nullable_fields_in_place(node: Any) -> None:
    """
    Recursively convert OpenAPI `nullable` into jsonschema-compatible forms.

    Rules used:
    - `type: X` + `nullable: true` becomes `type: [X, "null"]`.
    - `$ref` + `nullable: true` becomes `anyOf: [{$ref: ...}, {type: "null"}]`.
    """
    if isinstance(node, dict):
        for value in list(node.values()):
            convert_nullable_fields_in_place(value)

        if node.get("nullable") is True:
            node.pop("nullable", None)

            if "type" in node:
                node_type = node["type"]
                if isinstance(node_type, list):
                    if "null" not in node_type:
                        node_type.append("null")
                else:
                    node["type"] = [node_type, "null"]
            elif "$ref" in node:
                ref_value = node.pop("$ref")
                node["anyOf"] = [{"$ref": ref_value}, {"type": "null"}]
            else:
                node["anyOf"] = [{"type": "null"}]

    elif isinstance(node, list):
        for item in node:
            convert_nullable_fields_in_place(item)


def response_schema_for(path_template: str, method: str, status_code: int) -> dict[str, Any]:
    """Extract the JSON response schema for an endpoint/status pair."""
    operation = _load_jsonschema_ready_spec()["paths"][path_template][method.lower()]
    response = operation["responses"][str(status_code)]
    return response["content"]["application/json"]["schema"]


def assert_matches_contract(
    payload: Any,
    *,
    path_template: str,
    method: str,
    status_code: int,
) -> None:
    """
    Validate payload against the contract with readable error context.

    Raises:
        AssertionError: If the payload violates the response schema.
    """
    # Root schema so local refs like `#/components/schemas/User` resolve.
    validation_schema = copy.deepcopy(response_schema_for(path_template, method, status_code))
    validation_schema["components"] = _load_jsonschema_ready_spec()["components"]

    try:
        jsonschema.validate(
            instance=payload,
            schema=validation_schema,
            format_checker=jsonschema.FormatChecker(),
        )
    except jsonschema.ValidationError as exc:
        compact_payload = json.dumps(payload, indent=2, sort_keys=True)
        raise AssertionError(
            "Contract validation failed.\n"
            f"Endpoint: {method.upper()} {path_template}\n"
            f"Expected response status: {status_code}\n"
            f"Validation path: {'/'.join(str(part) for part in exc.path) or '<root>'}\n"
            f"Message: {exc.message}\n"
            f"Payload:\n{compact_payload}"
        ) from exc
