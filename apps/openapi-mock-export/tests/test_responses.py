import json

import pytest

from openapi_mock_export.document import Operation, Response, parse_document
from openapi_mock_export.errors import ResponseCodeError
from openapi_mock_export.responses import extract_responses, parse_status_code


def _responses(raw: dict) -> dict:
    return Operation.model_validate({"responses": raw}).responses


def test_response_without_content_has_key_query_only() -> None:
    result = extract_responses(_responses({"204": {"description": "No Content"}}), {})

    assert len(result) == 1
    response = result[0]
    assert response.name == "No_Content"
    assert response.code == 204
    assert response.query == "?key=204"
    assert response.headers is None
    assert response.body is None


def test_named_examples_produce_one_response_each() -> None:
    raw = {
        "200": {
            "description": "Pet list",
            "content": {
                "application/json": {
                    "examples": {
                        "empty": {"value": []},
                        "one": {"value": {"id": 1, "name": "Rex"}},
                        "text": {"value": "plain body"},
                        "blank": {"value": ""},
                    }
                }
            },
        }
    }

    result = extract_responses(_responses(raw), {})

    assert [r.query for r in result] == [
        "?key=200&contentType=application/json&name=empty",
        "?key=200&contentType=application/json&name=one",
        "?key=200&contentType=application/json&name=text",
        "?key=200&contentType=application/json&name=blank",
    ]
    assert len({r.query for r in result}) == len(result)
    assert all(r.name == "Pet_list" for r in result)
    assert result[0].body == "[]"
    assert result[1].body == json.dumps({"id": 1, "name": "Rex"}, indent=2)
    assert result[2].body == "plain body"
    assert result[3].body is None
    assert result[1].headers[0].name == "Content-Type"
    assert result[1].headers[0].value == "application/json"


def test_schema_reference_uses_synthesized_example() -> None:
    raw = {
        "201": {
            "description": "Created",
            "content": {
                "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
                "application/xml": {"schema": {"$ref": "#/components/schemas/Unknown"}},
                "text/plain": {"schema": {"type": "string"}},
            },
        }
    }
    table = {"#/components/schemas/Pet": '{\n  "id": 1\n}', "#/components/schemas/Unknown": ""}

    result = extract_responses(_responses(raw), table)

    assert [(r.query, r.body) for r in result] == [
        ("?key=201&contentType=application/json", '{\n  "id": 1\n}'),
        ("?key=201&contentType=application/xml", None),
        ("?key=201&contentType=text/plain", None),
    ]


def test_responses_are_sorted_by_code_and_stable() -> None:
    raw = {
        "500": {"description": "Error"},
        "200": {
            "description": "OK",
            "content": {
                "application/json": {"examples": {"b": {"value": "b"}, "a": {"value": "a"}}},
                "text/plain": {},
            },
        },
        "404": {"description": "Missing"},
    }

    result = extract_responses(_responses(raw), {})

    assert [r.code for r in result] == [200, 200, 200, 404, 500]
    assert [r.query for r in result[:3]] == [
        "?key=200&contentType=application/json&name=b",
        "?key=200&contentType=application/json&name=a",
        "?key=200&contentType=text/plain",
    ]


def test_yaml_integer_status_codes_are_accepted() -> None:
    result = extract_responses(_responses({200: {"description": "OK"}}), {})

    assert result[0].code == 200
    assert result[0].query == "?key=200"


def test_non_numeric_status_code_is_fatal() -> None:
    with pytest.raises(ResponseCodeError):
        extract_responses(_responses({"default": {"description": "Unexpected"}}), {})


def test_component_references_are_resolved() -> None:
    document = parse_document(
        {
            "openapi": "3.0.1",
            "info": {"title": "Pets"},
            "components": {
                "responses": {
                    "NotFound": {
                        "description": "Not found",
                        "content": {
                            "application/json": {
                                "examples": {"missing": {"$ref": "#/components/examples/Missing"}}
                            }
                        },
                    }
                },
                "examples": {"Missing": {"value": {"error": "missing"}}},
            },
        }
    )

    result = extract_responses(
        _responses({"404": {"$ref": "#/components/responses/NotFound"}}), {}, document
    )

    assert result[0].name == "Not_found"
    assert json.loads(result[0].body) == {"error": "missing"}


@pytest.mark.parametrize("key", [" 200", "200 ", "2_00", "２００", "2xx"])
def test_loosely_numeric_status_codes_are_fatal(key: str) -> None:
    with pytest.raises(ResponseCodeError):
        extract_responses({key: Response(description="OK")}, {})


def test_signed_status_code_parses_like_an_integer() -> None:
    assert parse_status_code("+200") == 200
