"""Turn an operation's declared responses into concrete example responses."""

from __future__ import annotations

import re
from typing import Mapping

from .document import ApiDocument, MediaType, Response, example_value
from .errors import ResponseCodeError
from .models import HeaderSpec, ResponseSpec
from .naming import sanitize


STATUS_CODE = re.compile(r"[+-]?[0-9]+")


def parse_status_code(key: str) -> int:
    if not STATUS_CODE.fullmatch(key):
        raise ResponseCodeError(key)
    return int(key)


def extract_responses(
    responses: Mapping[str, Response],
    schema_examples: Mapping[str, str],
    document: ApiDocument | None = None,
) -> list[ResponseSpec]:
    """Expand every status code, content type and named example into a ResponseSpec.

    The result is sorted by status code. Responses sharing a code keep the
    order in which they were produced.
    """

    extracted: list[ResponseSpec] = []
    for key, response in responses.items():
        code = parse_status_code(key)
        if document is not None:
            response = document.resolve_response(response)
        name = sanitize(response.description)

        if not response.content:
            extracted.append(ResponseSpec(name=name, code=code, query=f"?key={code}"))
            continue

        for content_type, media in response.content.items():
            if media is None:
                continue
            extracted.extend(
                _content_responses(name, code, key, content_type, media, schema_examples, document)
            )

    return sorted(extracted, key=lambda item: item.code)


def _content_responses(
    name: str,
    code: int,
    key: str,
    content_type: str,
    media: MediaType,
    schema_examples: Mapping[str, str],
    document: ApiDocument | None,
) -> list[ResponseSpec]:
    headers = [HeaderSpec(name="Content-Type", value=content_type)]
    query = f"?key={key}&contentType={content_type}"

    if media.examples:
        results = []
        for example_name, example in media.examples.items():
            body = None
            if example is not None:
                if document is not None:
                    example = document.resolve_example(example)
                value = example_value(example.value)
                body = value.render() if value is not None else None
            results.append(
                ResponseSpec(
                    name=name,
                    code=code,
                    query=f"{query}&name={example_name}",
                    headers=list(headers),
                    body=body or None,
                )
            )
        return results

    body = None
    if media.schema_ is not None and media.schema_.ref:
        body = schema_examples.get(media.schema_.ref) or None
    return [ResponseSpec(name=name, code=code, query=query, headers=headers, body=body)]
