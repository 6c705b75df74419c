"""Cursor pagination over AppEngine list endpoints."""

import logging
from typing import Any
from urllib.parse import parse_qs, urlsplit

import httpx

from astarte_client.api.appengine import AppEngineClient
from astarte_client.core.errors import APIError

logger = logging.getLogger(__name__)

HTTP_OK = 200


def next_from_token(body: Any) -> str | None:
    """Extract ``from_token`` from the ``links.next`` URL of a page, if any."""
    if not isinstance(body, dict):
        return None
    links = body.get("links")
    if not isinstance(links, dict):
        return None
    next_link = links.get("next")
    if not isinstance(next_link, str):
        return None
    tokens = parse_qs(urlsplit(next_link).query).get("from_token")
    return tokens[0] if tokens else None


def list_all(
    client: AppEngineClient,
    request_path: str,
    query: dict[str, Any] | None = None,
) -> dict[str, list[Any]]:
    """Fetch every page of a list endpoint and concatenate their ``data``."""
    params = dict(query or {})
    data: list[Any] = []
    while True:
        resp = client.http_client().get(request_path, params=params)
        if resp.status_code != HTTP_OK:
            raise APIError(resp.status_code, _decode_body(resp))
        body = _decode_body(resp)
        if not isinstance(body, dict) or not isinstance(body.get("data", []), list):
            raise APIError(resp.status_code, body)
        data.extend(body.get("data", []))
        token = next_from_token(body)
        if token is None:
            return {"data": data}
        logger.debug("Following %s page from_token=%s", request_path, token)
        params["from_token"] = token


def _decode_body(resp: httpx.Response) -> Any:
    """Bodies are usually JSON but may be empty, plain text or truncated."""
    if not resp.content:
        return None
    if resp.headers.get("content-type", "").startswith("application/json"):
        try:
            return resp.json()
        except ValueError:
            return resp.text
    return resp.text
