"""Navigation URL helpers: the contract with the external router.

Filters travel as a single ``f`` query parameter: sorted-key compact JSON,
base64url-encoded without padding, so equal filters always yield equal URLs.
"""

from __future__ import annotations

import base64
import binascii
import json
from urllib.parse import urlencode

from pydantic import ValidationError

from app.models.filters import MetricFilter

EXPLORE_PATH = "/explore"


def encode_filter(filters: MetricFilter) -> str:
    payload = json.dumps(
        filters.model_dump(mode="json", exclude_none=True),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")


def decode_filter(encoded: str | None) -> MetricFilter:
    """Inverse of encode_filter. Anything unreadable decodes to the default filter."""
    if not encoded:
        return MetricFilter()
    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
        return MetricFilter.model_validate(json.loads(raw))
    except (binascii.Error, UnicodeError, ValueError, ValidationError):
        return MetricFilter()


def _extra_params(role: str | None, origin: str | None) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    if role:
        params.append(("role", role))
    if origin:
        params.append(("origin", origin))
    return params


def build_explore_url(
    filters: MetricFilter,
    *,
    metric: str | None = None,
    api: str | None = None,
    role: str | None = None,
    origin: str | None = None,
    explore_path: str = EXPLORE_PATH,
) -> str:
    params: list[tuple[str, str]] = []
    if metric:
        params.append(("metric", metric))
    if api:
        params.append(("api", api))
    params.extend(_extra_params(role, origin))
    params.append(("f", encode_filter(filters)))
    return f"{explore_path}?{urlencode(params)}"


def with_filter_param(
    path: str,
    filters: MetricFilter,
    *,
    role: str | None = None,
    origin: str | None = None,
) -> str:
    params = [("f", encode_filter(filters)), *_extra_params(role, origin)]
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{urlencode(params)}"
