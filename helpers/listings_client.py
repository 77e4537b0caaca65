"""
Client for the upstream suburb listings API.

The upstream payload is not always valid JSON: missing numbers come back as the
bare token ``NaN`` or as the string ``"nan"``. Both are rewritten to ``null``
before decoding.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List
from urllib.parse import quote

import requests
from django.conf import settings

from .normalizer import Property, normalize_results

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://www.microburbs.com.au/report_generator/api/suburb/properties"
DEFAULT_API_TOKEN = "test"
DEFAULT_TIMEOUT = 30.0
DEFAULT_SUBURB = "Belmont North"
DEFAULT_PROPERTY_TYPE = "house"

NAN_REPLACEMENTS = (
    (re.compile(r':\s*"nan"'), ": null"),
    (re.compile(r',\s*"nan"'), ", null"),
    (re.compile(r":\s*NaN"), ": null"),
    (re.compile(r",\s*NaN"), ", null"),
)


class ListingsError(Exception):
    pass


class UpstreamError(ListingsError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"API responded with status: {status_code}")
        self.status_code = status_code


class ParseError(ListingsError, ValueError):
    pass


@dataclass
class ListingResult:
    suburb: str
    properties: List[Property] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.properties)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "properties": [prop.to_dict() for prop in self.properties],
            "count": self.count,
            "suburb": self.suburb,
        }


def _setting(name: str, default: Any) -> Any:
    return getattr(settings, name, default)


def build_listings_url(suburb: str, property_type: str) -> str:
    """
    Embed the search parameters in the upstream URL. Only the suburb is
    percent-encoded.
    """
    base_url = _setting("LISTINGS_API_URL", DEFAULT_API_URL)
    return f"{base_url}?suburb={quote(suburb, safe='')}&property_type={property_type}"


def build_headers() -> Dict[str, str]:
    token = _setting("LISTINGS_API_TOKEN", DEFAULT_API_TOKEN)
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def repair_payload(text: str) -> str:
    """Rewrite ``"nan"`` and ``NaN`` property values to ``null``."""
    for pattern, replacement in NAN_REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text


def _null_constant(_constant: str) -> None:
    # NaN, Infinity and -Infinity that survived the textual pass
    return None


def decode_payload(text: str) -> Any:
    try:
        return json.loads(repair_payload(text), parse_constant=_null_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc)) from exc


def fetch_listings(
    suburb: str = DEFAULT_SUBURB,
    property_type: str = DEFAULT_PROPERTY_TYPE,
) -> ListingResult:
    """
    Query the upstream API for one suburb/property type and return the
    normalized properties.
    """
    url = build_listings_url(suburb, property_type)
    logger.info("Fetching listings for suburb=%r property_type=%r", suburb, property_type)

    response = requests.get(
        url,
        headers=build_headers(),
        timeout=_setting("LISTINGS_API_TIMEOUT", DEFAULT_TIMEOUT),
    )
    if not response.ok:
        logger.warning("Listings API returned HTTP %s for %s", response.status_code, url)
        raise UpstreamError(response.status_code)

    payload = decode_payload(response.text)
    properties = normalize_results(payload)
    logger.info("Normalized %d listings for %s", len(properties), suburb)
    return ListingResult(suburb=suburb, properties=properties)
