
from __future__ import annotations

import logging
from typing import Tuple

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from helpers.listings_client import (
    DEFAULT_PROPERTY_TYPE,
    DEFAULT_SUBURB,
    fetch_listings,
)
from helpers.metrics import compute_metrics
from helpers.search_session import DEFAULT_PREVIEW_LIMIT, SearchSession
from helpers.summary_generator import generate_summary

logger = logging.getLogger(__name__)

LAST_SEARCH_SESSION_KEY = "last_search"
FAILURE_MESSAGE = "Failed to fetch properties"


def _default_search() -> Tuple[str, str]:
    return (
        getattr(settings, "DEFAULT_SUBURB", DEFAULT_SUBURB),
        getattr(settings, "DEFAULT_PROPERTY_TYPE", DEFAULT_PROPERTY_TYPE),
    )


def _search_params(request) -> Tuple[str, str]:
    default_suburb, default_type = _default_search()
    suburb = request.GET.get("suburb") or default_suburb
    property_type = request.GET.get("property_type") or default_type
    return suburb, property_type


def _dashboard_params(request) -> Tuple[str, str]:
    # A bare request repeats the session's last search (the retry action).
    if "suburb" not in request.GET and "property_type" not in request.GET:
        last = request.session.get(LAST_SEARCH_SESSION_KEY)
        if last:
            return last["suburb"], last["property_type"]
    return _search_params(request)


def _error_response(exc: Exception) -> JsonResponse:
    return JsonResponse({"error": FAILURE_MESSAGE, "details": str(exc)}, status=500)


@require_GET
def list_properties(request):
    suburb, property_type = _search_params(request)
    try:
        result = fetch_listings(suburb, property_type)
    except Exception as exc:
        logger.exception("Error fetching properties for %s", suburb)
        return _error_response(exc)
    return JsonResponse(result.to_dict())


@require_GET
def dashboard(request):
    suburb, property_type = _dashboard_params(request)
    request.session[LAST_SEARCH_SESSION_KEY] = {"suburb": suburb, "property_type": property_type}

    session = SearchSession()
    try:
        result = session.search(suburb, property_type)
    except Exception as exc:
        logger.exception("Error building dashboard for %s", suburb)
        return _error_response(exc)

    preview_limit = getattr(settings, "TABLE_PREVIEW_LIMIT", DEFAULT_PREVIEW_LIMIT)
    table_data = session.table_rows(preview_limit)
    summary = compute_metrics(result.properties)
    payload = session.metrics(summary)
    payload.update(
        {
            "suburb": suburb,
            "property_type": property_type,
            "count": result.count,
            "summary": generate_summary(suburb, property_type, summary),
            "table_data": table_data,
            "showing": len(table_data),
        }
    )
    return JsonResponse(payload)
