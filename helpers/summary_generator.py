"""
Generate a short natural language summary of a search result without external APIs.
"""
from __future__ import annotations

from .metrics import MetricsSummary

PROPERTY_TYPE_LABELS = {
    "house": ("house", "houses"),
    "unit": ("unit", "units"),
    "townhouse": ("townhouse", "townhouses"),
    "apartment": ("apartment", "apartments"),
}


def _type_phrase(property_type: str | None, count: int) -> str:
    singular, plural = PROPERTY_TYPE_LABELS.get(
        (property_type or "").lower(), ("property", "properties")
    )
    return singular if count == 1 else plural


def _averages_sentence(metrics: MetricsSummary) -> str:
    parts = []
    if metrics.avg_bedrooms != "0":
        parts.append(f"{metrics.avg_bedrooms} bedrooms")
    if metrics.avg_bathrooms != "0":
        parts.append(f"{metrics.avg_bathrooms} bathrooms")
    if not parts:
        return ""
    return " Average of " + " and ".join(parts) + "."


def generate_summary(
    suburb: str,
    property_type: str | None,
    metrics: MetricsSummary | None,
) -> str:
    """
    Produce a deterministic, human-readable summary of the current result set.
    """
    if metrics is None:
        return (
            f"No {_type_phrase(property_type, 0)} were found in {suburb}. "
            "Try a different suburb or property type."
        )

    total = metrics.total_properties
    headline = f"Found {total} {_type_phrase(property_type, total)} in {suburb}."
    parking = f" {metrics.with_parking_count} with parking."
    return headline + _averages_sentence(metrics) + parking
