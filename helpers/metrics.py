"""
Summary counters and chart distributions over a list of normalized properties.

Everything here is a pure function of its input; an empty property list means
"nothing to display" and yields no metrics and empty distributions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

import pandas as pd

from .chart_builder import build_distribution, build_numeric_distribution
from .normalizer import Property

UNKNOWN_TYPE = "Unknown"
SUBURB_PLACEHOLDERS = ("", "null", "undefined")


@dataclass(frozen=True)
class MetricsSummary:
    total_properties: int
    avg_bedrooms: str
    avg_bathrooms: str
    distinct_suburb_count: int
    with_parking_count: int

    def to_dict(self) -> Dict[str, int | str]:
        return {
            "totalProperties": self.total_properties,
            "avgBedrooms": self.avg_bedrooms,
            "avgBathrooms": self.avg_bathrooms,
            "distinctSuburbCount": self.distinct_suburb_count,
            "withParkingCount": self.with_parking_count,
        }


def _frame(properties: Sequence[Property]) -> pd.DataFrame:
    return pd.DataFrame.from_records(
        [
            {
                "bedrooms": prop.bedrooms,
                "bathrooms": prop.bathrooms,
                "carspaces": prop.carspaces,
                "suburb": prop.suburb,
                "property_type": prop.property_type,
            }
            for prop in properties
        ],
        columns=["bedrooms", "bathrooms", "carspaces", "suburb", "property_type"],
    )


def _positive(series: pd.Series) -> pd.Series:
    numeric = pd.to_numeric(series, errors="coerce")
    return numeric[numeric > 0]


def _average(values: pd.Series) -> str:
    if values.empty:
        return "0"
    return f"{values.mean():.1f}"


def _distinct_suburbs(series: pd.Series) -> int:
    suburbs = series.dropna().astype(str)
    return int(suburbs[~suburbs.isin(SUBURB_PLACEHOLDERS)].nunique())


def compute_metrics(properties: Sequence[Property]) -> MetricsSummary | None:
    """
    Return the headline counters, or None when there is nothing to summarize.
    """
    if not properties:
        return None
    df = _frame(properties)
    return MetricsSummary(
        total_properties=len(properties),
        avg_bedrooms=_average(_positive(df["bedrooms"])),
        avg_bathrooms=_average(_positive(df["bathrooms"])),
        distinct_suburb_count=_distinct_suburbs(df["suburb"]),
        with_parking_count=int(_positive(df["carspaces"]).size),
    )


def bedroom_distribution(properties: Sequence[Property]) -> List[Dict[str, int | str]]:
    if not properties:
        return []
    return build_numeric_distribution(_positive(_frame(properties)["bedrooms"]), "bed")


def bathroom_distribution(properties: Sequence[Property]) -> List[Dict[str, int | str]]:
    if not properties:
        return []
    return build_numeric_distribution(_positive(_frame(properties)["bathrooms"]), "bath")


def property_type_distribution(properties: Sequence[Property]) -> List[Dict[str, int | str]]:
    if not properties:
        return []
    types = _frame(properties)["property_type"].fillna(UNKNOWN_TYPE).astype(str)
    return build_distribution(types)


def build_metrics(
    properties: Sequence[Property],
    summary: MetricsSummary | None = None,
) -> Dict:
    """
    Bundle the summary and the three chart distributions for one result set.
    An already computed summary is reused.
    """
    if summary is None:
        summary = compute_metrics(properties)
    return {
        "metrics": summary.to_dict() if summary else None,
        "charts": {
            "bedrooms": bedroom_distribution(properties),
            "bathrooms": bathroom_distribution(properties),
            "property_types": property_type_distribution(properties),
        },
    }
