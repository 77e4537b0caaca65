
from __future__ import annotations

import re
from typing import Callable, Dict, List

import pandas as pd

LEADING_INT_REGEX = re.compile(r"^\s*(-?\d+)")


def _format_count_value(value: float | int) -> str:
    number = float(value)
    if number.is_integer():
        return f"{int(number)}"
    return f"{number:g}"


def _leading_int(label: str) -> float:
    match = LEADING_INT_REGEX.match(label)
    return int(match.group(1)) if match else float("inf")


def label_counts(values: pd.Series, suffix: str) -> pd.Series:
    """
    Turning numeric values into "<n> <suffix>" category labels.
    """
    return values.map(lambda value: f"{_format_count_value(value)} {suffix}")


def build_distribution(
    labels: pd.Series,
    sort_key: Callable[[str], float] | None = None,
) -> List[Dict[str, int | str]]:
    """
    Building a [{name, value}] payload, one entry per label in first-seen order
    unless a sort key is given.
    """
    if labels.empty:
        return []
    counts = labels.groupby(labels, sort=False).size()
    records = [{"name": str(name), "value": int(count)} for name, count in counts.items()]
    if sort_key is not None:
        records = sorted(records, key=lambda record: sort_key(record["name"]))
    return records


def build_numeric_distribution(values: pd.Series, suffix: str) -> List[Dict[str, int | str]]:
    """
    Building a distribution for counted attributes ("3 bed", "2 bath"), ordered
    by the leading integer of the label.
    """
    return build_distribution(label_counts(values, suffix), sort_key=_leading_int)
