"""
Map raw upstream listings onto the canonical Property record.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from math import isfinite
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

Number = int | float

MISSING_TOKENS = {"", "nan", "none", "null", "undefined"}
UNKNOWN_ADDRESS = "Unknown address"

LEADING_NUMBER_REGEX = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True)
class Property:
    address: str
    street: Optional[str] = None
    suburb: Optional[str] = None
    state: Optional[str] = None
    bedrooms: Optional[Number] = None
    bathrooms: Optional[Number] = None
    carspaces: Optional[Number] = None
    land_size: Optional[Number] = None
    building_size: Optional[Number] = None
    price: Optional[Number] = None
    property_type: Optional[str] = None
    description: Optional[str] = None
    sale_date: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self, include_raw: bool = True) -> Dict[str, Any]:
        data = {
            "address": self.address,
            "street": self.street,
            "suburb": self.suburb,
            "state": self.state,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "carspaces": self.carspaces,
            "landSize": self.land_size,
            "buildingSize": self.building_size,
            "price": self.price,
            "propertyType": self.property_type,
            "description": self.description,
            "saleDate": self.sale_date,
        }
        if include_raw:
            data["raw"] = self.raw
        return data


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _integral(value: float) -> Number:
    return int(value) if value.is_integer() else value


def coerce_number(value: Any) -> Optional[Number]:
    """
    Turn an upstream value into a number, or None when it is not one.

    Strings such as ``"607.0"`` or ``"613 m²"`` keep their leading number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        if not isfinite(number):
            return None
        return _integral(number) if isinstance(value, float) else value
    if isinstance(value, str):
        token = value.strip()
        if token.lower() in MISSING_TOKENS:
            return None
        token = token.replace(",", "")
        try:
            number = float(token)
        except ValueError:
            match = LEADING_NUMBER_REGEX.match(token)
            if not match:
                return None
            number = float(match.group(0))
        if not isfinite(number):
            return None
        return _integral(number)
    return None


def coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in MISSING_TOKENS:
        return None
    return text


def _first_present(*values: Any) -> Any:
    for value in values:
        if value:
            return value
    return None


def _first_not_none(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def derive_address(area_name: Optional[str], street: Optional[str], suburb: Optional[str]) -> str:
    if area_name:
        return area_name
    parts = [part for part in (street, suburb) if part]
    if parts:
        return ", ".join(parts)
    return UNKNOWN_ADDRESS


def normalize_listing(item: Mapping[str, Any]) -> Property:
    address = _as_mapping(item.get("address"))
    attributes = _as_mapping(item.get("attributes"))

    street = coerce_text(address.get("street"))
    suburb = coerce_text(address.get("sal"))

    return Property(
        address=derive_address(coerce_text(item.get("area_name")), street, suburb),
        street=street,
        suburb=suburb,
        state=coerce_text(address.get("state")),
        bedrooms=coerce_number(attributes.get("bedrooms")),
        bathrooms=coerce_number(attributes.get("bathrooms")),
        carspaces=_first_not_none(
            coerce_number(attributes.get("carspaces")),
            coerce_number(attributes.get("garage_spaces")),
        ),
        land_size=coerce_number(attributes.get("land_size")),
        building_size=coerce_number(attributes.get("building_size")),
        price=_first_present(
            coerce_number(attributes.get("price")),
            coerce_number(item.get("price")),
            coerce_number(item.get("sale_price")),
        ),
        property_type=_first_present(
            coerce_text(attributes.get("property_type")),
            coerce_text(item.get("property_type")),
        ),
        description=coerce_text(attributes.get("description")),
        sale_date=coerce_text(item.get("sale_date")),
        raw=item,
    )


def normalize_results(payload: Any) -> List[Property]:
    """
    Normalize every entry of ``payload["results"]``. A payload without a
    results list yields no properties.
    """
    results = payload.get("results") if isinstance(payload, Mapping) else None
    if not isinstance(results, list):
        logger.warning("Listings payload has no results list; returning no properties")
        return []
    return [normalize_listing(item) for item in results if isinstance(item, Mapping)]
