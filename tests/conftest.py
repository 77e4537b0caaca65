from __future__ import annotations

from typing import Dict, List

import pytest

SAMPLE_PAYLOAD = """{"results": [
  {"area_name": "3 Dalton Close, Belmont North, NSW",
   "address": {"sal": "Belmont North", "state": "NSW", "street": "3 Dalton Close"},
   "attributes": {"bedrooms": 3, "bathrooms": 1, "garage_spaces": 2,
                  "land_size": "607.0", "building_size": "nan"},
   "price": 950000, "property_type": "House", "sale_date": "2025-10-03"},
  {"area_name": NaN,
   "address": {"sal": "Belmont North", "state": "NSW", "street": "10 Arlington Street"},
   "attributes": {"bedrooms": 4, "bathrooms": NaN, "carspaces": 0, "land_size": "613 m²"},
   "sale_price": 925000, "property_type": "House"},
  {"area_name": "7 Oak Ave",
   "address": {"sal": "null", "state": "NSW", "street": "7 Oak Ave"},
   "attributes": {"bedrooms": "nan", "bathrooms": 2, "property_type": "Unit"}}
]}"""


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class FakeUpstream:
    def __init__(self) -> None:
        self.calls: List[Dict] = []
        self.response = FakeResponse("{}")

    def respond(self, text: str, status_code: int = 200) -> None:
        self.response = FakeResponse(text, status_code)

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        return self.response


@pytest.fixture
def upstream(monkeypatch) -> FakeUpstream:
    fake = FakeUpstream()
    monkeypatch.setattr("helpers.listings_client.requests.get", fake.get)
    return fake
