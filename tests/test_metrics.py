from helpers.metrics import (
    MetricsSummary,
    bathroom_distribution,
    bedroom_distribution,
    build_metrics,
    compute_metrics,
    property_type_distribution,
)
from helpers.normalizer import Property, normalize_listing


def _prop(**kwargs):
    kwargs.setdefault("address", "1 Test Rd")
    return Property(**kwargs)


def test_scenario_single_listing():
    prop = normalize_listing(
        {
            "area_name": "12 Main St",
            "attributes": {"bedrooms": 3, "bathrooms": "nan", "price": 500000, "property_type": "house"},
        }
    )
    summary = compute_metrics([prop])
    assert summary.total_properties == 1
    assert summary.avg_bedrooms == "3.0"
    assert summary.avg_bathrooms == "0"
    assert summary.with_parking_count == 0


def test_empty_list_has_no_metrics():
    assert compute_metrics([]) is None
    assert bedroom_distribution([]) == []
    assert bathroom_distribution([]) == []
    assert property_type_distribution([]) == []
    assert build_metrics([]) == {
        "metrics": None,
        "charts": {"bedrooms": [], "bathrooms": [], "property_types": []},
    }


def test_non_positive_bedrooms_are_excluded():
    properties = [_prop(bedrooms=0), _prop(bedrooms=-1), _prop(bedrooms=4)]
    assert compute_metrics(properties).avg_bedrooms == "4.0"
    assert bedroom_distribution(properties) == [{"name": "4 bed", "value": 1}]


def test_average_is_rounded_to_one_decimal():
    properties = [_prop(bedrooms=3), _prop(bedrooms=4), _prop(bedrooms=4)]
    assert compute_metrics(properties).avg_bedrooms == "3.7"


def test_distinct_suburbs_skip_placeholders():
    properties = [
        _prop(suburb="Belmont North"),
        _prop(suburb="Belmont North"),
        _prop(suburb="Gosford"),
        _prop(suburb="null"),
        _prop(suburb="undefined"),
        _prop(suburb=None),
    ]
    assert compute_metrics(properties).distinct_suburb_count == 2


def test_parking_counts_only_positive_carspaces():
    properties = [_prop(carspaces=2), _prop(carspaces=0), _prop(carspaces=None), _prop(carspaces=1)]
    assert compute_metrics(properties).with_parking_count == 2


def test_bedroom_distribution_sorted_ascending():
    properties = [_prop(bedrooms=3), _prop(bedrooms=4)]
    assert bedroom_distribution(properties) == [
        {"name": "3 bed", "value": 1},
        {"name": "4 bed", "value": 1},
    ]


def test_numeric_distribution_sorts_by_number_not_text():
    properties = [_prop(bathrooms=10), _prop(bathrooms=2), _prop(bathrooms=3), _prop(bathrooms=2)]
    assert bathroom_distribution(properties) == [
        {"name": "2 bath", "value": 2},
        {"name": "3 bath", "value": 1},
        {"name": "10 bath", "value": 1},
    ]


def test_fractional_counts_keep_their_label():
    properties = [_prop(bathrooms=2.5), _prop(bathrooms=1)]
    assert bathroom_distribution(properties) == [
        {"name": "1 bath", "value": 1},
        {"name": "2.5 bath", "value": 1},
    ]


def test_property_types_keep_first_seen_order():
    properties = [
        _prop(property_type="Unit"),
        _prop(property_type=None),
        _prop(property_type="House"),
        _prop(property_type="Unit"),
    ]
    assert property_type_distribution(properties) == [
        {"name": "Unit", "value": 2},
        {"name": "Unknown", "value": 1},
        {"name": "House", "value": 1},
    ]


def test_property_types_include_zero_bedroom_listings():
    properties = [_prop(property_type="Studio", bedrooms=0)]
    assert property_type_distribution(properties) == [{"name": "Studio", "value": 1}]
    assert bedroom_distribution(properties) == []


def test_aggregation_is_idempotent():
    properties = [
        _prop(bedrooms=3, bathrooms=1, suburb="Gosford", property_type="House"),
        _prop(bedrooms=2, bathrooms=2, carspaces=1, property_type="Unit"),
    ]
    assert build_metrics(properties) == build_metrics(properties)
    assert compute_metrics(properties) == compute_metrics(properties)


def test_summary_serializes_with_camel_case_keys():
    summary = MetricsSummary(
        total_properties=2,
        avg_bedrooms="2.5",
        avg_bathrooms="1.0",
        distinct_suburb_count=1,
        with_parking_count=1,
    )
    assert summary.to_dict() == {
        "totalProperties": 2,
        "avgBedrooms": "2.5",
        "avgBathrooms": "1.0",
        "distinctSuburbCount": 1,
        "withParkingCount": 1,
    }
