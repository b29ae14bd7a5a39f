from unittest.mock import MagicMock, patch

import pytest
import requests

from wayfinder.places.config import PlacesConfig
from wayfinder.places.errors import UpstreamError
from wayfinder.places.overpass import (
    build_area_query,
    build_name_query,
    fetch_features,
    search_by_name,
)

CONFIG = PlacesConfig(overpass_url="https://overpass.test/api/interpreter")

SAMPLE_ELEMENTS = [
    {"type": "node", "id": 1, "lat": 41.89, "lon": 12.49, "tags": {"name": "Colosseo", "historic": "yes"}},
    {"type": "way", "id": 2, "center": {"lat": 41.91, "lon": 12.48}, "tags": {"name": "Villa Borghese", "leisure": "park"}},
    {"type": "node", "id": 3, "lat": 41.90, "lon": 12.47},
    "garbage",
]


def _mock_response(payload) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def test_area_query_has_all_tag_families():
    query = build_area_query(41.9, 12.5, 8000, 90)

    assert query.startswith("[out:json][timeout:90];")
    assert 'nwr["historic"](around:8000,41.9,12.5);' in query
    assert 'nwr["tourism"~"attraction|museum|viewpoint"](around:8000,41.9,12.5);' in query
    assert (
        'nwr["amenity"~"restaurant|cafe|ice_cream|fast_food|bar|pub|nightclub"]'
        "(around:8000,41.9,12.5);"
    ) in query
    assert 'nwr["leisure"~"park|garden"](around:8000,41.9,12.5);' in query
    assert query.endswith("out center;")


def test_name_query_is_case_insensitive():
    query = build_name_query("Trevi", 41.9, 12.5, 50000, 25)

    assert '[timeout:25]' in query
    assert 'nwr["name"~"Trevi",i](around:50000,41.9,12.5);' in query


def test_name_query_escapes_user_text():
    query = build_name_query('a.b"c', 1.0, 2.0, 50000, 25)

    assert r'nwr["name"~"a\\.b\"c",i]' in query


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_resolves_positions(mock_post):
    mock_post.return_value = _mock_response({"elements": SAMPLE_ELEMENTS})

    features = fetch_features(41.9, 12.5, 8000, config=CONFIG)

    assert [f.id for f in features] == [1, 2, 3]
    assert (features[0].lat, features[0].lon) == (41.89, 12.49)
    assert (features[1].lat, features[1].lon) == (41.91, 12.48)
    assert features[2].tags == {}
    assert features[2].name is None


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_posts_query(mock_post):
    mock_post.return_value = _mock_response({"elements": []})

    fetch_features(41.9, 12.5, 8000, config=CONFIG)

    args, kwargs = mock_post.call_args
    assert args[0] == "https://overpass.test/api/interpreter"
    assert "(around:8000,41.9,12.5)" in kwargs["data"]["data"]
    assert kwargs["timeout"] == CONFIG.area_http_timeout


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_http_error(mock_post):
    response = _mock_response({})
    response.raise_for_status.side_effect = requests.HTTPError("429")
    mock_post.return_value = response

    with pytest.raises(UpstreamError):
        fetch_features(41.9, 12.5, 8000, config=CONFIG)


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_timeout(mock_post):
    mock_post.side_effect = requests.Timeout("slow")

    with pytest.raises(UpstreamError):
        fetch_features(41.9, 12.5, 8000, config=CONFIG)


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_unparsable_body(mock_post):
    response = _mock_response(None)
    response.json.side_effect = ValueError("not json")
    mock_post.return_value = response

    with pytest.raises(UpstreamError):
        fetch_features(41.9, 12.5, 8000, config=CONFIG)


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_missing_elements(mock_post):
    mock_post.return_value = _mock_response({"remark": "runtime error"})

    with pytest.raises(UpstreamError):
        fetch_features(41.9, 12.5, 8000, config=CONFIG)


@patch("wayfinder.places.overpass.requests.post")
def test_search_by_name_uses_search_radius(mock_post):
    mock_post.return_value = _mock_response({"elements": SAMPLE_ELEMENTS[:1]})

    features = search_by_name("colosseo", 41.9, 12.5, config=CONFIG)

    assert features[0].name == "Colosseo"
    _, kwargs = mock_post.call_args
    assert "(around:50000,41.9,12.5)" in kwargs["data"]["data"]
    assert kwargs["timeout"] == CONFIG.search_http_timeout


@patch("wayfinder.places.overpass.requests.post")
def test_fetch_features_tolerates_malformed_elements(mock_post):
    mock_post.return_value = _mock_response({"elements": [
        {"type": "way", "id": 4, "center": [1, 2], "tags": {"name": "List Center"}},
        {"type": "node", "id": 5, "lat": "x", "lon": 12.5, "tags": {"name": "Bad Lat"}},
        {"type": "node", "id": 6, "lat": "41.9", "lon": "12.5", "tags": {"name": "Text Coords", "ele": 3}},
        {"type": "node", "id": 7, "lat": 41.9, "lon": 12.5, "tags": ["not", "a", "dict"]},
    ]})

    features = fetch_features(41.9, 12.5, 8000, config=CONFIG)

    assert [f.position for f in features] == [None, None, (41.9, 12.5), (41.9, 12.5)]
    assert features[2].tags == {"name": "Text Coords"}
    assert features[3].tags == {}
