from unittest.mock import MagicMock, patch

import pytest
import requests

from wayfinder.places.config import PlacesConfig
from wayfinder.places.errors import NotFound, UpstreamError
from wayfinder.places.geocoder import geocode

CONFIG = PlacesConfig(nominatim_url="https://geo.test/search", user_agent="WayFinderTest/1.0")


def _mock_response(payload) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@patch("wayfinder.places.geocoder.requests.get")
def test_geocode_returns_first_match(mock_get):
    mock_get.return_value = _mock_response([
        {"lat": "41.8933203", "lon": "12.4829321", "display_name": "Roma"},
        {"lat": "0", "lon": "0"},
    ])

    coords = geocode("Roma, Italia", config=CONFIG)

    assert coords.lat == pytest.approx(41.8933203)
    assert coords.lon == pytest.approx(12.4829321)


@patch("wayfinder.places.geocoder.requests.get")
def test_geocode_requests_single_result(mock_get):
    mock_get.return_value = _mock_response([{"lat": "1", "lon": "2"}])

    geocode("New York & Co", config=CONFIG)

    args, kwargs = mock_get.call_args
    assert args[0] == "https://geo.test/search"
    assert kwargs["params"] == {"q": "New York & Co", "format": "json", "limit": 1}
    assert kwargs["headers"]["User-Agent"] == "WayFinderTest/1.0"
    assert kwargs["timeout"] == CONFIG.geocode_timeout


@patch("wayfinder.places.geocoder.requests.get")
def test_geocode_no_results_raises_not_found(mock_get):
    mock_get.return_value = _mock_response([])

    with pytest.raises(NotFound):
        geocode("Atlantis", config=CONFIG)


@patch("wayfinder.places.geocoder.requests.get")
def test_geocode_connection_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("down")

    with pytest.raises(UpstreamError):
        geocode("Roma", config=CONFIG)


@patch("wayfinder.places.geocoder.requests.get")
def test_geocode_http_error(mock_get):
    response = _mock_response([])
    response.raise_for_status.side_effect = requests.HTTPError("503")
    mock_get.return_value = response

    with pytest.raises(UpstreamError):
        geocode("Roma", config=CONFIG)


@patch("wayfinder.places.geocoder.requests.get")
def test_geocode_bad_payload(mock_get):
    mock_get.return_value = _mock_response([{"display_name": "no coords"}])

    with pytest.raises(UpstreamError):
        geocode("Roma", config=CONFIG)
