from football_stats.errors import (
    APIError,
    EmptyResultError,
    NetworkError,
    UpstreamError,
    ValidationError,
)


def test_upstream_error_code_is_status():
    err = UpstreamError(404, "https://www.fotmob.com/api/teams?id=1")
    assert isinstance(err, APIError)
    assert err.code == "404"
    assert err.status == 404
    assert err.message == "FotMob 404: https://www.fotmob.com/api/teams?id=1"


def test_upstream_parse_error_override():
    err = UpstreamError(200, "u", code="PARSE_ERROR", details="bad json")
    assert err.code == "PARSE_ERROR"
    assert err.to_dict() == {
        "source": "FotMob",
        "code": "PARSE_ERROR",
        "message": "FotMob 200: u",
        "details": "bad json",
    }


def test_network_error_codes():
    assert NetworkError("u").code == "NETWORK_ERROR"
    assert NetworkError("u", timeout=True).code == "TIMEOUT"


def test_to_dict_omits_empty_details():
    assert "details" not in ValidationError("Invalid league ID").to_dict()
    assert EmptyResultError("standings").message == "No standings found"
