import pytest
from starlette.datastructures import Headers
from voyager.api.services.headers import normalize_headers


def test_none_gives_empty_mapping():
    assert normalize_headers(None) == {}


def test_mapping_is_copied():
    src = {"X-Api-Key": "abc"}
    out = normalize_headers(src)
    assert out == {"X-Api-Key": "abc"}
    assert out is not src


def test_pair_list_and_tuples():
    assert normalize_headers([["X-Api-Key", "abc"]]) == {"X-Api-Key": "abc"}
    assert normalize_headers((("A", "1"), ("B", "2"))) == {"A": "1", "B": "2"}


def test_later_pairs_win():
    assert normalize_headers([("A", "1"), ("A", "2")]) == {"A": "2"}


def test_header_collection():
    headers = Headers({"X-Tenant": "acme"})
    assert normalize_headers(headers) == {"x-tenant": "acme"}


def test_values_are_stringified():
    assert normalize_headers({"X-Retries": 3}) == {"X-Retries": "3"}


@pytest.mark.parametrize("bad", ["X-Api-Key: abc", [["only-key"]], [("a", "b", "c")], ["ab"]])
def test_malformed_input_rejected(bad):
    with pytest.raises(ValueError):
        normalize_headers(bad)


def test_bool_and_null_values_match_json():
    assert normalize_headers({"X-Debug": True, "X-Trace": False, "X-Tenant": None}) == {
        "X-Debug": "true",
        "X-Trace": "false",
        "X-Tenant": "null",
    }


@pytest.mark.parametrize("value", [{"nested": "x"}, ["a", "b"]])
def test_non_scalar_values_rejected(value):
    with pytest.raises(ValueError):
        normalize_headers({"X-Bad": value})
