import pytest

from pyrequests_core import status_codes as sc

CHECKS = [
    sc.is_informational,
    sc.is_success,
    sc.is_redirect,
    sc.is_client_error,
    sc.is_server_error,
]


@pytest.mark.parametrize(
    "code, expected",
    [
        (sc.HTTP_CONTINUE, sc.is_informational),
        (sc.HTTP_EARLY_HINTS, sc.is_informational),
        (sc.HTTP_OK, sc.is_success),
        (sc.HTTP_IM_USED, sc.is_success),
        (sc.HTTP_FOUND, sc.is_redirect),
        (sc.HTTP_PERMANENT_REDIRECT, sc.is_redirect),
        (sc.HTTP_NOT_FOUND, sc.is_client_error),
        (sc.HTTP_METHOD_NOT_ALLOWED, sc.is_client_error),
        (sc.HTTP_INTERNAL_SERVER_ERROR, sc.is_server_error),
        (sc.HTTP_NETWORK_AUTHENTICATION_REQUIRED, sc.is_server_error),
    ],
)
def test_each_code_belongs_to_exactly_one_class(code, expected):
    results = {check: check(code) for check in CHECKS}
    assert results[expected] is True
    assert sum(results.values()) == 1


@pytest.mark.parametrize(
    "offset, check",
    [
        (sc.INFO_CODE_OFFSET, sc.is_informational),
        (sc.SUCCESS_CODE_OFFSET, sc.is_success),
        (sc.REDIRECT_CODE_OFFSET, sc.is_redirect),
        (sc.CLIENT_ERROR_CODE_OFFSET, sc.is_client_error),
        (sc.SERVER_ERROR_CODE_OFFSET, sc.is_server_error),
    ],
)
def test_range_boundaries(offset, check):
    assert check(offset) is True
    assert check(offset - 1) is False


@pytest.mark.parametrize("code", [0, 99, 600, 700])
def test_codes_outside_all_ranges(code):
    assert sc.is_informational(code) is False
    assert sc.is_success(code) is False
    assert sc.is_redirect(code) is False
    assert sc.is_client_error(code) is False
    assert sc.is_server_error(code) is False


def test_documented_values():
    assert sc.HTTP_OK == 200
    assert sc.is_success(sc.HTTP_OK) is True
    assert sc.HTTP_NOT_FOUND == 404
    assert sc.is_client_error(sc.HTTP_NOT_FOUND) is True
    assert sc.HTTP_IM_A_TEAPOT == 418
    assert sc.is_client_error(sc.HTTP_IM_A_TEAPOT) is True