import base64

import pytest

from app.core.security import hash_password, parse_basic_credentials, verify_password


def _basic(raw: bytes) -> str:
    return "Basic " + base64.b64encode(raw).decode("ascii")


def test_hash_is_salted_and_verifiable():
    first = hash_password("secret1")
    second = hash_password("secret1")

    assert first != "secret1"
    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)


def test_verify_rejects_wrong_password():
    assert not verify_password("secret2", hash_password("secret1"))


def test_parse_basic_credentials():
    creds = parse_basic_credentials(_basic(b"a@x.com:secret1"))

    assert creds.username == "a@x.com"
    assert creds.password == "secret1"


def test_parse_keeps_colons_in_secret():
    creds = parse_basic_credentials(_basic(b"a@x.com:pa:ss"))

    assert creds.username == "a@x.com"
    assert creds.password == "pa:ss"


def test_parse_scheme_is_case_insensitive():
    header = _basic(b"a@x.com:secret1").replace("Basic", "basic")
    assert parse_basic_credentials(header) is not None


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        "Basic",
        "Bearer abc.def.ghi",
        "Basic !!!not-base64!!!",
        _basic(b"no-separator"),
        _basic(b"\xff\xfe:bad-utf8"),
    ],
)
def test_parse_rejects_absent_or_malformed(header):
    assert parse_basic_credentials(header) is None
