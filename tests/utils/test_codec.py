import pytest

from starchain.utils.codec import PayloadError, decode_payload, encode_payload


def test_encode_genesis_marker():
    assert encode_payload({"data": "Genesis Block"}) == b'{"data":"Genesis Block"}'.hex()


def test_decode_star(star):
    assert decode_payload(encode_payload(star)) == star


def test_encode_is_lowercase_hex(star):
    body = encode_payload(star)
    assert all(c in "0123456789abcdef" for c in body)


@pytest.mark.parametrize("body", ["zz", "abc", "", "00ff"])
def test_decode_invalid_body(body):
    with pytest.raises(PayloadError):
        decode_payload(body)


def test_payload_error_is_value_error():
    with pytest.raises(ValueError):
        decode_payload("not hex")
