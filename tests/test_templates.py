import pytest

from lefthook.templates import checksum


def test_checksum_format():
    assert checksum("abc", 123) == b"abc 123\n"


@pytest.mark.parametrize(
    "digest, timestamp",
    [("deadbeef", 0), ("0123456789abcdef", 1700000000), ("x", -5)],
)
def test_checksum_round_trip(digest, timestamp):
    data = checksum(digest, timestamp)
    assert data.endswith(b"\n")
    parsed_digest, parsed_timestamp = data.decode().split()
    assert parsed_digest == digest
    assert int(parsed_timestamp) == timestamp


def test_checksum_single_line():
    assert checksum("abc", 1).count(b"\n") == 1