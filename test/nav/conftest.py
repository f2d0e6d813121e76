from pytest import fixture
from typing import Callable

from nmea_nav.nmea import checksum


def _assert_valid_sentence(sentence: str) -> None:
    assert sentence.startswith("$")
    body, star, hex_digits = sentence[1:].partition("*")
    assert star == "*"
    assert hex_digits == f"{checksum(body):02X}"
    assert sentence == sentence.strip()


@fixture
def assert_valid_sentence() -> Callable[[str], None]:
    """Returns a function that asserts that a string is a well-formed NMEA
    sentence with a matching checksum.
    """
    return _assert_valid_sentence
