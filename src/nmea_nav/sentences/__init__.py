"""Builders that turn navigation snapshots into NMEA-0183 sentences."""

from typing import Callable

from .apb import APBBuilder
from .base import SentenceBuilder, encode_sentences
from .rmb import RMBBuilder

__all__ = (
    "APBBuilder",
    "RMBBuilder",
    "SentenceBuilder",
    "create_sentence_builder",
    "encode_sentences",
    "get_sentence_builder_names",
)


_builder_factories: dict[str, Callable[[], SentenceBuilder]] = {
    "apb": APBBuilder,
    "rmb": RMBBuilder,
}


def create_sentence_builder(sentence: str) -> SentenceBuilder:
    """Creates a builder that emits sentences of the given type.

    Parameters:
        sentence: the sentence type; valid values are ``APB`` and ``RMB``,
            case-insensitive.
    """
    try:
        factory = _builder_factories[sentence.lower()]
    except KeyError:
        raise RuntimeError(f"Unknown NMEA sentence: {sentence!r}") from None
    return factory()


def get_sentence_builder_names() -> list[str]:
    """Returns the sentence types that have a registered builder."""
    return sorted(name.upper() for name in _builder_factories)
