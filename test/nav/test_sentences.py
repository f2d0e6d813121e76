import logging

from pytest import raises

from nmea_nav.config import NMEAConfig
from nmea_nav.enums import Talker
from nmea_nav.sentences import (
    APBBuilder,
    RMBBuilder,
    create_sentence_builder,
    encode_sentences,
    get_sentence_builder_names,
)
from nmea_nav.snapshot import NavigationSnapshot
from nmea_nav.vectors import GPSCoordinate


def test_builder_registry():
    assert get_sentence_builder_names() == ["APB", "RMB"]
    assert isinstance(create_sentence_builder("APB"), APBBuilder)
    assert isinstance(create_sentence_builder("rmb"), RMBBuilder)

    with raises(RuntimeError):
        create_sentence_builder("GGA")


def test_builder_descriptors():
    for name in get_sentence_builder_names():
        builder = create_sentence_builder(name)
        assert builder.sentence == name
        assert builder.title.startswith(name)
        assert "crossTrackError" in builder.keys
        for key in builder.keys:
            NavigationSnapshot().get(key)


def test_encode_sentences():
    snapshot = NavigationSnapshot(
        cross_track_error=100,
        next_point_position=GPSCoordinate(45.5, -122.25),
        next_point_bearing_true=1.0,
    )
    sentences = encode_sentences(
        [APBBuilder(), RMBBuilder()], snapshot, NMEAConfig(talker=Talker.II)
    )
    assert len(sentences) == 2
    assert sentences[0].startswith("$IIAPB,")
    assert sentences[1].startswith("$IIRMB,")


def test_encode_sentences_without_data():
    assert encode_sentences([APBBuilder(), RMBBuilder()], NavigationSnapshot()) == []


def test_encode_sentences_skips_out_of_range_values(caplog):
    snapshot = NavigationSnapshot(
        cross_track_error=100,
        next_point_position=GPSCoordinate(95, 0),
        next_point_bearing_true=1.0,
    )
    with caplog.at_level(logging.WARNING):
        sentences = encode_sentences([RMBBuilder(), APBBuilder()], snapshot)

    assert len(sentences) == 1
    assert sentences[0].startswith("$GPAPB,")
    assert "Skipping RMB sentence" in caplog.text
    assert "latitude" in caplog.text
