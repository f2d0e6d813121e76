"""Command line tool that encodes navigation snapshots, given as one JSON
object per line, into NMEA-0183 sentences.
"""

from __future__ import annotations

import click
import logging
import sys

from json import JSONDecodeError, loads
from typing import IO, Iterable, Iterator, Sequence

from .config import NMEAConfig
from .nmea.encoder import create_nmea_encoder
from .sentences import (
    SentenceBuilder,
    create_sentence_builder,
    encode_sentences,
    get_sentence_builder_names,
)
from .snapshot import NavigationSnapshot

__all__ = ("main",)

log = logging.getLogger(__name__)


def iter_snapshots(lines: Iterable[str]) -> Iterator[NavigationSnapshot]:
    """Parses snapshots from lines of JSON objects that map dotted navigation
    paths to values. Blank lines are ignored; invalid lines are logged and
    skipped.
    """
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue

        try:
            data = loads(line)
        except JSONDecodeError as ex:
            log.warning(f"Skipping line {lineno}, invalid JSON: {ex}")
            continue

        if not isinstance(data, dict):
            log.warning(f"Skipping line {lineno}, expected a JSON object")
            continue

        yield NavigationSnapshot.from_paths(data)


def encode_stream(
    input: IO[str],
    output: IO[bytes],
    builders: Sequence[SentenceBuilder],
    config: NMEAConfig,
) -> int:
    """Encodes every snapshot read from the input stream and writes the
    resulting sentences to the output stream.

    Returns:
        the number of sentences written
    """
    encoder = create_nmea_encoder()
    count = 0
    for snapshot in iter_snapshots(input):
        for sentence in encode_sentences(builders, snapshot, config):
            output.write(encoder(sentence))
            count += 1
    output.flush()
    return count


@click.command()
@click.argument("file", type=click.File("r"), default="-")
@click.option(
    "-t",
    "--talker",
    metavar="TALKER",
    envvar="NMEA_TALKER",
    default="GP",
    help="the talker ID to use; GP or II. Other values fall back to GP",
)
@click.option(
    "-s",
    "--sentence",
    "sentences",
    multiple=True,
    type=click.Choice(get_sentence_builder_names(), case_sensitive=False),
    help="the sentence types to emit; may be repeated. Defaults to all",
)
@click.option("-v", "--verbose", is_flag=True, help="log debug messages")
def main(
    file: IO[str],
    talker: str = "GP",
    sentences: Sequence[str] = (),
    verbose: bool = False,
) -> None:
    """Encodes navigation snapshots read from FILE (or the standard input)
    into NMEA-0183 sentences and writes them to the standard output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config = NMEAConfig.with_talker(talker)
    log.debug(f"Using talker {config.talker.value} ({config.talker.describe()})")
    builders = [
        create_sentence_builder(name)
        for name in (sentences or get_sentence_builder_names())
    ]

    count = encode_stream(file, sys.stdout.buffer, builders, config)
    log.debug(f"{count} sentence(s) written")


if __name__ == "__main__":
    main()
