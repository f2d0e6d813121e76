import json
import warnings

from click.testing import CliRunner

from nmea_nav.cli import main

SNAPSHOT = {
    "navigation.courseGreatCircle.crossTrackError": 100,
    "navigation.courseGreatCircle.nextPoint.bearingTrue": 1.5708,
    "navigation.courseGreatCircle.nextPoint.position": {
        "latitude": 45.5,
        "longitude": -122.25,
    },
}


def _lines(output: bytes) -> list[str]:
    assert output.endswith(b"\r\n")
    return output.decode("ascii").split("\r\n")[:-1]


def test_cli_encodes_all_sentences():
    runner = CliRunner()
    result = runner.invoke(main, [], input=json.dumps(SNAPSHOT) + "\n")
    assert result.exit_code == 0
    lines = _lines(result.stdout_bytes)
    assert len(lines) == 2
    assert lines[0].startswith("$GPAPB,A,A,0.054,R,N,90.0,T,")
    assert lines[1].startswith("$GPRMB,A,0.054,R,,WAYPOINT,4530.0000,N,12215.0000,W,")


def test_cli_selected_sentence_and_talker():
    runner = CliRunner()
    result = runner.invoke(
        main, ["--talker", "II", "-s", "rmb"], input=json.dumps(SNAPSHOT)
    )
    assert result.exit_code == 0
    lines = _lines(result.stdout_bytes)
    assert len(lines) == 1
    assert lines[0].startswith("$IIRMB,")


def test_cli_talker_from_environment():
    runner = CliRunner(env={"NMEA_TALKER": "ii"})
    result = runner.invoke(main, ["-s", "APB"], input=json.dumps(SNAPSHOT))
    assert result.exit_code == 0
    assert _lines(result.stdout_bytes)[0].startswith("$IIAPB,")


def test_cli_skips_invalid_lines():
    runner = CliRunner()
    data = "\n".join(["not json", "[1, 2]", "", "{}", json.dumps(SNAPSHOT)])
    result = runner.invoke(main, ["-s", "APB"], input=data)
    assert result.exit_code == 0
    assert len(_lines(result.stdout_bytes)) == 1


def test_cli_skips_huge_numbers():
    runner = CliRunner()
    data = "\n".join(
        ['{"crossTrackError": 1' + "0" * 400 + "}", json.dumps(SNAPSHOT)]
    )
    result = runner.invoke(main, ["-s", "APB"], input=data)
    assert result.exit_code == 0
    assert len(_lines(result.stdout_bytes)) == 1


def test_cli_emits_no_deprecation_warnings():
    runner = CliRunner()
    with warnings.catch_warnings():
        warnings.filterwarnings("error", category=DeprecationWarning, module="nmea_nav")
        result = runner.invoke(main, ["-s", "APB"], input=json.dumps(SNAPSHOT))
    assert result.exception is None
    assert result.exit_code == 0
