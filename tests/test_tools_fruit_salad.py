import logging

from console.io import BufferLineSink, ScriptedLineSource
from tools import fruit_salad


def test_cli_runs_session_without_shuffle():
    sink = BufferLineSink()

    exit_code = fruit_salad.main(
        ["--no-shuffle"],
        source=ScriptedLineSource(["3 Mango", "3"]),
        sink=sink,
    )

    assert exit_code == 0
    lines = sink.lines()
    assert lines[0] == "Fruit salad:"
    assert lines[3] == "Arbutus, Loquat, Strawberry Tree Berry, Mango, Pomegranate, Fig, Cherry"
    assert lines[4] == "Removed: Mango"
    assert lines[-1] == "Arbutus, Loquat, Strawberry Tree Berry, Pomegranate, Fig, Cherry"


def test_cli_seeded_runs_are_reproducible():
    transcripts = []
    for _ in range(2):
        sink = BufferLineSink()
        assert fruit_salad.main(["--seed", "11"], source=ScriptedLineSource(["0", "0"]), sink=sink) == 0
        transcripts.append(sink.getvalue())

    assert transcripts[0] == transcripts[1]


def test_cli_reports_malformed_input(caplog):
    sink = BufferLineSink()

    with caplog.at_level(logging.ERROR):
        exit_code = fruit_salad.main(
            ["--no-shuffle"],
            source=ScriptedLineSource(["abc", "0"]),
            sink=sink,
        )

    assert exit_code == 1
    assert "Invalid index" in caplog.text
    assert sink.lines() == [
        "Fruit salad:",
        "Arbutus, Loquat, Strawberry Tree Berry, Pomegranate, Fig, Cherry",
    ]


def test_cli_reports_out_of_range_index(caplog):
    with caplog.at_level(logging.ERROR):
        exit_code = fruit_salad.main(
            ["--no-shuffle"],
            source=ScriptedLineSource(["2", "9"]),
            sink=BufferLineSink(),
        )

    assert exit_code == 1
    assert "out of range for remove" in caplog.text
