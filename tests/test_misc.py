from pathlib import Path

import pytest

from hensei.misc import (
    audio_files,
    extract_symbol_file,
    preprocess,
    regular_files,
    rewrite_tones,
    tone_files,
)
from hensei.notes import note_table


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("")


def test_audio_files_filters_extensions_and_directories(tmp_path):
    _touch(tmp_path, "a.wav", "b.aiff", "c.mp3", "d.txt", "e.wave", "f.aif")
    (tmp_path / "sub.wav").mkdir()
    assert audio_files(tmp_path) == ["a.wav", "b.aiff", "c.mp3", "e.wave", "f.aif"]


def test_regular_files_skips_directories(tmp_path):
    _touch(tmp_path, "one", "two")
    (tmp_path / "inner").mkdir()
    assert regular_files(tmp_path) == ["one", "two"]


def test_tone_files_only_int(tmp_path):
    _touch(tmp_path, "s.int", "s.int.tskm", "other")
    assert tone_files(tmp_path) == ["s.int"]


def test_listing_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        regular_files(tmp_path / "missing")


def test_extract_symbol_file(tmp_path):
    tones = tmp_path / "song_Loudness.int"
    tones.write_text("0.5\t0\t10\n0.25\t10\t20\n0.5\t20\t30\n")
    symbols = extract_symbol_file(tones)
    assert symbols == [0.25, 0.5]
    written = Path(f"{tones}.tskm").read_text()
    assert written == "0\t0.25\tLABEL0\n1\t0.5\tLABEL1\n"


def test_extract_symbol_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_symbol_file(tmp_path / "absent.int")


def test_rewrite_tones_maps_to_indices(tmp_path):
    tones = tmp_path / "t.int"
    tones.write_text("0.5\t0\t10\n0.25\t10\t20\n0.5\t20\t30\n")
    rewrite_tones(tones, [0.5, 0.25])
    assert tones.read_text() == "1\t0\t10\n0\t10\t20\n1\t20\t30\n"


def test_rewrite_tones_unknown_value_gets_past_end_index(tmp_path):
    tones = tmp_path / "t.int"
    tones.write_text("0.75\t0\t10\n0.25\t10\t20\n")
    rewrite_tones(tones, [0.25, 0.5])
    first = tones.read_text().splitlines()[0].split("\t")
    assert first[0] == "2"


def test_rewrite_tones_empty_symbols_leaves_file(tmp_path):
    tones = tmp_path / "t.int"
    content = "0.5\t0\t10\n"
    tones.write_text(content)
    rewrite_tones(tones, [])
    assert tones.read_text() == content


def test_preprocess_general_descriptor(tmp_path):
    tones = tmp_path / "song_Noisiness.int"
    tones.write_text("0.3\t0\t5\n0.1\t5\t9\n")
    symbols = preprocess(tones)
    assert symbols == [0.1, 0.3]
    assert tones.read_text() == "1\t0\t5\n0\t5\t9\n"
    assert Path(f"{tones}.tskm").exists()


def test_preprocess_fundamental_frequency(tmp_path):
    tones = tmp_path / "song_FundamentalFrequency.int"
    tones.write_text("440 0 10\n0 10 20\n")
    symbols = preprocess(tones)
    assert symbols == [0.0, 440.0]
    assert tones.read_text() == "1\t0\t10\n0\t10\t20\n"
    rows = [line.split("\t") for line in Path(f"{tones}.tskm").read_text().splitlines()]
    assert rows[1][1] == "440"
    assert rows[1][2] == note_table()[69].name
    assert rows[0][2] == note_table()[0].name