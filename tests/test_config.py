import logging

import pytest

from hensei.config import (
    Config,
    descriptor_names,
    is_comment,
    parameter_names,
    read_config,
    read_value,
    remove_space,
)


def test_descriptor_names_contains_known_descriptors():
    names = descriptor_names()
    assert "FundamentalFrequency" in names
    assert "SpectralCentroid" in names
    assert len(names) == 6


def test_parameter_names_contains_mining_parameters():
    names = parameter_names()
    assert "MinimalSupport" in names
    assert "MinimalClosedSequenceSupport" in names
    assert len(names) == 12


@pytest.mark.parametrize(
    "line, expected",
    [(";comment", True), ("Loudness", False), ("", False), (" ;x", False)],
)
def test_is_comment(line, expected):
    assert is_comment(line) is expected


def test_remove_space_strips_all_whitespace():
    assert remove_space(" a b\tc\n ") == "abc"


def test_read_value_descriptor():
    assert read_value("Loudness") == ("Loudness", None)


def test_read_value_parameter():
    assert read_value("MinimalSupport = 3") == ("MinimalSupport", 3.0)


def test_read_value_takes_leading_number():
    name, value = read_value("MarginAlpha = 0.5xyz")
    assert name == "MarginAlpha"
    assert value == 0.5


def test_read_value_drops_character_before_equals():
    name, _ = read_value("MinimalSupport=3")
    assert name == "MinimalSuppor"


@pytest.mark.parametrize("line", ["", "MinimalSupport = abc", "MinimalSupport ="])
def test_read_value_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        read_value(line)


def test_read_config(tmp_path, caplog):
    path = tmp_path / "hensei.cfg"
    path.write_text(
        "; descriptors\n"
        "Loudness\n"
        "MFCC\n"
        "Unknown\n"
        "\n"
        "MinimalSupport = 3\n"
        "MarginAlpha = 0.5\n"
        "Bogus = 4\n"
        "MinimalChordSize = x\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING):
        config = read_config(path)
    assert config == Config(
        descriptors={"Loudness", "MFCC"},
        parameters={"MinimalSupport": 3.0, "MarginAlpha": 0.5},
    )
    assert any("MinimalChordSize = x" in r.getMessage() for r in caplog.records)


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.cfg")