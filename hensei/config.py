"""Reader for the pipeline configuration file.

A configuration file lists audio descriptors by name, one per line, and
mining parameters as ``Name = value`` lines. Lines starting with ``;`` are
comments.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from os import PathLike

_log = logging.getLogger(__name__)

DESCRIPTORS = frozenset(
    {
        "FundamentalFrequency",
        "Inharmonicity",
        "Loudness",
        "MFCC",
        "Noisiness",
        "SpectralCentroid",
    }
)

PARAMETERS = frozenset(
    {
        # Chord mining
        "MarginalGapFilterAlpha",
        "MarginalGapMaxDuration",
        "MinimalToneDuration",
        "MinimalChordDuration",
        "MinimalSupport",
        "MarginAlpha",
        "MinimalChordSize",
        "MaximalChordSize",
        # Phrase mining
        "SequenceWindowSize",
        "AlphaForClosedPhrases",
        "MinimalClosedPhraseSupport",
        "MinimalClosedSequenceSupport",
    }
)

_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")


@dataclass
class Config:
    """Descriptors and mining parameters read from a configuration file."""

    descriptors: set[str] = field(default_factory=set)
    parameters: dict[str, float] = field(default_factory=dict)


def descriptor_names() -> frozenset[str]:
    """Return the names of the known audio descriptors."""
    return DESCRIPTORS


def parameter_names() -> frozenset[str]:
    """Return the names of the known mining parameters."""
    return PARAMETERS


def is_comment(line: str) -> bool:
    """Tell whether a line is a comment."""
    return line.startswith(";")


def remove_space(text: str) -> str:
    """Return ``text`` with every whitespace character removed."""
    return "".join(ch for ch in text if not ch.isspace())


def read_value(line: str) -> tuple[str, float | None]:
    """Parse one configuration line.

    A line without ``=`` names a descriptor and yields ``(name, None)``.
    A ``name = value`` line yields ``(name, value)``. Raises ``ValueError``
    for an empty line or a parameter whose value does not start with a digit.
    """
    if not line:
        raise ValueError("empty configuration line")
    found = line.find("=")
    if found < 0:
        return line, None
    # The character right before '=' is dropped: it is expected to be a space.
    name = remove_space(line[: found - 1] if found > 0 else line)
    text = remove_space(line[found + 1 :])
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"no numeric value in configuration line {line!r}")
    return name, float(match.group())


def read_config(filename: str | PathLike[str]) -> Config:
    """Read a configuration file.

    Unknown descriptors and parameters are ignored; malformed lines are
    logged and skipped. Raises ``OSError`` if the file cannot be opened.
    """
    config = Config()
    with open(filename, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line or is_comment(line):
                continue
            try:
                name, value = read_value(line)
            except ValueError:
                _log.warning("Config file contains a bad entry: %s", line)
                continue
            if value is None:
                if name in DESCRIPTORS:
                    config.descriptors.add(name)
            elif name in PARAMETERS:
                config.parameters[name] = value
    return config