"""Directory listings and preparation of tone files for chord mining."""

from __future__ import annotations

import os
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from hensei.notes import extract_frequency_file, rewrite

AUDIO_EXTENSIONS = ("aif", "aiff", "mp3", "wav", "wave")
TONE_EXTENSION = "int"
SYMBOL_LABEL = "LABEL"
SYMBOL_SUFFIX = ".tskm"


def _regular_names(directory: str | PathLike[str]) -> list[str]:
    """Return the names of the regular files in ``directory``, sorted."""
    with os.scandir(directory) as entries:
        return sorted(
            entry.name for entry in entries if entry.is_file(follow_symlinks=False)
        )


def audio_files(directory: str | PathLike[str]) -> list[str]:
    """Return the names of the audio files in ``directory``."""
    return [
        name for name in _regular_names(directory) if name.endswith(AUDIO_EXTENSIONS)
    ]


def regular_files(directory: str | PathLike[str]) -> list[str]:
    """Return the names of all regular files in ``directory``."""
    return _regular_names(directory)


def tone_files(directory: str | PathLike[str]) -> list[str]:
    """Return the names of the tone files in ``directory``."""
    return [
        name for name in _regular_names(directory) if name.endswith(TONE_EXTENSION)
    ]


def _read_tones(path: str | PathLike[str]) -> list[tuple[float, int, int]]:
    """Read ``symbol start end`` triples, stopping at the first bad one."""
    tokens = iter(Path(path).read_text().split())
    tones = []
    for symbol, start, end in zip(tokens, tokens, tokens):
        try:
            tones.append((float(symbol), int(start), int(end)))
        except ValueError:
            break
    return tones


def extract_symbol_file(filename: str | PathLike[str]) -> list[float]:
    """Write the ``.tskm`` symbol file of a tones file.

    Each distinct symbol gets a line ``index<TAB>value<TAB>LABEL<index>``.
    Returns the distinct symbols in ascending order.
    """
    symbols = sorted({symbol for symbol, _, _ in _read_tones(filename)})
    Path(f"{filename}{SYMBOL_SUFFIX}").write_text(
        "".join(
            f"{counter}\t{value:g}\t{SYMBOL_LABEL}{counter}\n"
            for counter, value in enumerate(symbols)
        )
    )
    return symbols


def rewrite_tones(filename: str | PathLike[str], symbols: Iterable[float]) -> None:
    """Replace every symbol of a tones file by its index among ``symbols``.

    A value missing from ``symbols`` gets the index one past the last.
    Nothing is done when ``symbols`` is empty.
    """
    ordered = sorted(set(symbols))
    if not ordered:
        return
    index = {value: position for position, value in enumerate(ordered)}
    missing = len(ordered)
    lines = [
        f"{index.get(value, missing)}\t{start}\t{end}\n"
        for value, start, end in _read_tones(filename)
    ]
    Path(filename).write_text("".join(lines))


def preprocess(filename: str | PathLike[str]) -> list[float]:
    """Prepare a tones file for mining and return its distinct symbols.

    Fundamental-frequency files are first snapped to the nearest notes and
    get note names in their symbol file; other files get generic labels.
    Raises ``OSError`` when a file cannot be read or written.
    """
    if "FundamentalFrequency" in str(filename):
        rewrite(filename)
        symbols = extract_frequency_file(filename)
    else:
        symbols = extract_symbol_file(filename)
    rewrite_tones(filename, symbols)
    return symbols