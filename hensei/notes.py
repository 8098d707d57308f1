"""Notes, MIDI numbers and fundamental-frequency tone files."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from os import PathLike
from pathlib import Path

NOTE_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")
OCTAVES = ("x", "y", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10")
MIDI_NOTES = 128
C0_FREQUENCY = 16.352


@dataclass(frozen=True)
class Note:
    """A MIDI note with its frequency and name."""

    midi: int
    frequency: float
    name: str


def freq2midi(frequency: float) -> int:
    """Convert a frequency in Hz to a MIDI number, truncating toward zero."""
    return int(69 + 12 * math.log2(frequency / 440))


def midi2freq(midi: int) -> float:
    """Convert a MIDI number to its frequency in Hz."""
    return 440 * 2 ** ((midi - 69) / 12)


@lru_cache(maxsize=None)
def note_table() -> tuple[Note, ...]:
    """Return the 128 MIDI notes in order."""
    return tuple(
        Note(m, midi2freq(m), NOTE_NAMES[m % 12] + OCTAVES[m // 12])
        for m in range(MIDI_NOTES)
    )


def approx_freq(frequency: float, table: tuple[Note, ...] | None = None) -> int:
    """Return the index of the note in ``table`` nearest to ``frequency``."""
    table = note_table() if table is None else table
    midi = freq2midi(frequency)
    candidates = [m for m in (midi - 1, midi, midi + 1) if 0 <= m < len(table)]
    if not candidates:
        raise ValueError(f"frequency {frequency} is outside the note table")
    return min(candidates, key=lambda m: abs(table[m].frequency - frequency))


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


def extract_frequency_file(filename: str | PathLike[str]) -> list[float]:
    """Write the ``.tskm`` symbol file of a frequency tones file.

    Each distinct frequency gets a line ``index<TAB>frequency<TAB>note``.
    Returns the distinct frequencies in ascending order.
    """
    table = note_table()
    symbols = sorted({symbol for symbol, _, _ in _read_tones(filename)})
    lines = []
    for counter, value in enumerate(symbols):
        midi = freq2midi(value) if value > C0_FREQUENCY else 0
        lines.append(f"{counter}\t{value:g}\t{table[midi].name}\n")
    Path(f"{filename}.tskm").write_text("".join(lines))
    return symbols


def rewrite(filename: str | PathLike[str]) -> None:
    """Snap every frequency of a tones file to its nearest note, in place."""
    table = note_table()
    lines = []
    for frequency, start, end in _read_tones(filename):
        nearest = 0.0 if frequency == 0 else table[approx_freq(frequency, table)].frequency
        lines.append(f"{nearest:f}\t{start}\t{end}\n")
    Path(filename).write_text("".join(lines))