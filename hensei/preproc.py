"""Labelling of audio descriptor values into named bins."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Callable, Sequence

from hensei.notes import C0_FREQUENCY, Note, approx_freq, note_table


@dataclass(frozen=True)
class Bins:
    """Labelled value ranges of a descriptor."""

    lower: tuple[float, ...]
    upper: tuple[float, ...]
    labels: tuple[str, ...]


def fundamental_frequency_bins() -> tuple[Note, ...]:
    """Return the note bins used for the fundamental frequency."""
    return note_table()


def inharmonicity_bins() -> Bins:
    """Return the inharmonicity bins."""
    return Bins(
        (0, 0.1, 0.25, 0.5, 0.75, 0.9),
        (0.1, 0.25, 0.5, 0.75, 0.9, 1),
        ("pure", "purs", "purm", "inharm", "inhars", "inhar"),
    )


def loudness_bins() -> Bins:
    """Return the loudness bins."""
    return Bins(
        (0, 0, 1, 2, 3, 4, 5, 6, 7),
        (0, 1, 2, 3, 4, 5, 6, 7, 8),
        ("sil", "ppp", "pp", "p", "mp", "mf", "f", "ff", "fff"),
    )


def noisiness_bins() -> Bins:
    """Return the noisiness bins."""
    return Bins(
        (0, 0.1, 0.25, 0.5, 0.75, 0.9),
        (0.1, 0.25, 0.5, 0.75, 0.9, 1),
        ("harp", "hars", "harm", "noism", "noiss", "noisp"),
    )


def spectral_centroid_bins() -> Bins:
    """Return the spectral centroid bins."""
    return Bins(
        (0, 0, 1.5, 1.6, 1.7, 1.8, 1.9),
        (0, 1.5, 1.6, 1.7, 1.8, 1.9, 2),
        ("nil", "very_low", "low", "med_low", "med_high", "high", "very_high"),
    )


def round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    scaled = abs(value) * 100
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value) / 100


def _classify(bins: Bins, value: float) -> str:
    # Each upper bound is compared with the truth value of ``lower <= value``;
    # the label kept is that of the last bin passed.
    label = ""
    for low, high, name in zip(bins.lower, bins.upper, bins.labels):
        if int(low <= value) < high:
            break
        label = name
    return label


def convert_notes(data: Sequence[float]) -> list[str]:
    """Label frequencies with the nearest note name."""
    table = fundamental_frequency_bins()
    labels = []
    for value in data:
        f = round2(value)
        index = 0 if f < C0_FREQUENCY else approx_freq(f, table)
        labels.append(table[index].name)
    return labels


def convert_harmo(data: Sequence[float]) -> list[str]:
    """Label inharmonicity values."""
    bins = inharmonicity_bins()
    return [_classify(bins, round2(value)) for value in data]


def convert_loudn(data: Sequence[float]) -> list[str]:
    """Label loudness values."""
    bins = loudness_bins()
    labels = []
    for value in data:
        f = round2(value)
        labels.append(bins.labels[0] if f == 0.0 else _classify(bins, f))
    return labels


def convert_noisi(data: Sequence[float]) -> list[str]:
    """Label noisiness values."""
    bins = noisiness_bins()
    return [_classify(bins, round2(value)) for value in data]


def convert_spcen(data: Sequence[float]) -> list[str]:
    """Label spectral centroid values."""
    bins = spectral_centroid_bins()
    labels = []
    for value in data:
        f = round2(value)
        labels.append(bins.labels[0] if f == 0.0 else _classify(bins, f))
    return labels


_CONVERTERS: dict[str, Callable[[Sequence[float]], list[str]]] = {
    "FundamentalFrequency": convert_notes,
    "Inharmonicity": convert_harmo,
    "Loudness": convert_loudn,
    "Noisiness": convert_noisi,
    "SpectralCentroid": convert_spcen,
}


def _read_floats(path: Path) -> list[float]:
    values = []
    for token in path.read_text().split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def label(
    desc: str,
    pathname: str | PathLike[str],
    filename: str,
    outpath: str | PathLike[str],
) -> list[str]:
    """Label the values of a descriptor file and write them to ``outpath``.

    Raises ``ValueError`` for an unknown descriptor and ``OSError`` when a
    file cannot be read or written. Returns the labels written.
    """
    data = _read_floats(Path(pathname) / filename)
    try:
        convert = _CONVERTERS[desc]
    except KeyError:
        raise ValueError(f"unable to find descriptor: {desc}") from None
    labels = convert(data)
    (Path(outpath) / filename).write_text("".join(f"{item}\n" for item in labels))
    return labels