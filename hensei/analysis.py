"""Descriptor analysis parameters, feature records and descriptor output files."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path

from hensei.matrix import Matrix

_log = logging.getLogger(__name__)

ENERGY_ENVELOPE = "EnergyEnvelope"
TOTAL_ENERGY = "TotalEnergy"
WINDOW_TYPE = "WindowType"


class Section(str, Enum):
    """Section of the descriptor analysis configuration a parameter belongs to."""

    PARAMETERS = "parameters"
    STANDARD = "standard"
    ENERGY = "energy"

    @property
    def header(self) -> str:
        """The section header written in the configuration file."""
        return _HEADERS[self]


_HEADERS = {
    Section.PARAMETERS: "[Parameters]",
    Section.STANDARD: "[StandardDescriptors]",
    Section.ENERGY: "[EnergyDescriptors]",
}


@dataclass(frozen=True)
class DescriptorParam:
    """One parameter of the descriptor analysis."""

    type: Section
    name: str
    value: float | str

    def config_line(self) -> str:
        """Return the ``name = value`` line of the configuration file."""
        if isinstance(self.value, str):
            return f"{self.name} = {self.value}\n"
        return f"{self.name} = {self.value:f}\n"


@dataclass
class Feature:
    """Values and frame times retrieved for one descriptor."""

    name: str
    sig: str
    values: Matrix = field(default_factory=Matrix)
    times: list[float] = field(default_factory=list)
    mean: float = 0.0
    std_dev: float = 0.0
    max: float = 0.0
    min: float = 0.0
    normalized: Matrix = field(default_factory=Matrix)
    resampled: Matrix = field(default_factory=Matrix)


_DEFAULTS: tuple[tuple[Section, str, float | str], ...] = (
    (Section.PARAMETERS, "ResampleTo", 22050),
    (Section.PARAMETERS, "NormalizeSignal", 0),
    (Section.PARAMETERS, "WindowType", "blackman"),
    (Section.PARAMETERS, "SaveShortTermTMFeatures", 1),
    (Section.PARAMETERS, "SubstractMean", 0),
    (Section.PARAMETERS, "AutoCorrelationCoeffs", 12),
    (Section.PARAMETERS, "ReducedBands", 4),
    (Section.PARAMETERS, "PerceptualBands", 24),
    (Section.PARAMETERS, "MFCCs", 13),
    (Section.PARAMETERS, "Harmonics", 20),
    (Section.PARAMETERS, "F0MaxAnalysisFreq", 3000),
    (Section.PARAMETERS, "F0MinFrequency", 200),
    (Section.PARAMETERS, "F0MaxFrequency", 1000),
    (Section.PARAMETERS, "F0AmpThreshold", 1),
    (Section.PARAMETERS, "F0AmplitudeModulation", 0),
    (Section.PARAMETERS, "RolloffThreshold", 0.95),
    (Section.PARAMETERS, "DeviationStopBand", 10),
    (Section.PARAMETERS, "DecreaseThreshold", 0.4),
    (Section.PARAMETERS, "NoiseThreshold", 0.15),
    (Section.PARAMETERS, "ChromaFreqMinHz", 77),
    (Section.PARAMETERS, "ChromaFreqMaxHz", 1500),
    (Section.PARAMETERS, "ChromaResolution", 1),
    (Section.PARAMETERS, "ChromaNormmax", 1),
    (Section.PARAMETERS, "MedianFilterOrder", 5),
    (Section.PARAMETERS, "MedianFilterNormalize", 1),
    (Section.PARAMETERS, "DynamicMorfologicFeatures", 0),
    (Section.STANDARD, "WindowSize", 0.06),
    (Section.STANDARD, "HopSize", 0.01),
    (Section.STANDARD, "TextureWindowsFrames", -1),
    (Section.STANDARD, "TextureWindowsHopFrames", -1),
    (Section.ENERGY, "WindowSize", 0.1),
    (Section.ENERGY, "HopSize", 0.002),
    (Section.ENERGY, "TextureWindowsFrames", -1),
    (Section.ENERGY, "TextureWindowsHopFrames", -1),
    (Section.ENERGY, "TemporalIncrease", 1),
    (Section.ENERGY, "TemporalDecrease", 1),
    (Section.ENERGY, "TemporalCentroid", 1),
    (Section.ENERGY, "EffectiveDuration", 1),
    (Section.ENERGY, "LogAttackTime", 1),
    (Section.ENERGY, "AmplitudeModulation", 1),
    (Section.ENERGY, "EnergyEnvelope", 1),
)


def default_analysis_params() -> list[DescriptorParam]:
    """Return the default descriptor analysis parameters, in file order."""
    return [DescriptorParam(section, name, value) for section, name, value in _DEFAULTS]


def _section_lines(params: Iterable[DescriptorParam], section: Section) -> str:
    return "".join(p.config_line() for p in params if p.type == section)


def write_ircam_config(
    params: Sequence[DescriptorParam],
    desc_path: str | PathLike[str],
    output: str | PathLike[str],
) -> str:
    """Write the descriptor analysis configuration file to ``output``.

    The descriptor list read from ``desc_path`` is copied between the
    standard and energy sections. Returns the text written. Raises
    ``OSError`` when a file cannot be read or written.
    """
    descriptor_list = Path(desc_path).read_text()
    text = "".join(
        (
            f"\n{Section.PARAMETERS.header}\n\n",
            _section_lines(params, Section.PARAMETERS),
            f"\n{Section.STANDARD.header}\n\n",
            _section_lines(params, Section.STANDARD),
            "\n",
            descriptor_list,
            f"\n{Section.ENERGY.header}\n\n",
            _section_lines(params, Section.ENERGY),
        )
    )
    Path(output).write_text(text)
    return text


# Number of columns -> 1-based inclusive column range kept.
_KEPT_COLUMNS = {9: (7, 9), 6: (6, 6), 3: (3, 3)}


def restructure_features(features: list[Feature]) -> list[Feature]:
    """Keep the relevant columns of each feature and fill an empty energy envelope.

    Features with 9, 6 or 3 columns keep columns 7-9, 6 and 3 respectively.
    An empty ``EnergyEnvelope`` receives a copy of the ``TotalEnergy`` values.
    The features are changed in place and returned.
    """
    for feature in features:
        kept = _KEPT_COLUMNS.get(feature.values.cols)
        if kept is not None:
            feature.values.slice_cols(*kept)

    total = next((f for f in features if f.name == TOTAL_ENERGY), None)
    if total is not None:
        for feature in features:
            if feature.name == ENERGY_ENVELOPE and len(feature.values) == 0:
                feature.values = Matrix(
                    total.values.rows, total.values.cols, list(total.values)
                )
    return features


def write_descriptors(
    pathname: str | PathLike[str],
    filename: str,
    descriptors: Iterable[Feature],
) -> list[Path]:
    """Write each descriptor's values, one per line, to ``pathname + filename_name``.

    Descriptors without values and the energy envelope are skipped. A file
    that cannot be written is logged and skipped. Returns the paths written.
    """
    written = []
    for desc in descriptors:
        if len(desc.values) == 0 or desc.name == ENERGY_ENVELOPE:
            continue
        path = Path(f"{pathname}{filename}_{desc.name}")
        try:
            path.write_text("".join(f"{x:g}\n" for x in desc.values))
        except OSError as exc:
            _log.error("Unable to open file %s: %s", path, exc)
            continue
        written.append(path)
    return written