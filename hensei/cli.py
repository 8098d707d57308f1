"""Command line driver: descriptors, segmentation and mining of audio files."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import time
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from hensei.misc import audio_files, preprocess, regular_files, tone_files

_log = logging.getLogger(__name__)

ANALYSIS = "./Analysis"
SEGMENTATION = "./Segmentation"
TSKM = "./tskm"
SEGMENT_COUNT = "128"

USAGE = """Usage :
./Hensei [input] [output : optional]
****************
input  : Directory with audio files [wav | aif | mp3]
output : Directory with tskm files (Chords and Phrases)
****************
Example : ./Hensei folder/ results/"""


class PipelineError(RuntimeError):
    """Raised when the mining step of the pipeline fails."""


def _run_tool(args: list[str]) -> bool:
    """Run an external tool and tell whether it succeeded."""
    try:
        result = subprocess.run(args, check=False)
    except OSError as exc:
        _log.error("Cannot start %s: %s", args[0], exc)
        return False
    return result.returncode == 0


def _make_dir(path: str) -> None:
    Path(path).mkdir(mode=0o700, exist_ok=True)


def run_pipeline(
    input_path: str | PathLike[str], output: str | PathLike[str] | None = None
) -> Path:
    """Run the whole pipeline on a directory of audio files.

    Returns the directory given to the mining tool. Raises
    ``FileNotFoundError`` if the input does not exist and ``PipelineError``
    if the mining tool fails.
    """
    if not os.path.exists(input_path):
        raise FileNotFoundError(f"Input directory doesn't exist: {input_path}")

    out_dir: str | None = None
    if output is not None:
        out_dir = os.fspath(output)
        if not os.path.exists(out_dir):
            print("Output directory doesn't exist !", file=sys.stderr)
            _make_dir(out_dir)
            print("Output directory created...")

    rep = os.path.normpath(os.fspath(input_path))

    print("\t* Starting descriptor process...")
    desc_dir = f"{rep}_desc/"
    _make_dir(desc_dir)
    for name in audio_files(rep):
        audio = f"{rep}/{name}"
        print(f"file : {audio}")
        if not _run_tool([ANALYSIS, audio, desc_dir]):
            _log.error("Error while executing the descriptor analysis with %s", audio)
    print("\t* Descriptor process done...\n")

    print("\t* Starting segmentation process...")
    tone_dir = f"{rep}_tones/"
    _make_dir(tone_dir)
    for name in regular_files(desc_dir):
        descriptor = desc_dir + name
        print(descriptor)
        if not _run_tool([SEGMENTATION, descriptor, SEGMENT_COUNT, tone_dir]):
            _log.error("Error while executing Segmentation with %s", descriptor)
    print("\t* Segmentation process done...\n")

    print("\t* Preparing TSKM process...")
    for name in tone_files(tone_dir):
        tones = tone_dir + name
        print(tones)
        try:
            preprocess(tones)
        except OSError as exc:
            _log.error("Can not prepare tones file %s: %s", tones, exc)
    print("\t* TSKM preprocessing done...")

    print("\t* Starting TSKM process...")
    if out_dir is None:
        out_dir = f"{rep}_results/"
    if not _run_tool([TSKM, tone_dir, out_dir]):
        raise PipelineError(f"Error while executing TSKM with {tone_dir}")
    print("\t* TSKM process done...")
    return Path(out_dir)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline from the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 1

    start = time.process_time()
    print("Starting process...")
    try:
        run_pipeline(args[0], args[1] if len(args) > 1 else None)
    except FileNotFoundError:
        print("Input directory doesn't exist !", file=sys.stderr)
        print("Process aborted...")
        return 1
    except (PipelineError, OSError) as exc:
        print(exc, file=sys.stderr)
        print("Process aborted...")
        return 1

    print(f"Process time : {time.process_time() - start}")
    return 0


if __name__ == "__main__":
    sys.exit(main())