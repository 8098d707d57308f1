# hensei

Hensei takes a folder of audio files through a pipeline that prepares them
for mining chords and phrases from their audio descriptors.

1. **Descriptors.** `./Analysis` runs on each audio file in the input
   directory and writes its descriptor files to `<input>_desc/`. Audio files
   are those whose names end in `aif`, `aiff`, `mp3`, `wav` or `wave`.
2. **Segmentation.** `./Segmentation` runs on each descriptor file with a
   segment count of 128 and writes tone files to `<input>_tones/`.
3. **Preprocessing.** Each tone file whose name ends in `int` has its values
   replaced by symbol indices, and a `.tskm` symbol table is written next to
   it. Files whose name contains `FundamentalFrequency` are first snapped to
   the nearest equal-tempered note, and their symbol table holds note names.
   The symbol table of any other file holds the labels `LABEL0`, `LABEL1`,
   and so on.
4. **Mining.** `./tskm` runs over the tones folder and writes its results to
   the output directory. The default output directory is `<input>_results/`.

## What this package does not do

Hensei does not compute audio descriptors, segment series or mine chords and
phrases itself. Those steps are done by the external programs `Analysis`,
`Segmentation` and `tskm`. These programs must be in the current working
directory when the command runs. If they are missing, the descriptor and
segmentation steps log an error for each file and go on. The mining step
then fails and the command stops.

The command does not read a configuration file. `hensei.config.read_config`
can parse one, but the pipeline does not use it.

## Installation

```
pip install .
```

## Command line

```
hensei INPUT [OUTPUT]
```

- `INPUT`: the directory that holds the audio files.
- `OUTPUT`: optional. The directory for the mining results. It is created if
  it does not exist.

With no arguments, the command prints a usage message and exits with status 1.
It also exits with status 1 in two cases:

- the input directory does not exist;
- `./tskm` fails.

On success it prints the processor time it used and exits with status 0.

## Library

The steps of the pipeline can also be used on their own:

```python
from hensei.notes import freq2midi, midi2freq, note_table
from hensei.preproc import convert_notes, convert_loudn, label
from hensei.config import read_config
from hensei.misc import preprocess
from hensei.cli import run_pipeline

freq2midi(440.0)                 # 69
midi2freq(60)                    # ~261.63
convert_notes([440.0, 261.63])   # ['A4', 'C4']
convert_loudn([0.0])             # ['sil']

config = read_config("mining.cfg")
config.descriptors               # descriptor names that were selected
config.parameters                # mining parameter values

preprocess("song_tones/song_Loudness.int")   # returns the distinct symbols
```

### Configuration file format

- Lines that start with `;` are comments.
- A line that holds only a name selects a descriptor. The known descriptors
  are `FundamentalFrequency`, `Inharmonicity`, `Loudness`, `MFCC`,
  `Noisiness` and `SpectralCentroid`.
- A line of the form `Name = value` sets a mining parameter, for example
  `MinimalSupport = 5`. The known parameters are returned by
  `hensei.config.parameter_names()`.
- Unknown names are ignored. Malformed lines are logged and skipped.

### Modules

- `hensei.config`: reads configuration files (`read_config`, `read_value`,
  `Config`).
- `hensei.notes`: converts between frequency and MIDI number, builds the
  table of the 128 MIDI notes, and prepares fundamental-frequency tone files
  (`rewrite`, `extract_frequency_file`).
- `hensei.preproc`: sorts descriptor values into named bins, such as loudness
  levels (`sil` … `fff`) or spectral centroid levels (`nil` … `very_high`).
  `label` reads a descriptor file and writes one label per line.
- `hensei.misc`: lists audio, tone and regular files in a directory. It also
  writes symbol tables and rewrites tone files (`preprocess`).
- `hensei.cli`: the command line driver (`main`, `run_pipeline`).
- `hensei.matrix.Matrix`: a small row-major matrix of floats. It supports
  row and column slicing, merging, transposition, sums, means, the norm, and
  in-place scalar arithmetic.
- `hensei.analysis`: holds the default descriptor analysis parameters
  (`default_analysis_params`) and `write_ircam_config`, which writes the
  analysis configuration file. It also has `restructure_features`, which
  restructures descriptor results, and `write_descriptors`, which writes each
  descriptor to its own file.
- `hensei.graph.Graph`: a directed graph with DOT export.
- `hensei.sequences`: helpers for subsets, sublists and subsequences of sets.