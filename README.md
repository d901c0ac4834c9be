# digitclassifier

A small nearest-neighbour classifier for labelled sample vectors, such as
handwritten digits with labels 0 to 9. Each test vector is compared with
every training vector and gets the label of the best match. Two measures are
available:

| ID | Class | Name | Best match |
|----|-------|------|------------|
| 1  | `MeanAbsoluteDifference` | Mean of absolutes differences between each samples | smallest mean absolute difference |
| 2  | `Cosine` | Cosine | largest cosine similarity |

When scores tie, the first training vector in label order wins. The result is
the share of correct predictions, given as a whole percentage that is
rounded down.

## Installation

```
pip install .
```

Nothing outside the standard library is needed. To run the tests:

```
pip install .[test]
pytest
```

## Data files

A **raw** file looks like this:

```
<number of records>
<number of samples per record>
<label> <sample> <sample> ...
...
```

The package's **own** format has one header line, then one line per record:

```
_nbData=<N>/_SampleMax=<M>
<label> <sample> <sample> ...
```

Records are kept sorted by label. Records with the same label stay in the
order they were read. Samples are written with Python's `g` format, which
keeps six significant digits. A missing header, a record count that the file
does not reach, or a malformed number raises `ValueError`.

## Command line

```
classifier -h [command]
classifier -a
classifier -r pathFileIn pathFileOut [percentage] [start|end]
classifier -g pathFileForTraining pathFileForTesting [AlgorithmId] [k]
classifier -c pathFileForTraining pathFileForTesting count Id1 ... IdN [k]
```

Each short option also has a long form: `--help`, `--algorithms`,
`--readData`, `--guess` and `--compare`. A long option may be shortened to
any prefix that is not ambiguous.

- `-h` prints the general usage. With a command name (`r`/`readData`,
  `g`/`guess`, `c`/`compare`, `a`/`algorithms`, in any case) it prints the
  help for that command.
- `-a` lists the available algorithms with their IDs.
- `-r` reads a raw file and writes it in the package's own format.
  - `percentage` defaults to 100. Any other value keeps that percentage of
    the records in every block of 100. These are taken from the start of the
    file, or from the end when the position is `end`.
  - A position other than `start` or `end` falls back to `start`, with a
    message.
  - A percentage that is not an integer is reported, and 100 is used.
- `-g` reads two files in the package's own format and classifies the testing
  file with one algorithm.
  - The default algorithm is 2. An unknown ID also falls back to 2, with a
    message.
  - `k` is how many leading samples of each vector are used. It defaults to
    the smaller sample count of the two files. A `k` larger than that, or
    below zero, is ignored with a message.
- `-c` runs `count` algorithms, given by their IDs, on the same two files.
  It then prints each one's percentage of correct predictions. `k` works as
  for `-g`.

If the number of arguments is wrong, the command prints the arguments it was
given and does nothing else. The exit status is 0 normally and 2 for an
unknown or ambiguous option. It is 1 when a file cannot be read or written,
or when its content or a numeric argument is invalid.

## Library use

```python
from digitclassifier.data import Data
from digitclassifier.algorithms import make_algorithm
from digitclassifier.compare import CompareAlgo

raw = Data()
raw.use_file("raw.txt", "train.txt", "START", 50)  # keep 50 % per block of 100

training = Data()
training.read_existing_file("train.txt")
testing = Data()
testing.read_existing_file("test.txt")

k = min(training.nb_sample_max, testing.nb_sample_max)
algo = make_algorithm(2, k)
algo.process(training, testing)
print(algo.predicted, algo.percentage)
print(algo.describe())

comparison = CompareAlgo(testing, training)
print(comparison.which_algo([make_algorithm(1, k), make_algorithm(2, k)]))
comparison.test_algo()
print(comparison.describe())
```

In `digitclassifier.data`, `Data` holds:

- `records`: a list of `(label, samples)` pairs.
- `nb_data` and `nb_sample_max`: the counts from the file header.
- `how_much_per_data`: the number of records for each label 0 to 9. It is
  filled by `use_file`.

`Data.how_much(key)` counts the records with one label. It raises
`ValueError` when no data has been read.

In `digitclassifier.algorithms`:

- `make_algorithm(algo_id, nb_samples)` builds an algorithm by ID. It raises
  `ValueError` for an unknown ID.
- `scalar_product` and `norm` are the vector helpers used by `Cosine`.

`describe()` methods return text and do not print it.

## What it does not do

The classifier keeps no trained model. Every run compares each test vector
with the whole training set in memory, and nothing but the converted data
file is saved.