"""Labelled sample sets: reading, subsampling and writing them."""

from collections import deque
from itertools import islice
from operator import itemgetter

from .utils import split

DIGITS = range(10)
_GROUP_SIZE = 100


def _truncdiv(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _parse_int(text, what):
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid {what}: {text!r}") from None


def _parse_record(line, nb_samples):
    fields = split(line, " ")
    wanted = max(nb_samples, 0)
    if len(fields) < wanted + 1:
        raise ValueError(f"record has too few samples ({wanted} expected): {line!r}")
    key = _parse_int(fields[0], "key")
    try:
        values = [float(field) for field in fields[1 : wanted + 1]]
    except ValueError as exc:
        raise ValueError(f"invalid sample in record {line!r}") from exc
    return key, values


def _sorted_by_key(records):
    return sorted(records, key=itemgetter(0))


class Data:
    """Records ``(label, samples)`` kept in label order, stable for equal labels."""

    def __init__(self):
        self.nb_data = 0
        self.nb_sample_max = 0
        self.records = []
        self.how_much_per_data = {}

    def describe(self):
        """Summary of the set, without the records themselves."""
        lines = [
            "------------PRINT  DATA------------",
            f"Nombre de data differentes : {self.nb_data}",
            f"Nombre de samples maximal par data : {self.nb_sample_max}",
        ]
        lines += [
            f"for {key}, there are {count} data"
            for key, count in sorted(self.how_much_per_data.items())
        ]
        lines.append("-----------------------------------")
        return "\n".join(lines) + "\n"

    def use_file(self, path_in, path_out, position="START", rate=100):
        """Read a raw file, keep ``rate`` percent of each label, write the result."""
        lines = self.read_file(path_in)
        if len(lines) < 2:
            raise ValueError(f"{path_in}: missing header lines")
        self.nb_data = _parse_int(lines[0], "number of data")
        self.nb_sample_max = _parse_int(lines[1], "number of samples")
        self.read_data(lines)
        if self.records:
            self.how_much_per_data = {digit: self.how_much(digit) for digit in DIGITS}
        else:
            self.how_much_per_data = dict.fromkeys(DIGITS, 0)
        if rate != 100:
            self.apply_rate(rate, position)
        self.write_file(path_out)

    def read_file(self, path):
        """Return the lines of a file, line endings removed."""
        with open(path, encoding="utf-8", newline="") as handle:
            return split(handle.read(), "\n")

    def read_data(self, lines):
        """Parse the records that follow the two header lines of a raw file."""
        body = lines[2 : 2 + max(self.nb_data, 0)]
        if len(body) < self.nb_data:
            raise ValueError(f"expected {self.nb_data} records, found {len(body)}")
        parsed = [_parse_record(line, self.nb_sample_max) for line in body]
        self.records = _sorted_by_key(self.records + parsed)

    def apply_rate(self, rate, position):
        """Keep ``rate`` percent of every block of 100 records, from the start or the end."""
        per_figure = _truncdiv(_truncdiv(self.nb_data, 10) * rate, 100)
        self.nb_data = _truncdiv(self.nb_data * rate, 100)
        skip = max(_GROUP_SIZE - per_figure, 0)

        source = iter(self.records if position == "START" else reversed(self.records))
        kept = []
        count = 0
        for record in source:
            kept.append(record)
            count += 1
            if count == per_figure:
                count = 0
                deque(islice(source, skip), maxlen=0)
        self.records = _sorted_by_key(kept)

    def write_file(self, path):
        """Write the set in the header-plus-records format."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(f"_nbData={self.nb_data}/_SampleMax={self.nb_sample_max}\n")
            for key, values in self.records:
                out.write(f"{key} " + "".join(f"{value:g} " for value in values) + "\n")

    def read_existing_file(self, path):
        """Read a file written by :meth:`write_file`, adding its records."""
        lines = self.read_file(path)
        if not lines:
            raise ValueError(f"{path}: empty file")
        for part in split(lines[0], "/"):
            name, _, value = part.partition("=")
            if name == "_nbData":
                self.nb_data = _parse_int(value, "_nbData")
            elif name == "_SampleMax":
                self.nb_sample_max = _parse_int(value, "_SampleMax")
        body = lines[1 : 1 + max(self.nb_data, 0)]
        if len(body) < self.nb_data:
            raise ValueError(f"expected {self.nb_data} records, found {len(body)}")
        parsed = [_parse_record(line, self.nb_sample_max) for line in body]
        self.records = _sorted_by_key(self.records + parsed)

    def how_much(self, key):
        """Number of records labelled ``key``."""
        if not self.records:
            raise ValueError("no data has been read, cannot count")
        return sum(1 for label, _ in self.records if label == key)