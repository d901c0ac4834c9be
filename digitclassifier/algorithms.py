"""Nearest-neighbour classifiers comparing sample vectors."""

import math
from abc import ABC, abstractmethod

DEFAULT_NB_SAMPLES = 70


def scalar_product(vec1, vec2):
    """Dot product of two vectors of equal length."""
    if len(vec1) != len(vec2):
        raise ValueError("scalar product needs vectors of the same length")
    return sum(a * b for a, b in zip(vec1, vec2))


def norm(vec):
    """Euclidean norm of a vector."""
    return math.sqrt(sum(x * x for x in vec))


class Algorithm(ABC):
    """Classifier labelling each test record with its best training match."""

    name = ""
    algo_id = 0

    def __init__(self, nb_samples=DEFAULT_NB_SAMPLES):
        self.nb_samples = nb_samples
        self.predicted = []
        self.percentage = 0

    def _head(self, vec):
        count = max(self.nb_samples, 0)
        if len(vec) < count:
            raise ValueError(f"vector has {len(vec)} samples, {count} needed")
        return list(vec[:count])

    def process(self, training, testing):
        """Predict a label for every test record, then score the predictions."""
        if not training.records and testing.records:
            raise ValueError("no training data")
        self.predicted = []
        for _, vec_testing in testing.records:
            scores = [
                self.apply_method(vec_testing, vec_training)
                for _, vec_training in training.records
            ]
            self.predicted.append(training.records[self.best_index(scores)][0])
        self.compute_percentage(testing)

    def compute_percentage(self, testing):
        """Set the whole percentage of predictions matching the test labels."""
        if not testing.records:
            raise ValueError("no testing data")
        if len(self.predicted) < len(testing.records):
            raise ValueError("fewer predictions than test records")
        good = sum(
            predicted == key
            for predicted, (key, _) in zip(self.predicted, testing.records)
        )
        self.percentage = 100 * good // len(testing.records)

    @abstractmethod
    def apply_method(self, vec_testing, vec_training):
        """Score how a test vector relates to a training vector."""

    @abstractmethod
    def best_index(self, scores):
        """Index of the best score; the first one on ties."""

    def describe(self):
        """Name, sample count, predictions and score."""
        predicted = "".join(f"{label} " for label in self.predicted)
        lines = [
            "-------------PRINT ALGO-------------",
            f"Name = {self.name}",
            f"Number of sample to use = {self.nb_samples}",
            "Predicted results : ",
            predicted,
            f"Percentage of good results = {self.percentage}",
            "-----------------------------------",
        ]
        return "\n".join(lines)


class MeanAbsoluteDifference(Algorithm):
    """Mean of absolute sample differences; the smallest wins."""

    name = "Mean of absolutes differences between each samples"
    algo_id = 1

    def apply_method(self, vec_testing, vec_training):
        testing = self._head(vec_testing)
        training = self._head(vec_training)
        if not testing:
            return math.nan
        return sum(abs(a - b) for a, b in zip(testing, training)) / len(testing)

    def best_index(self, scores):
        return min(range(len(scores)), key=scores.__getitem__)


class Cosine(Algorithm):
    """Cosine similarity; the largest wins."""

    name = "Cosine"
    algo_id = 2

    def apply_method(self, vec_testing, vec_training):
        testing = self._head(vec_testing)
        training = self._head(vec_training)
        product = scalar_product(testing, training)
        denominator = norm(training) * norm(testing)
        if denominator == 0:
            return math.nan if product == 0 else math.copysign(math.inf, product)
        return product / denominator

    def best_index(self, scores):
        return max(range(len(scores)), key=scores.__getitem__)


ALGORITHMS = (MeanAbsoluteDifference, Cosine)


def make_algorithm(algo_id, nb_samples=DEFAULT_NB_SAMPLES):
    """Build the algorithm with the given id."""
    for cls in ALGORITHMS:
        if cls.algo_id == algo_id:
            return cls(nb_samples)
    raise ValueError(f"unknown algorithm id: {algo_id}")