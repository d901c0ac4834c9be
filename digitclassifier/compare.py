"""Running several classifiers on the same training and testing sets."""


class CompareAlgo:
    """Runs a list of algorithms on one training set and one testing set."""

    def __init__(self, data_for_testing, data_for_training):
        self.data_for_testing = data_for_testing
        self.data_for_training = data_for_training
        self.algos = []

    def which_algo(self, algos):
        """Select the algorithms to run and return a report describing them."""
        self.algos = list(algos)
        lines = [
            "-------------ADD ALGOS-------------",
            f"{len(self.algos)} algorithme(s) a tester ajoute(s)",
            *(algo.describe() for algo in self.algos),
            "-----------------------------------",
        ]
        return "\n".join(lines) + "\n"

    def test_algo(self):
        """Run every selected algorithm on the training and testing sets."""
        for algo in self.algos:
            algo.process(self.data_for_training, self.data_for_testing)

    def describe(self):
        """Both data sets and the score obtained by each algorithm."""
        lines = [
            "------------------------PRINT  COMP------------------------",
            "Data for training : ",
            self.data_for_training.describe(),
            "Data for testing : ",
            self.data_for_testing.describe(),
            "Percentage per algo : ",
            *(f"{algo.name} = {algo.percentage}" for algo in self.algos),
            "-----------------------------------------------------------",
        ]
        return "\n".join(lines)