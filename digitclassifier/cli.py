"""Command line: read data files, classify them and compare algorithms."""

import sys

from .algorithms import ALGORITHMS, Cosine, make_algorithm
from .compare import CompareAlgo
from .data import Data
from .utils import enough_arguments, format_all_arguments, not_too_much_arguments

PROGRAM = "classifier"
_DEFAULT_ALGORITHM = Cosine.algo_id

_LONG_OPTIONS = {
    "help": "h",
    "readData": "r",
    "guess": "g",
    "compare": "c",
    "algorithms": "a",
}
_SHORT_OPTIONS = {f"-{letter}": letter for letter in _LONG_OPTIONS.values()}

_GENERAL_HELP = (
    "UsageTest: classifier.exe [options] ...\n"
    "\t-h --help\t\t\tPrint this help message\n"
    "\t-r --readData\t\t\tStore data from <file> in memory\n"
    "\t-g --guess\t\t\tUse <algorithm> for <files> for <k> elements\n"
    "\t-c --compare\t\t\tCompare functionning of <algorithm1> with <algorithm2>"
    " with <file> for <k> elements\n"
    "\t-a --algorithms\t\t\tPrint available algorithms\n"
)

_READ_HELP = (
    "-r --readData : Store data from <file> in memory\n"
    "Example : -r pathFileIn pathFileOut percentage position\n"
    "\t\tpathFileIn : mandatory, string\n"
    "\t\t\tPath of the file with data for reading\n"
    "\t\tpathFileOut : mandatory, string\n"
    "\t\t\tPath of the file in which data will be write\n"
    "\t\tpercentage : optional, int, default value 100\n"
    "\t\t\tPercentage read from the file\n"
    "\t\tposition : optional, string, start or end, default value start\n"
    "\t\t\tRead the beginning or the end of the file \n"
)

_GUESS_HELP = (
    "-g --guess : Use <algorithm> for <files> for <k> elements\n"
    "Example : -g pathFileForTraining pathFileForTesting AlgorithmId k\n"
    "\t\tpathFileForTraining : mandatory, string\n"
    "\t\t\tPath of the file with data to train the classifier\n"
    "\t\tpathFileForTesting : mandatory, string\n"
    "\t\t\tPath of the file with data to test\n"
    "\t\tAlgorithmId : mandatory, int\n"
    "\t\t\tId of the algorithm, must be in the list of algorithm (see also -h a)\n"
    "\t\tk : optional, int, default value maximal number of samples per data\n"
    "\t\t\tNumber of samples per data to use, should be inferior or equal to"
    " the maximal number of samples per data \n"
)

_COMPARE_HELP = (
    "-c --compare : Compare functionning of <algorithm1> with <algorithm2>"
    " with <files> for <k> elements\n"
    "Example : -c pathFileForTraining  pathFileForTesting numberOfAlgorithmToCompare"
    " AlgorithmId1 ... AlgorithmIdX k\n"
    "\t\tpathFileForTraining : mandatory, string\n"
    "\t\t\tPath of the file with data to train the classifier\n"
    "\t\tpathFileForTesting : mandatory, string\n"
    "\t\t\tPath of the file with data to test\n"
    "\t\tnumberOfAlgorithmToCompare : mandatory, int\n"
    "\t\t\tNumber of Algorithm which will be tested\n"
    "\t\tAlgorithmIdX : mandatory, int, \n"
    "\t\t\tId of the algorithm, must be in the list of algorithm (see also -h a)\n"
    "\t\t\tIt is necessary to have same number of Id as in numberOfAlgorithmToCompare \n"
    "\t\tk : optional, int, default value maximal number of samples per data\n"
    "\t\t\tNumber of samples per data to use, should be inferior or equal to"
    " the maximal number of samples per data \n"
)

_TOPIC_HELP = {
    "R": _READ_HELP,
    "READDATA": _READ_HELP,
    "G": _GUESS_HELP,
    "GUESS": _GUESS_HELP,
    "C": _COMPARE_HELP,
    "COMPARE": _COMPARE_HELP,
    "A": "trivial",
    "ALGORITHMS": "trivial",
}


def help_text(choice=None):
    """General usage, or the help for one command when ``choice`` is given."""
    if choice is None:
        return _GENERAL_HELP
    return _TOPIC_HELP.get(choice.upper(), "Unknown command")


def _parse_option(token):
    """Command letter of ``token``; None when it is not an option at all."""
    if token in _SHORT_OPTIONS:
        return _SHORT_OPTIONS[token]
    if token.startswith("--") and len(token) > 2:
        name = token[2:]
        if name in _LONG_OPTIONS:
            return _LONG_OPTIONS[name]
        matches = [full for full in _LONG_OPTIONS if full.startswith(name)]
        if len(matches) == 1:
            return _LONG_OPTIONS[matches[0]]
        if matches:
            raise ValueError(f"option '{token}' is ambiguous")
        raise ValueError(f"unrecognized option '{token}'")
    if token.startswith("-") and len(token) > 1:
        raise ValueError(f"invalid option -- '{token[1:]}'")
    return None


def _arguments_ok(argv, choice):
    if enough_arguments(argv, choice) and not_too_much_arguments(argv, choice):
        return True
    print("not enough arguments or too much arguments ")
    print(format_all_arguments(argv))
    return False


def _load(path):
    data = Data()
    data.read_existing_file(path)
    print(data.describe())
    return data


def _sample_count(text, nb_sample):
    requested = int(text)
    if requested > nb_sample:
        print(
            "Le nombre de sample choisi n'est pas pris en compte "
            "car il est trop grand : "
        )
        print(f"il doit etre < {nb_sample}")
        print()
        return nb_sample
    if requested < 0:
        print("Le nombre de sample choisi n'est pas pris en compte car il est négatif")
        print()
        return nb_sample
    return requested


def _algorithm_for(choice, nb_sample):
    try:
        return make_algorithm(choice, nb_sample)
    except ValueError:
        print(f"Choix d'algorithme inconnu : {choice}")
        print(
            f"{choice} n'est pas un choix possible, "
            f"{_DEFAULT_ALGORITHM} sera le choix retenu."
        )
        return make_algorithm(_DEFAULT_ALGORITHM, nb_sample)


def _help(argv):
    if not _arguments_ok(argv, "h"):
        return
    topic = argv[2] if len(argv) > 2 else None
    print(help_text(topic), end="" if topic is None else "\n")


def _algorithms(argv):
    if not _arguments_ok(argv, "a"):
        return
    for cls in ALGORITHMS:
        print(f"Name : {cls.name}, ID = {cls.algo_id}")


def _read_data(argv):
    print()
    if not _arguments_ok(argv, "r"):
        return
    path_in, path_out = argv[2], argv[3]
    percentage = 100
    position = "START"
    if len(argv) >= 5:
        try:
            percentage = int(argv[4])
        except ValueError:
            print(
                "Error with stoi : invalid argument, argument must be an integer"
            )
    if len(argv) >= 6:
        position = argv[5].upper()
        if position not in ("START", "END"):
            print("Invalid argument, position must be 'start' or 'end'")
            print("Default position of lecture = 'start' ")
            position = "START"
    print()
    data = Data()
    data.use_file(path_in, path_out, position, percentage)
    print(data.describe())


def _guess(argv):
    print()
    if not _arguments_ok(argv, "g"):
        return
    training = _load(argv[2])
    testing = _load(argv[3])
    nb_sample = min(training.nb_sample_max, testing.nb_sample_max)
    choice = _DEFAULT_ALGORITHM
    if len(argv) >= 5:
        choice = int(argv[4])
    if len(argv) >= 6:
        nb_sample = _sample_count(argv[5], nb_sample)
    algo = _algorithm_for(choice, nb_sample)
    algo.process(training, testing)
    print(algo.describe())


def _compare(argv):
    print()
    if not _arguments_ok(argv, "c"):
        return
    training = _load(argv[2])
    testing = _load(argv[3])
    nb_sample = min(training.nb_sample_max, testing.nb_sample_max)
    nb_algos = int(argv[4])
    if len(argv) > 5 + nb_algos:
        nb_sample = _sample_count(argv[5 + nb_algos], nb_sample)
    algos = [_algorithm_for(int(arg), nb_sample) for arg in argv[5 : 5 + nb_algos]]
    comparison = CompareAlgo(testing, training)
    print(comparison.which_algo(algos))
    comparison.test_algo()
    print(comparison.describe())


_COMMANDS = {
    "h": _help,
    "r": _read_data,
    "g": _guess,
    "c": _compare,
    "a": _algorithms,
}


def main(argv=None):
    """Run the command given by the first option; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    full = [PROGRAM, *args]
    if len(full) < 2:
        return 0
    try:
        choice = _parse_option(full[1])
    except ValueError as exc:
        print(f"{PROGRAM}: {exc}", file=sys.stderr)
        return 2
    if choice is None:
        return 0
    try:
        _COMMANDS[choice](full)
    except (OSError, ValueError) as exc:
        print(f"{PROGRAM}: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())