import pytest

from digitclassifier.cli import help_text, main
from digitclassifier.data import Data

TRAINING = "_nbData=2/_SampleMax=2\n0 1 0 \n1 0 1 \n"
TESTING = "_nbData=2/_SampleMax=2\n0 2 0.1 \n1 0.1 2 \n"
RAW = "2\n2\n3 1.5 2.5\n0 4 5\n"


@pytest.fixture
def files(tmp_path):
    training = tmp_path / "training.txt"
    testing = tmp_path / "testing.txt"
    training.write_text(TRAINING, encoding="utf-8")
    testing.write_text(TESTING, encoding="utf-8")
    return str(training), str(testing)


def test_help_text_general():
    assert help_text().startswith("UsageTest: classifier.exe [options] ...")
    assert "\t-a --algorithms\t\t\tPrint available algorithms\n" in help_text()


def test_help_text_topics_are_case_insensitive():
    assert help_text("g") == help_text("GUESS")
    assert help_text("guess").startswith("-g --guess")
    assert help_text("ReadData") == help_text("r")
    assert help_text("c").startswith("-c --compare")


def test_help_text_trivial_and_unknown():
    assert help_text("a") == "trivial"
    assert help_text("zzz") == "Unknown command"


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == help_text()


def test_main_help_topic(capsys):
    assert main(["--help", "r"]) == 0
    assert capsys.readouterr().out.startswith("-r --readData")


def test_main_algorithms(capsys):
    assert main(["--alg"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Name : Mean of absolutes differences between each samples, ID = 1",
        "Name : Cosine, ID = 2",
    ]


def test_main_too_many_arguments(capsys):
    assert main(["-a", "x"]) == 0
    out = capsys.readouterr().out
    assert "not enough arguments or too much arguments" in out
    assert "number of arguments = 1" in out


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_unknown_option(capsys):
    assert main(["-x"]) == 2
    assert "invalid option" in capsys.readouterr().err


def test_read_data_round_trip(tmp_path, capsys):
    raw = tmp_path / "raw.txt"
    raw.write_text(RAW, encoding="utf-8")
    out_path = tmp_path / "out.txt"
    assert main(["-r", str(raw), str(out_path)]) == 0
    out = capsys.readouterr().out
    assert "for 3, there are 1 data" in out
    first_line = out_path.read_text(encoding="utf-8").splitlines()[0]
    assert first_line == "_nbData=2/_SampleMax=2"
    data = Data()
    data.read_existing_file(str(out_path))
    assert data.records == [(0, [4.0, 5.0]), (3, [1.5, 2.5])]


def test_read_data_invalid_position_and_percentage(tmp_path, capsys):
    raw = tmp_path / "raw.txt"
    raw.write_text(RAW, encoding="utf-8")
    out_path = tmp_path / "out.txt"
    assert main(["-r", str(raw), str(out_path), "abc", "middle"]) == 0
    out = capsys.readouterr().out
    assert "invalid argument, argument must be an integer" in out
    assert "Invalid argument, position must be 'start' or 'end'" in out
    data = Data()
    data.read_existing_file(str(out_path))
    assert len(data.records) == 2


def test_read_data_missing_file(tmp_path, capsys):
    assert main(["-r", str(tmp_path / "none.txt"), str(tmp_path / "o.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_guess_with_mean_algorithm(files, capsys):
    training, testing = files
    assert main(["-g", training, testing, "1"]) == 0
    out = capsys.readouterr().out
    assert "Name = Mean of absolutes differences between each samples" in out
    assert "Percentage of good results = 100" in out


def test_guess_unknown_algorithm_falls_back_to_cosine(files, capsys):
    training, testing = files
    assert main(["-g", training, testing, "7"]) == 0
    out = capsys.readouterr().out
    assert "Choix d'algorithme inconnu : 7" in out
    assert "Name = Cosine" in out


def test_guess_sample_count_too_large(files, capsys):
    training, testing = files
    assert main(["-g", training, testing, "2", "5"]) == 0
    out = capsys.readouterr().out
    assert "il doit etre < 2" in out
    assert "Number of sample to use = 2" in out


def test_guess_negative_sample_count(files, capsys):
    training, testing = files
    assert main(["-g", training, testing, "2", "-1"]) == 0
    out = capsys.readouterr().out
    assert "car il est négatif" in out
    assert "Number of sample to use = 2" in out


def test_compare_two_algorithms(files, capsys):
    training, testing = files
    assert main(["-c", training, testing, "2", "1", "2"]) == 0
    out = capsys.readouterr().out
    assert "2 algorithme(s) a tester ajoute(s)" in out
    assert "Cosine = 100" in out
    assert "Mean of absolutes differences between each samples = 100" in out


def test_compare_non_integer_count(files, capsys):
    training, testing = files
    assert main(["-c", training, testing, "two", "1"]) == 1
    assert "error" in capsys.readouterr().err