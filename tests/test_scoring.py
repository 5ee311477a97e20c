import pytest
from packages.engine import rank, score_word, solutions, total_score
from packages.engine.constraints import pangrams


@pytest.mark.parametrize("word,pangram,points", [
    ("clip", False, 1),
    ("clips", False, 5),
    ("capital", False, 7),
    ("plastic", True, 14),
    ("capitals", True, 15),
])
def test_score_word(word, pangram, points):
    assert score_word(word, pangram) == points


def test_total_score_detects_pangrams(plastic_puzzle):
    assert total_score(["clips", "plastic"], plastic_puzzle) == 5 + 14
    assert total_score([], plastic_puzzle) == 0


@pytest.mark.parametrize("points,max_points,expected", [
    (0, 100, "Beginner"),
    (3, 100, "Good Start"),
    (50, 100, "Amazing"),
    (69, 100, "Amazing"),
    (70, 100, "Genius"),
    (100, 100, "Genius"),
    (0, 0, "Beginner"),
])
def test_rank(points, max_points, expected):
    assert rank(points, max_points) == expected


def test_solutions(plastic_puzzle, dictionary):
    answers = solutions(dictionary, plastic_puzzle)
    assert answers == ["attic", "capitals", "claps", "clasp", "clip", "clips",
                       "plastic", "tactic"]
    assert pangrams(answers) == ["capitals", "plastic"]
