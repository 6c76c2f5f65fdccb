import pytest

from tone_classifier import (
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    WARNING_CAUTIOUS,
    WARNING_SKEPTICAL,
    classify,
)


@pytest.mark.parametrize("text,expected", [
    ("that party was sus, we dipped", WARNING_CAUTIOUS),
    ("we had to BOUNCE, it was sketchy", WARNING_CAUTIOUS),
    ("that fit is fire, love it", POSITIVE),
    ("ngl bro lowkey tho", NEUTRAL),
    ("this movie is mid and cringe", NEGATIVE),
    ("that story is cap, shady", WARNING_SKEPTICAL),
    ("", NEUTRAL),
])
def test_labels(text, expected):
    assert classify(text) == expected


def test_ties_are_neutral():
    # one positive, one negative
    assert classify("fire but trash") == NEUTRAL


def test_substring_matches_count():
    assert classify("so much HYPE") == POSITIVE
    assert classify("a capital idea") == WARNING_SKEPTICAL


def test_pure():
    text = "lowkey the food was bussin"
    assert classify(text) == classify(text)
