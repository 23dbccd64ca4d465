import pytest

from src.search.classifier import InputClassifier, QueryKind


@pytest.mark.parametrize("raw", ["1.", "1.2.3", "12", " 1.2.5 ", "10.20.30."])
def test_codes(raw):
    assert InputClassifier().classify(raw) is QueryKind.CODE


@pytest.mark.parametrize("raw", ["1.2a", "abc", "", "   ", "1..2", ".1", "1.2..", "1 2", "клапан 1.2"])
def test_text(raw):
    assert InputClassifier().classify(raw) is QueryKind.TEXT


def test_non_ascii_digits_are_text():
    # Arabic-Indic digits are not catalogue codes
    assert InputClassifier().classify("١.٢") is QueryKind.TEXT
