import pytest

from dogma.pipeline import run
from dogma.replay import spaced, transcription_steps, translation_steps


def test_spaced():
    assert spaced("AUG") == "A U G"
    assert spaced("") == ""


def test_transcription_steps():
    steps = list(transcription_steps("atg", "AUG"))
    assert [step.partial for step in steps] == ["A", "AU", "AUG"]
    assert [step.dna_base for step in steps] == ["A", "T", "G"]
    assert steps[1].rna_base == "U"
    assert steps[-1].progress == 1.0
    assert steps[0].progress == pytest.approx(1 / 3)


def test_transcription_steps_length_mismatch():
    with pytest.raises(ValueError):
        list(transcription_steps("ATG", "AU"))


def test_translation_steps():
    expression = run("ATGCATTAAGGG")
    steps = list(translation_steps(expression.mrna, expression.protein))
    assert len(steps) == 2
    first, second = steps
    assert first.codon == "AUG"
    assert first.before == ""
    assert first.after == "CAUUAAGGG"
    assert first.chain == ("Met",)
    assert second.codon == "CAU"
    assert second.before == "AUG"
    assert second.amino_acid == "His"
    assert second.chain == ("Met", "His")
    assert second.progress == 1.0


def test_translation_steps_empty():
    assert list(translation_steps("AU", [])) == []


def test_translation_steps_too_long():
    with pytest.raises(ValueError):
        list(translation_steps("AUG", ["Met", "His"]))
