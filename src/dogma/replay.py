"""
Step by step replay of transcription and translation

The steps are derived from results already computed by
`dogma.pipeline`. They carry everything needed to draw one frame of
the process for a learner, but no timing.
"""

from typing import Iterator, NamedTuple, Sequence, Tuple

from dogma.codons import CODON_LENGTH


def spaced(seq: str) -> str:
    """Render a strand with a space between symbols"""
    return " ".join(seq)


class TranscriptionStep(NamedTuple):
    """RNA polymerase has just added one base to the mRNA"""
    index: int
    dna_base: str
    rna_base: str
    #: mRNA built so far, including ``rna_base``
    partial: str
    #: Fraction of the strand transcribed after this step
    progress: float


class TranslationStep(NamedTuple):
    """The ribosome has just read one codon"""
    index: int
    codon: str
    #: mRNA preceding the codon
    before: str
    #: mRNA following the codon
    after: str
    amino_acid: str
    #: Protein chain built so far, including ``amino_acid``
    chain: Tuple[str, ...]
    progress: float


def transcription_steps(dna: str, mrna: str) -> Iterator[TranscriptionStep]:
    """Yield one step per base of ``mrna``"""
    if len(dna) != len(mrna):
        raise ValueError(
            f"DNA and mRNA differ in length ({len(dna)} != {len(mrna)})")
    dna = dna.upper()
    for i, base in enumerate(mrna):
        yield TranscriptionStep(
            index=i,
            dna_base=dna[i],
            rna_base=base,
            partial=mrna[:i + 1],
            progress=(i + 1) / len(mrna),
        )


def translation_steps(mrna: str,
                      protein: Sequence[str]) -> Iterator[TranslationStep]:
    """Yield one step per amino acid in ``protein``

    The codon for the ``i``-th amino acid is read at offset ``3*i``.
    """
    protein = tuple(protein)
    if len(protein) * CODON_LENGTH > len(mrna):
        raise ValueError(
            f"{len(protein)} amino acids cannot come from {len(mrna)} bases")
    for i, amino_acid in enumerate(protein):
        start = i * CODON_LENGTH
        end = start + CODON_LENGTH
        yield TranslationStep(
            index=i,
            codon=mrna[start:end],
            before=mrna[:start],
            after=mrna[end:],
            amino_acid=amino_acid,
            chain=protein[:i + 1],
            progress=(i + 1) / len(protein),
        )
