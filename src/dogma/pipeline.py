"""
Transcription and translation of DNA sequences

The three stages `validate`, `transcribe` and `translate` are pure
functions, each consuming the output of the previous one. `run` chains
them and bundles the results in an `Expression`.
"""

import logging
import re
from typing import List, NamedTuple, Sequence, Tuple

from dogma.codons import CODON_LENGTH, NU, lookup
from dogma.exceptions import InvalidCodon, InvalidSequence

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

DNA_RE = re.compile(r"[ATCG]+", re.IGNORECASE)
TRANSCRIPTION = str.maketrans("T", "U")
DEFAULT_SEPARATOR = " - "


def validate(sequence: str) -> bool:
    """Check that ``sequence`` is a non-empty DNA sequence

    Case is ignored. There is no partial validation: a single
    character outside ``ATCG`` rejects the whole sequence.
    """
    return bool(DNA_RE.fullmatch(sequence))


def transcribe(dna: str) -> str:
    """Transcribe DNA into messenger RNA

    Every ``T`` becomes ``U``, all other bases are passed through
    uppercased. This yields the mRNA as read off the coding strand; no
    base pairing complement is computed.
    """
    return dna.upper().translate(TRANSCRIPTION)


def codons(rna: str):
    """Yield ``(position, codon)`` for each complete codon in ``rna``

    Codons are read left to right in frame from offset 0. A trailing
    partial codon is dropped.
    """
    for pos in range(0, len(rna) - CODON_LENGTH + 1, CODON_LENGTH):
        yield pos, rna[pos:pos + CODON_LENGTH]


def _translate(rna: str):
    """Returns the amino acid codes and whether a stop codon was hit"""
    protein = []
    for pos, codon in codons(rna):
        amino_acid = lookup(codon, pos)
        if amino_acid.is_stop:
            log.debug("Stop codon %s at position %i", codon, pos)
            return protein, True
        protein.append(amino_acid.code)
    # the leftover partial codon is dropped, but must still be RNA
    pos = len(rna) - len(rna) % CODON_LENGTH
    partial = rna[pos:]
    if any(nuc not in NU for nuc in partial.upper()):
        raise InvalidCodon(partial, pos)
    return protein, False


def translate(rna: str) -> List[str]:
    """Translate messenger RNA into amino acid codes

    Reading stops at the first stop codon, which contributes nothing
    to the result. A trailing partial codon is ignored unless it holds
    symbols other than ``AUCG``.

    >>> translate("AUGUAA")
    ['Met']

    Raises:
      InvalidCodon: if a codon read, or the trailing partial codon, has
        symbols other than ``AUCG``
    """
    return _translate(rna)[0]


def format_protein(protein: Sequence[str],
                   separator: str = DEFAULT_SEPARATOR) -> str:
    """Join amino acid codes for display"""
    return separator.join(protein)


class Expression(NamedTuple):
    """Result of running the full pipeline on one DNA sequence"""
    #: Validated, uppercased DNA
    dna: str
    #: Transcribed messenger RNA
    mrna: str
    #: Amino acid codes
    protein: Tuple[str, ...]
    #: True if translation ended on a stop codon
    stopped: bool = False

    def format(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return format_protein(self.protein, separator)


def run(sequence: str) -> Expression:
    """Validate, transcribe and translate ``sequence``

    Surrounding whitespace is ignored.

    Raises:
      InvalidSequence: if ``sequence`` is not DNA. Nothing is
        transcribed in that case.
    """
    dna = sequence.strip()
    if not validate(dna):
        raise InvalidSequence(dna)
    mrna = transcribe(dna)
    protein, stopped = _translate(mrna)
    log.info("Expressed %i bases as %i amino acids", len(dna), len(protein))
    return Expression(dna.upper(), mrna, tuple(protein), stopped)
