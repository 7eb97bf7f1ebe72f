"""
Translate FASTA files of DNA sequences into protein FASTA
"""

import gzip
import logging
from typing import Iterator, TextIO, Tuple

from dogma.codons import AminoAcid
from dogma.exceptions import InvalidSequence
from dogma.pipeline import run

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def open_fasta(filename: str) -> TextIO:
    """Open ``filename`` for reading, decompressing ``.gz`` files"""
    if filename.endswith(".gz"):
        return gzip.open(filename, "rt")
    return open(filename)


def read_fasta(inf: TextIO) -> Iterator[Tuple[str, str]]:
    """Yield ``(header, sequence)`` for each record

    The header is returned without the leading ``>`` and without the
    line break. Sequence lines are concatenated with whitespace removed.
    Lines before the first header are ignored.
    """
    header = None
    seq = []

    for line in inf:
        if line.startswith('>'):
            if header is not None:
                yield header, "".join(seq)
            header = line[1:].rstrip("\r\n")
            seq = []
        elif header is not None:
            seq.append(line.strip())
    if header is not None:
        yield header, "".join(seq)


def wrap(seq: str, width: int) -> str:
    """Break ``seq`` into lines of at most ``width`` characters"""
    if width <= 0:
        return seq
    return '\n'.join(seq[s:s+width] for s in range(0, len(seq), width))


def fasta_dna2aa(inf: TextIO, outf: TextIO, width: int = 60,
                 letters: bool = True) -> Tuple[int, int]:
    """Translate all records from ``inf`` writing protein FASTA to ``outf``

    Records that are not valid DNA are logged and skipped.

    Args:
      width: Line width for sequence lines
      letters: Write one-letter codes instead of three-letter codes

    Returns:
      Number of records written and number of records skipped
    """
    written = skipped = 0
    for header, seq in read_fasta(inf):
        try:
            expression = run(seq)
        except InvalidSequence:
            log.warning("Skipping record '%s': not a DNA sequence", header)
            skipped += 1
            continue
        if letters:
            aa = ''.join(AminoAcid[code.upper()].letter
                         for code in expression.protein)
        else:
            aa = ''.join(expression.protein)
        outf.write(f">{header}\n")
        if aa:
            outf.write(wrap(aa, width) + '\n')
        written += 1
    log.info("Translated %i records, skipped %i", written, skipped)
    return written, skipped
