"""
The standard genetic code as a read-only codon table
"""

import logging
from enum import Enum
from itertools import product
from types import MappingProxyType
from typing import Mapping

from dogma.exceptions import InvalidCodon

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

#: RNA alphabet in the order used to index `AA`
NU = 'UCAG'
#: One-letter amino acid codes for all 64 codons, ``UUU`` through ``GGG``
AA = 'FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG'
B2N = {a: b for a, b in zip(NU, range(len(NU)))}
CODON_LENGTH = 3


class AminoAcid(Enum):
    """Amino acids by three-letter code, plus the `STOP` signal"""
    ALA = ("Ala", "A")
    ARG = ("Arg", "R")
    ASN = ("Asn", "N")
    ASP = ("Asp", "D")
    CYS = ("Cys", "C")
    GLN = ("Gln", "Q")
    GLU = ("Glu", "E")
    GLY = ("Gly", "G")
    HIS = ("His", "H")
    ILE = ("Ile", "I")
    LEU = ("Leu", "L")
    LYS = ("Lys", "K")
    MET = ("Met", "M")
    PHE = ("Phe", "F")
    PRO = ("Pro", "P")
    SER = ("Ser", "S")
    THR = ("Thr", "T")
    TRP = ("Trp", "W")
    TYR = ("Tyr", "Y")
    VAL = ("Val", "V")
    STOP = ("Stop", "*")

    @property
    def code(self) -> str:
        """Three-letter code (``Met``)"""
        return self.value[0]

    @property
    def letter(self) -> str:
        """One-letter code (``M``)"""
        return self.value[1]

    @property
    def is_stop(self) -> bool:
        return self is AminoAcid.STOP

    @classmethod
    def from_letter(cls, letter: str) -> 'AminoAcid':
        for member in cls:
            if member.letter == letter:
                return member
        raise KeyError(letter)

    def __str__(self):
        return self.code


class Codon(str):
    """Three RNA symbols

    Instances are uppercase and guaranteed to be over ``UCAG``;
    anything else raises `InvalidCodon`.
    """
    __slots__ = ()

    def __new__(cls, value: str, position=None) -> 'Codon':
        value = str(value).upper()
        if len(value) != CODON_LENGTH or any(nuc not in B2N for nuc in value):
            raise InvalidCodon(value, position)
        return super().__new__(cls, value)

    @property
    def index(self) -> int:
        """Position of this codon in `AA`"""
        return sum(
            len(NU) ** pos * B2N[nuc]
            for pos, nuc in enumerate(reversed(self))
        )


def _build_table() -> Mapping[Codon, AminoAcid]:
    table = {}
    for symbols in product(NU, repeat=CODON_LENGTH):
        codon = Codon(''.join(symbols))
        table[codon] = AminoAcid.from_letter(AA[codon.index])
    log.debug("Built codon table with %i entries", len(table))
    return MappingProxyType(table)


#: Read-only mapping of all 64 codons to their `AminoAcid`
CODON_TABLE = _build_table()

#: Codons terminating translation
STOP_CODONS = frozenset(
    codon for codon, amino_acid in CODON_TABLE.items() if amino_acid.is_stop
)


def lookup(codon: str, position=None) -> AminoAcid:
    """Find the amino acid encoded by ``codon``

    Raises:
      InvalidCodon: if ``codon`` is not three symbols from ``UCAG``
    """
    return CODON_TABLE[Codon(codon, position)]
