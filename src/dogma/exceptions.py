"""Exceptions raised by dogma"""
import sys
from typing import Optional

from click import ClickException, echo


class DogmaException(Exception):
    """Base class of all dogma Exceptions"""


class DogmaPrettyException(DogmaException, ClickException):
    """Exception that does not lead to stack trace on CLI

    Inheriting from ClickException makes ``click`` print only the
    ``self.msg`` value of the exception, rather than allowing Python
    to print a full stack trace.

    This is useful for exceptions indicating bad input or configuration
    errors. We use this, instead of `click.UsageError` and friends so
    that the exceptions can be caught and handled explicitly where
    needed.
    """


class InvalidSequence(DogmaPrettyException, ValueError):
    """Input is not a DNA sequence

    Raised when `dogma.pipeline.validate` rejects the raw input. The
    pipeline halts before transcription.

    Args:
      sequence: The rejected input
    """
    def __init__(self, sequence: str, msg: Optional[str] = None) -> None:
        self.sequence = sequence
        if msg is None:
            msg = (f"Invalid DNA sequence '{sequence}' "
                   "(only A, T, C, G allowed)")
        super().__init__(msg)


class InvalidCodon(DogmaPrettyException, ValueError):
    """A codon contains symbols outside the RNA alphabet

    Args:
      codon: The offending three symbols
      position: Offset of the codon within the RNA sequence, if known
    """
    def __init__(self, codon: str, position: Optional[int] = None) -> None:
        self.codon = codon
        self.position = position
        if position is None:
            msg = f"Invalid codon '{codon}'"
        else:
            msg = f"Invalid codon '{codon}' at position {position}"
        super().__init__(msg)


class DogmaUsageError(DogmaPrettyException):
    """General usage error"""


class DogmaConfigError(DogmaPrettyException):
    """Indicates an error in the dogma.yml config files

    Args:
      filename: Config file causing the error
      msg: The message to display
      key: Key indicating part of the config causing the error
    """
    def __init__(self, filename: str, msg: str,
                 key: Optional[str] = None) -> None:
        self.filename = filename
        self.key = key
        super().__init__(msg)

    def show(self, file=None) -> None:
        super().show(file)
        if file is None:
            file = sys.stderr
        if self.filename is None:
            return
        if self.key is None:
            echo(f"Problem occurred in {self.filename}", file=file)
        else:
            echo(f"Problem occurred in {self.filename} at key '{self.key}'",
                 file=file)
