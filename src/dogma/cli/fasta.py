"Implements ``dogma fasta``"

import logging

import click

import dogma
from dogma.cli.shared_options import command
from dogma.fasta import fasta_dna2aa, open_fasta

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


@command()
@click.argument('input', type=click.Path(exists=True, dir_okay=False))
@click.argument('output', type=click.File('w'))
@click.option(
    "--width", "-w", type=int, metavar="N",
    help="Sequence line width [default: fasta.line_width from config]"
)
@click.option(
    "--letters/--codes", default=None,
    help="Write one-letter or three-letter amino acid codes"
)
def fasta(input, output, width, letters):  # pylint: disable=redefined-builtin
    """
    Translate DNA records in INPUT to protein FASTA in OUTPUT

    INPUT may be gzip compressed. Use "-" as OUTPUT to write to
    stdout. Records that are not DNA are skipped with a warning.
    """
    cfg = dogma.get_config()
    if width is None:
        width = int(cfg.fasta.line_width)
    if letters is None:
        letters = bool(cfg.fasta.letters)
    log.debug("Translating %s", input)
    with open_fasta(input) as inf:
        written, skipped = fasta_dna2aa(inf, output, width, letters)
    if skipped:
        log.warning("Skipped %i of %i records", skipped, written + skipped)
