"Implements the pipeline subcommands ``validate``, ``transcribe``, ``translate`` and ``run``"

import logging

import click
import tqdm

import dogma
from dogma.cli.shared_options import command
from dogma.codons import CODON_TABLE, NU
from dogma.exceptions import InvalidSequence
from dogma.pipeline import format_protein
from dogma.replay import spaced, transcription_steps, translation_steps

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


separator_option = click.option(
    "--separator", "-s", metavar="TEXT",
    help="String placed between amino acids "
    "[default: display.separator from config]"
)


@command()
@click.argument("sequence")
@click.pass_context
def validate(ctx, sequence):
    """
    Check that SEQUENCE is DNA

    Prints "valid" or "invalid". Exits with status 1 if the
    sequence is invalid.
    """
    if dogma.validate(sequence.strip()):
        click.echo("valid")
    else:
        click.echo("invalid")
        ctx.exit(1)


@command()
@click.argument("sequence")
def transcribe(sequence):
    """
    Transcribe DNA SEQUENCE into mRNA
    """
    dna = sequence.strip()
    if not dogma.validate(dna):
        raise InvalidSequence(dna)
    click.echo(dogma.transcribe(dna))


@command()
@click.argument("rna")
@separator_option
def translate(rna, separator):
    """
    Translate mRNA into a protein

    Reading starts at the first base and stops at the first stop
    codon. Bases left over at the end are ignored.
    """
    cfg = dogma.get_config()
    if separator is None:
        separator = cfg.separator
    protein = dogma.translate(rna.strip())
    click.echo(format_protein(protein, separator))


def _strand(cfg, seq):
    return spaced(seq) if cfg.display.spaced else seq


def replay(cfg, expression, separator):
    """Echo each transcription and translation step"""
    click.echo(f"Transcription: {cfg.help.transcription}")
    click.echo(f"  DNA  {_strand(cfg, expression.dna)}")
    steps = tqdm.tqdm(
        transcription_steps(expression.dna, expression.mrna),
        total=len(expression.mrna), desc="transcription", unit="nt",
        leave=False, disable=None,
    )
    for step in steps:
        click.echo(f"  {step.index + 1:>4}  {step.dna_base} → {step.rna_base}"
                   f"  {_strand(cfg, step.partial)}")

    click.echo(f"Translation: {cfg.help.translation}")
    click.echo(f"  mRNA {_strand(cfg, expression.mrna)}")
    steps = tqdm.tqdm(
        translation_steps(expression.mrna, expression.protein),
        total=len(expression.protein), desc="translation", unit="aa",
        leave=False, disable=None,
    )
    for step in steps:
        click.echo(
            f"  {step.index + 1:>4}  {_strand(cfg, step.before)}"
            f" [{_strand(cfg, step.codon)}] {_strand(cfg, step.after)}"
            f"  {step.codon} → {step.amino_acid}"
            f"  {format_protein(step.chain, separator)}"
        )
    if expression.stopped:
        click.echo("  stop codon reached")


@command()
@click.argument("sequence")
@click.option(
    "--steps", is_flag=True,
    help="Replay transcription and translation step by step"
)
@separator_option
def run(sequence, steps, separator):
    """
    Express DNA SEQUENCE as mRNA and protein
    """
    cfg = dogma.get_config()
    if separator is None:
        separator = cfg.separator
    log.debug("Running pipeline on %i characters of input", len(sequence))
    expression = dogma.run(sequence)
    if steps:
        replay(cfg, expression, separator)
    click.echo(f"DNA:     {expression.dna}")
    click.echo(f"mRNA:    {expression.mrna}")
    click.echo(f"Protein: {expression.format(separator)}")


@command()
def table():
    """
    Show the codon table
    """
    for first in NU:
        for third in NU:
            click.echo("  ".join(
                f"{first}{second}{third} {CODON_TABLE[first + second + third].code:<4}"
                for second in NU
            ).rstrip())
        click.echo()
