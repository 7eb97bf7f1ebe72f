import click

import dogma
from dogma.cli.express import validate, transcribe, translate, run, table
from dogma.cli.fasta import fasta
from dogma.cli.shared_options import group
from dogma.cli.show import show


@group()
@click.version_option(version=dogma.__version__)
def main(**kwargs):
    """
    Follow DNA through transcription into mRNA and translation into
    protein.

    Try ``dogma run ATGGGGAAATTTTAA --steps``.
    """


main.add_command(validate)
main.add_command(transcribe)
main.add_command(translate)
main.add_command(run)
main.add_command(table)
main.add_command(fasta)
main.add_command(show)
