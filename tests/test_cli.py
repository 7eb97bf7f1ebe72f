import gzip
import logging

import click

import pytest

from dogma.exceptions import InvalidCodon, InvalidSequence

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def test_version(invoker):
    res = invoker.call_raises("--version")
    assert res.exit_code == 0
    assert "version" in res.output


def test_validate(invoker):
    res = invoker.call("validate", "atgc")
    assert res.output.strip() == "valid"

    res = invoker.call_raises("validate", "ATGX")
    assert res.output.strip() == "invalid"
    assert res.exit_code == 1


def test_transcribe(invoker):
    res = invoker.call("transcribe", "atgtaa")
    assert res.output.strip() == "AUGUAA"

    with pytest.raises(InvalidSequence):
        invoker.call("transcribe", "ATGX")


def test_translate(invoker):
    res = invoker.call("translate", "GGGAAAUUUCCC")
    assert res.output.strip() == "Gly - Lys - Phe - Pro"

    res = invoker.call("translate", "--separator", ",", "AUGCAUUAA")
    assert res.output.strip() == "Met,His"

    with pytest.raises(InvalidCodon):
        invoker.call("translate", "ATG")


def test_run(invoker):
    res = invoker.call("run", "ATGTAA")
    assert res.output.splitlines() == [
        "DNA:     ATGTAA",
        "mRNA:    AUGUAA",
        "Protein: Met",
    ]


def test_run_invalid_shows_error(invoker):
    res = invoker.call_raises("run", "ATGX")
    assert res.exit_code == 1
    assert "Invalid DNA sequence 'ATGX'" in res.output
    assert "Traceback" not in res.output


def test_run_steps(invoker):
    res = invoker.call("run", "--steps", "ATGCATTAA")
    lines = res.output.splitlines()
    assert "  DNA  A T G C A T T A A" in lines
    assert "     2  T → U  A U" in lines
    assert "     1   [A U G] C A U U A A  AUG → Met  Met" in lines
    assert "     2  A U G [C A U] U A A  CAU → His  Met - His" in lines
    assert "  stop codon reached" in lines
    assert lines[-1] == "Protein: Met - His"


def test_run_uses_config(invoker):
    with open("dogma.yml", "w") as f:
        f.write("display:\n  separator: '/'\n  spaced: false\n")
    res = invoker.call("run", "--steps", "ATGCAT")
    lines = res.output.splitlines()
    assert "  DNA  ATGCAT" in lines
    assert lines[-1] == "Protein: Met/His"


def test_table(invoker):
    res = invoker.call("table")
    lines = res.output.splitlines()
    assert lines[0] == "UUU Phe   UCU Ser   UAU Tyr   UGU Cys"
    assert "UUA Leu   UCA Ser   UAA Stop  UGA Stop" in lines
    assert sum(line.count(" ") > 0 for line in lines) == 16


def test_fasta(invoker):
    with open("in.fna", "w") as f:
        f.write(">one\nATGGGG\nTAA\n>two\nATGNNN\n")
    invoker.call("fasta", "in.fna", "out.faa")
    with open("out.faa") as f:
        assert f.read() == ">one\nMG\n"


def test_fasta_gz_codes(invoker):
    with gzip.open("in.fna.gz", "wt") as f:
        f.write(">one\nATGGGGAAA\n")
    invoker.call("fasta", "--codes", "-w", "6", "in.fna.gz", "out.faa")
    with open("out.faa") as f:
        assert f.read() == ">one\nMetGly\nLys\n"


def test_fasta_missing_input(invoker):
    res = invoker.call_raises("fasta", "missing.fna", "out.faa")
    assert res.exit_code == 2


def test_show(invoker):
    res = invoker.call("show", "separator")
    assert res.output.strip() == "' - '"

    res = invoker.call("show", "fasta.line_width")
    assert res.output.strip() == "60"

    res = invoker.call("show", "display")
    assert "spaced: true" in res.output.splitlines()
    assert "separator: ' - '" in res.output.splitlines()

    res = invoker.call("show", "display.spaced")
    assert res.output.strip() == "true"

    with pytest.raises(click.UsageError):
        invoker.call("show", "nonexistent")


def test_show_help(invoker):
    res = invoker.call("show")
    assert "Properties:" in res.output
    assert "separator:" in res.output


def test_verbose_option(invoker):
    invoker.call("run", "-vv", "ATG")
    assert logging.getLogger("dogma").getEffectiveLevel() == logging.DEBUG
    invoker.call("run", "-q", "ATG")
    assert logging.getLogger("dogma").getEffectiveLevel() == logging.ERROR


def test_log_file(invoker, saved_cwd):
    invoker.call("run", "-vv", "--log-file", "dogma.log", "ATG")
    with open("dogma.log") as f:
        assert "Expressed 3 bases as 1 amino acids" in f.read()


@pytest.mark.parametrize("prop", [
    "unload", "_config", "to_yaml", "instance", "display.items",
    "display.nonexistent", "fasta.line_width.x", "conffiles.x",
])
def test_show_rejects(invoker, prop):
    with pytest.raises(click.UsageError):
        invoker.call("show", prop)


def test_show_attributes(invoker, saved_cwd):
    with open("dogma.yml", "w") as f:
        f.write("fasta:\n  letters: false\n")
    res = invoker.call("show", "root")
    assert res.output.strip() == str(saved_cwd)
    res = invoker.call("show", "conffiles.1")
    assert res.output.strip() == str(saved_cwd.join("dogma.yml"))


def test_show_source(invoker, saved_cwd):
    with open("dogma.yml", "w") as f:
        f.write("fasta:\n  letters: false\n")
    res = invoker.call("show", "--source")
    lines = res.output.splitlines()
    assert lines[-3:] == [
        f"--- # from '{saved_cwd.join('dogma.yml')}' # ---",
        "fasta:",
        "  letters: false",
    ]
    assert lines[0].startswith("--- # from '")
    assert lines[0].endswith("defaults.yml' # ---")


def test_quiet_clamps_level(invoker):
    invoker.call("table", "-qqqqqq")
    assert logging.getLogger("dogma").getEffectiveLevel() == logging.CRITICAL
    invoker.call("table")
    assert logging.getLogger("dogma").getEffectiveLevel() == logging.WARNING


def test_warnings_prefixed(invoker):
    with open("in.fna", "w") as f:
        f.write(">bad\nATGNNN\n")
    res = invoker.call("fasta", "in.fna", "-")
    assert "dogma: Skipping record 'bad'" in res.output
