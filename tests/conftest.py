import logging
import shlex

import pytest

import dogma
import dogma.config

log = logging.getLogger(__name__)


# Run tests in a scratch directory
# ================================

@pytest.fixture()
def saved_cwd(tmpdir):
    with tmpdir.as_cwd():
        yield tmpdir


@pytest.fixture(autouse=True)
def fresh_config(tmpdir):
    """Point user config at the scratch dir and reload config per test"""
    orig = dogma.config.ConfigMgr.CONF_USER_FNAME
    dogma.config.ConfigMgr.CONF_USER_FNAME = str(tmpdir.join("dogma_user.yml"))
    dogma.config.ConfigMgr.unload()
    yield
    dogma.config.ConfigMgr.CONF_USER_FNAME = orig
    dogma.config.ConfigMgr.unload()


# Call into CLI
# =============

class Invoker(object):
    """Wrap invoking shell command

    Writes the equivalent shell command to cmd.sh and the output to
    out.log in the current directory.
    """
    def __init__(self):
        from click.testing import CliRunner
        self.runner = CliRunner()
        from dogma.cli import main
        self.main = main

    def call(self, *args, standalone_mode=False, **kwargs):
        """Call into dogma CLI

        ``standalone_mode`` defaults to False so that exceptions are
        passed rather than caught.
        """
        argstr = " ".join(shlex.quote(arg) for arg in args)
        with open("cmd.sh", "w") as f:
            f.write(f"#!/bin/bash -x\ndogma {argstr} \"$@\"\n")

        result = self.runner.invoke(self.main, args, **kwargs,
                                    standalone_mode=standalone_mode)

        with open("out.log", "w") as f:
            f.write(result.output)

        if result.exception and not standalone_mode:
            raise result.exception

        return result

    def call_raises(self, *args, **kwargs):
        return self.call(*args, standalone_mode=True, **kwargs)


@pytest.fixture()
def invoker(saved_cwd):
    yield Invoker()
