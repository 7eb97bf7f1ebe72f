"Implements ``dogma show``"

import logging
from collections.abc import Mapping

import click

import dogma
from dogma.cli.shared_options import command
from dogma.config import ConfigMgr, to_yaml

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


class ConfigPropertyParam(click.ParamType):
    """Handles tab expansion for ``dogma show`` arguments"""
    name = "property"
    _properties = None

    @property
    def properties(self):
        """Find properties offered by ConfigMgr"""
        if not self._properties:
            self._properties = {
                prop: getattr(getattr(ConfigMgr, prop), "__doc__")
                for prop in dir(ConfigMgr)
                if (prop[0] != "_"
                    and isinstance(getattr(ConfigMgr, prop), property))
            }
        return self._properties

    def shell_complete(self, ctx, param, incomplete):
        """Complete property names for the shell"""
        from click.shell_completion import CompletionItem
        return [CompletionItem(x) for x in self.properties
                if x.startswith(incomplete)]

    def __repr__(self):
        props = "\n".join(
            "  {}: {}".format(p, self.properties[p].strip())
            for p in sorted(self.properties)
            if self.properties[p]
        )
        return "\n".join(["Properties:", props])


def show_help(ctx, _param=None, value=True):
    """Display click command help"""
    if value:
        helpstr = [ctx.get_help(), '']
        arg_docs = [repr(param.type)
                    for param in ctx.command.params
                    if isinstance(param, click.Argument)]
        click.echo("\n".join(helpstr + arg_docs), color=ctx.color)
        ctx.exit()


#: Plain attributes of ConfigMgr that may be shown besides its properties
SHOWN_ATTRIBUTES = ("root", "conffiles")


def lookup_property(cfg, prop):
    """Resolve dotted path ``prop`` within config ``cfg``

    The first segment must name a ConfigMgr property or one of
    `SHOWN_ATTRIBUTES`. Later segments index into sections by key and
    into lists by number.
    """
    key, _, prop = prop.partition(".")
    if key not in ConfigPropertyParam().properties and key not in SHOWN_ATTRIBUTES:
        raise click.UsageError(f"Unknown property '{key}'")
    obj = getattr(cfg, key)
    while prop:
        key, _, prop = prop.partition(".")
        try:
            if isinstance(obj, Mapping):
                obj = obj[key]
            elif isinstance(obj, list):
                obj = obj[int(key)]
            else:
                raise KeyError(key)
        except (KeyError, IndexError, ValueError):
            raise click.UsageError(f"Unknown property '{key}'") from None
    return obj


@command(add_help_option=False)
@click.argument(
    "prop", nargs=1, metavar="PROPERTY", required=False,
    type=ConfigPropertyParam()
)
@click.option(
    "--help", "-h", callback=show_help, expose_value=False, is_flag=True
)
@click.option(
    "--source", "-s", is_flag=True,
    help="Show each config file separately"
)
@click.pass_context
def show(ctx, prop, source):
    """
    Show configuration properties

    PROPERTY may be a dotted path, e.g. ``display.separator``. Without
    PROPERTY, ``--source`` shows the content of each config file.
    """
    if not prop and not source:
        show_help(ctx)

    cfg = dogma.get_config()
    if not prop:
        click.echo(cfg.to_yaml(show_source=True).rstrip("\n"))
        return

    log.debug("querying prop %s", prop)
    click.echo(to_yaml(lookup_property(cfg, prop)).rstrip("\n"))
