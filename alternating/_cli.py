import typing as ty

import click
from omegaconf import OmegaConf, DictConfig, ListConfig

from alternating import load, policies
from alternating.alternator import Alternating, turns


DEFAULTS = {"policy": "all", "fill": "", "plugins": []}


def read_config(
    config_path: ty.Optional[str], **overrides: ty.Any
) -> DictConfig:
    """Merges the defaults, the YAML file at ``config_path`` and the
    options passed explicitly, in increasing order of precedence.
    """
    conf = OmegaConf.create(DEFAULTS)
    if config_path is not None:
        conf = OmegaConf.merge(conf, OmegaConf.load(config_path))
    explicit = {key: val for key, val in overrides.items() if val is not None}
    return OmegaConf.merge(conf, explicit)  # type: ignore


def config_plugins(conf: DictConfig) -> ty.List[str]:
    """Plugin module names from the config. A single name is accepted
    in place of a list.
    """
    plugins = conf.plugins
    if plugins is None:
        return []
    if isinstance(plugins, str):
        return [plugins]
    if not isinstance(plugins, ListConfig):
        raise click.BadParameter(
            f"plugins must be a module name or a list of them, "
            f"not {plugins!r}.",
            param_hint="'--config'",
        )
    return [str(name) for name in plugins if name is not None]


def _lines(stream: ty.TextIO) -> ty.Iterator[str]:
    return (line.rstrip("\n") for line in stream)


@click.command()
@click.argument("left", type=click.File("r"))
@click.argument("right", type=click.File("r"))
@click.option(
    "--policy",
    default=None,
    help="Alternation policy: 'all' (default), 'blind', 'no-remainder', "
    "or one registered by a plugin.",
)
@click.option(
    "--fill",
    default=None,
    help="Text echoed for an absent turn of the 'blind' policy.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file providing defaults for policy, fill and plugins.",
)
@click.option(
    "--plugin",
    "plugins",
    multiple=True,
    help="Module registering extra policies. May be repeated.",
)
def alternate(left, right, policy, fill, config_path, plugins):
    """Echoes the lines of LEFT and RIGHT, taking turns between them."""
    conf = read_config(config_path, policy=policy, fill=fill)
    plugin_list = config_plugins(conf)
    try:
        load.load_plugins(plugin_list + list(plugins))
    except (ImportError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="'--plugin'") from None
    try:
        alternator = policies.create(conf.policy, _lines(left), _lines(right))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--policy'") from None
    if isinstance(alternator, Alternating):
        items = turns(alternator, fillvalue=conf.fill)
    else:
        items = alternator
    for item in items:
        click.echo(item)
