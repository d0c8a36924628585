# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import getpass
import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from qtree_lib.conf.configuration import Configuration
from qtree_lib.core.common import get_user_groups
from qtree_lib.core.config import CFG
from qtree_lib.core.error import QTreeError
from qtree_lib.core.logger import get_logger
from qtree_lib.hierarchy.deprecated import DeprecatedQueueConfigurationParser

from .presenter import QueuesPresenter

logger = get_logger(__name__)


@click.command(
    short_help="Display queues defined by a legacy configuration file.",
    help="""Build the queue hierarchy from the deprecated queue properties in CONFIG_FILE and display it.

CONFIG_FILE is a Hadoop-style XML site file (e.g. mapred-site.xml) or a flat YAML mapping.""",
    cls=HelpColorsCommand,
    help_headers_color="white",
    help_options_color="bright_blue",
)
@click.argument(
    "config_file",
    type=click.Path(path_type=Path),
    metavar="CONFIG_FILE",
)
@click.option(
    "-u",
    "--user",
    type=str,
    default=None,
    help="Display queue availability for this user instead of the current one.",
)
@click.option("--yaml", is_flag=True, help="Output the queue hierarchy in YAML format.")
def queues(config_file: Path, user: str | None, yaml: bool) -> NoReturn:
    try:
        conf = Configuration.fromFile(config_file)
        parser = DeprecatedQueueConfigurationParser(conf)
        if parser.getRoot() is None:
            raise QTreeError(
                f"No queues are configured in '{config_file}' using '{CFG.legacy_keys.queue_names}'. "
                f"Queue hierarchy is expected in '{CFG.legacy_keys.queue_conf_file}'."
            )

        user = user or getpass.getuser()
        presenter = QueuesPresenter(parser, user, get_user_groups(user))
        if yaml:
            presenter.dumpYaml()
        else:
            console = Console(record=False, markup=False)
            panel = presenter.createQueuesInfoPanel(console)
            console.print(panel)
        sys.exit(0)
    except QTreeError as e:
        logger.error(e)
        print()
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
