"""
Main entry point for iface-mirror.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import version
from .cmd import run_cli


logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "model",
    type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--interface", "-i", "interface_name",
    help="Fully qualified interface or class to mirror (default: all interfaces)"
)
@click.option(
    "--members",
    is_flag=True,
    help="List member functions and their getter/setter role"
)
@click.option(
    "--imports",
    is_flag=True,
    help="List modules the generated code must import"
)
@click.option(
    "--clone",
    is_flag=True,
    help="Print override declarations for every member function"
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Optional generator options file"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging"
)
@click.version_option(version=version())
def main(
    model: Path,
    interface_name: Optional[str],
    members: bool,
    imports: bool,
    clone: bool,
    config: Optional[Path],
    verbose: bool
) -> None:
    """
    Mirror the interfaces described by MODEL.

    Reads a JSON reflection model and prints, for each selected interface,
    its member roles, required imports and override declarations. Without
    any of --members, --imports or --clone, imports and overrides are printed.
    """
    # Set up logging
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)

    if not (members or imports or clone):
        imports = clone = True

    logger.debug("iface-mirror starting")

    try:
        exit_code = run_cli(model, interface_name, members, imports, clone, config)
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("iface-mirror interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
