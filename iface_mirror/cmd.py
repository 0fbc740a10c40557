"""
Command line interface for iface-mirror.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from pathlib import Path
from typing import List, Optional

from . import internal_error
from .config import Config
from .errors import ReflectionError
from .loader import load_model
from .model.symbols import AggregateType, ReflectionModel
from .analysis.classify import classify_member
from .analysis.interfaces import reduce_to_interface
from .analysis.dependencies import collect_required_imports
from .codegen.cloning import clone_all_declarations, clone_function_declaration


logger = logging.getLogger(__name__)


def select_interfaces(model: ReflectionModel, name: Optional[str]) -> List[AggregateType]:
    """
    Pick the interfaces to report on.

    Args:
        model: Loaded reflection model
        name: Fully qualified name of an interface or of a class implementing
            exactly one interface; all interfaces of the model when None

    Returns:
        The selected interfaces
    """
    if name is None:
        return model.interfaces()
    return [reduce_to_interface(model.get_type(name))]


def print_members(interface: AggregateType, config: Config) -> None:
    print(f"// members of {interface.qualified_name()}")
    for method in interface.member_functions():
        declaration = clone_function_declaration(method, config.native_linkage)
        print(f"{classify_member(method).value}\t{declaration}")


def print_imports(interface: AggregateType) -> None:
    print(f"// imports of {interface.qualified_name()}")
    for module in collect_required_imports(interface):
        print(f"import {module};")


def print_clones(interface: AggregateType, config: Config) -> None:
    print(f"// overrides of {interface.qualified_name()}")
    print(clone_all_declarations(interface, config.override_body, config.native_linkage), end="")


def run_cli(
    model_path: Path,
    interface_name: Optional[str],
    show_members: bool,
    show_imports: bool,
    show_clones: bool,
    config_path: Optional[Path] = None
) -> int:
    """
    Run iface-mirror in command line mode.

    Args:
        model_path: Path to the JSON model description
        interface_name: Interface or class to report on, all interfaces if None
        show_members: Whether to list member functions with their roles
        show_imports: Whether to list required imports
        show_clones: Whether to print override declarations
        config_path: Optional path to a generator options file

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    logger.debug("Running iface-mirror in CLI mode")

    try:
        config = Config()
        if config_path:
            config.load_options(config_path)

        model = load_model(model_path)
        interfaces = select_interfaces(model, interface_name)

        if not interfaces:
            logger.warning(f"No interfaces found in {model_path}")
            return 0

        logger.info(f"Found {len(interfaces)} interfaces to mirror")

        for interface in interfaces:
            if show_members:
                print_members(interface, config)
            if show_imports:
                print_imports(interface)
            if show_clones:
                print_clones(interface, config)

        return 0

    except ReflectionError as e:
        logger.error(f"Failed to mirror {model_path}: {e}")
        return 1
    except Exception as e:
        internal_error("CLI run failed: {}", e)
        logger.debug("Traceback", exc_info=True)
        return 1
