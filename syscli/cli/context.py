from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from syscli.core.config import Config, default_config_path, load_config
from syscli.core.result import Err
from syscli.output.console import ConsoleProtocol, RichConsole
from syscli.output.diagnostics import init_diagnostics


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    logger: logging.Logger
    console: ConsoleProtocol


def build_context(env: Mapping[str, str] | None = None) -> CLIContext:
    """Load config and start the diagnostic sink.

    Config problems are not fatal: defaults apply and the problem is logged
    as soon as the sink exists.
    """
    path = default_config_path(env)
    loaded = load_config(path, env=env)
    config = Config() if isinstance(loaded, Err) else loaded.value

    logger = init_diagnostics(config.logging.level)
    if isinstance(loaded, Err):
        where = loaded.error.path or path
        logger.warning("Ignoring config %s: %s", where, loaded.error.message)

    return CLIContext(
        config=config,
        logger=logger,
        console=RichConsole(stderr=True),
    )
