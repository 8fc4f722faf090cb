"""Built-in release handler.

No release actions are defined here; a deployment provides them through
the `syscli.handlers` entry-point group.
"""

from __future__ import annotations

from syscli.core.errors import HandlerError
from syscli.core.operation import Operation
from syscli.core.result import Ok, Result
from syscli.output.diagnostics import get_logger

from . import register

log = get_logger(__name__)


@register(Operation.RELEASE)
def release() -> Result[None, HandlerError]:
    log.debug("No release actions configured")
    return Ok(None)
