"""Built-in update handler (no actions configured)."""

from __future__ import annotations

from syscli.core.errors import HandlerError
from syscli.core.operation import Operation
from syscli.core.result import Ok, Result
from syscli.output.diagnostics import get_logger

from . import register

log = get_logger(__name__)


@register(Operation.UPDATE)
def update() -> Result[None, HandlerError]:
    log.debug("No update actions configured")
    return Ok(None)
