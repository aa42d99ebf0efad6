"""Command dispatcher — routes a validated command to its action.

Actions are plain callables keyed by command path (subcommand names
joined by a single space, ``""`` for the root command).  The dispatcher
does not interpret what an action returns or raises: a returned status
is passed through and a raised exception propagates unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from swifty_gr.core.models import ValidatedCommand
from swifty_gr.exceptions import UnknownCommandError

logger = logging.getLogger(__name__)

Action = Callable[[ValidatedCommand], int | None]
"""An executable command.  Returning ``None`` means success (status 0)."""

ActionTable = Mapping[str, Action]


def dispatch(
    command: ValidatedCommand,
    actions: ActionTable,
) -> int | UnknownCommandError:
    """Invoke the action registered for *command*.

    Returns
    -------
    int
        The action's exit status (``0`` when it returned ``None``).
    UnknownCommandError
        When no action is registered for the command path.
    """
    action = actions.get(command.key)
    if action is None:
        name = command.key or "<root>"
        logger.debug("no action registered for %r", name)
        return UnknownCommandError(name)

    logger.debug("dispatching %r", command.key or "<root>")
    status = action(command)
    return 0 if status is None else int(status)
