"""The select-motion-tool service: choose the tool used for motion per group."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import MutableSequence, Protocol

__all__ = ["SelectionResult", "SelectToolResponse", "select_motion_tool", "MAX_VALID_TOOL_INDEX"]

_log = logging.getLogger(__name__)

MAX_VALID_TOOL_INDEX = 64


class SelectionResult(enum.Enum):
    """Result of a selection request, with a readable message."""

    OK = ("ok", "Success")
    INVALID_CONTROLLER_STATE = ("invalid_controller_state", "Controller is not in a state that allows this selection")
    INVALID_CONTROL_GROUP = ("invalid_control_group", "Invalid control group")
    INVALID_SELECTION_INDEX = ("invalid_selection_index", "Invalid selection index")

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass
class SelectToolResponse:
    """Outcome of a select-tool request."""

    success: bool
    result_code: SelectionResult
    message: str


class _RemoteAware(Protocol):
    def is_remote(self) -> bool: ...


def _failure(result: SelectionResult) -> SelectToolResponse:
    return SelectToolResponse(False, result, result.message)


def select_motion_tool(
    controller: _RemoteAware,
    tools: MutableSequence[int],
    group_number: int,
    tool_number: int,
) -> SelectToolResponse:
    """Set the motion tool of ``group_number`` to ``tool_number``.

    ``tools`` holds the current motion tool of every control group and is
    updated in place. Only increments not yet queued use the new tool.
    """
    _log.debug("select tool: requested: grp no: %s, tool: %s", group_number, tool_number)

    if not controller.is_remote():
        response = _failure(SelectionResult.INVALID_CONTROLLER_STATE)
    elif not 0 <= group_number < len(tools):
        response = _failure(SelectionResult.INVALID_CONTROL_GROUP)
    elif not 0 <= tool_number < MAX_VALID_TOOL_INDEX:
        response = _failure(SelectionResult.INVALID_SELECTION_INDEX)
    else:
        tools[group_number] = tool_number
        response = SelectToolResponse(True, SelectionResult.OK, SelectionResult.OK.message)

    _log.debug("select tool: exit: '%s' (%s)", response.message, response.result_code.name)
    return response