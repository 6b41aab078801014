"""The reset-error service: clears controller errors and alarms remotely."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, Protocol

__all__ = ["MotionReadiness", "ServiceResult", "Controller", "reset_error"]

_log = logging.getLogger(__name__)

RESET_ERROR_CHECK_TIMEOUT_MS = 5000
RESET_ERROR_CHECK_PERIOD_MS = 50


class MotionReadiness(enum.Enum):
    """Readiness of the controller for motion."""

    READY = "ready"
    NOT_REMOTE = "not_remote"
    ERROR = "error"
    MAJOR_ALARM = "major_alarm"
    ALARM = "alarm"
    OTHER_TRAJ_MODE_ACTIVE = "other_traj_mode_active"


@dataclass
class ServiceResult:
    """Outcome of a service call: a readiness code and a readable message."""

    result_code: MotionReadiness
    message: str


class Controller(Protocol):
    """What the reset service needs from the robot controller."""

    def is_remote(self) -> bool: ...

    def reset_pfl_during_ros_move(self) -> None: ...

    def reset_mp_inc_move_error(self) -> None: ...

    def is_error(self) -> bool: ...

    def cancel_error(self) -> bool:
        """Cancel the active error; return True on success."""
        ...

    def is_major_alarm(self) -> bool: ...

    def is_alarm(self) -> bool: ...

    def reset_alarm(self) -> bool:
        """Reset the active alarm; return True on success."""
        ...

    def io_status_update(self) -> None: ...


def _attempt(
    controller: Controller,
    sleep: Callable[[float], None],
    timeout_ms: int,
    period_ms: int,
) -> ServiceResult:
    if not controller.is_remote():
        return ServiceResult(MotionReadiness.NOT_REMOTE, "Pendant is not in REMOTE mode")

    # internal error flags, not real controller errors
    controller.reset_pfl_during_ros_move()
    controller.reset_mp_inc_move_error()

    if controller.is_error() and not controller.cancel_error():
        return ServiceResult(MotionReadiness.ERROR, "Robot has an active ERROR")

    if controller.is_major_alarm():
        return ServiceResult(
            MotionReadiness.MAJOR_ALARM,
            "Major alarm active. Cannot be reset. Check teach pendant",
        )

    if controller.is_alarm():
        if not controller.reset_alarm():
            return ServiceResult(MotionReadiness.ALARM, "Robot has an active ALARM")

        for _ in range(0, timeout_ms, period_ms):
            controller.io_status_update()
            if not controller.is_alarm():
                break
            sleep(period_ms / 1000.0)

        if controller.is_alarm():
            return ServiceResult(MotionReadiness.ALARM, "Robot has an active ALARM")

    return ServiceResult(MotionReadiness.READY, "success")


def reset_error(
    controller: Controller,
    sleep: Callable[[float], None] = time.sleep,
    timeout_ms: int = RESET_ERROR_CHECK_TIMEOUT_MS,
    period_ms: int = RESET_ERROR_CHECK_PERIOD_MS,
) -> ServiceResult:
    """Try to clear errors and alarms on ``controller``.

    ``sleep`` is called with the polling period in seconds while waiting
    for an alarm reset to take effect.
    """
    _log.debug("reset: attempting to reset controller")
    result = _attempt(controller, sleep, timeout_ms, period_ms)
    _log.debug("reset: %s", result.message)
    return result