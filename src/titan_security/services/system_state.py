"""
Titan Security Mode/Arming State

Tracks the current house mode and the armed flag derived from it.
set_mode() is the only mutation path.
"""

import logging
from typing import Union

from ..domain.enums import ArmingPolicy, HouseMode
from ..exceptions import InvalidModeError

log = logging.getLogger(__name__)


class SystemState:
    """Process-wide mode context, passed explicitly to rules and the orchestrator."""

    def __init__(
        self,
        mode: HouseMode = HouseMode.DAY,
        policy: ArmingPolicy = ArmingPolicy.CLEARING,
    ):
        self.policy = policy
        self._mode = HouseMode.DAY
        self._armed = False
        if mode != HouseMode.DAY:
            self.set_mode(mode)

    @property
    def mode(self) -> HouseMode:
        return self._mode

    @property
    def armed(self) -> bool:
        return self._armed

    def current_mode(self) -> HouseMode:
        return self._mode

    def is_armed(self) -> bool:
        return self._armed

    def set_mode(self, requested: Union[HouseMode, str]) -> HouseMode:
        """
        Switch mode and derive the armed flag.

        Raises:
            InvalidModeError: requested is not a valid mode; state is untouched.
        """
        try:
            mode = HouseMode(requested)
        except ValueError:
            raise InvalidModeError(requested) from None

        self._mode = mode
        if mode == HouseMode.AWAY:
            self._armed = True
        elif self.policy == ArmingPolicy.CLEARING:
            self._armed = False
        # LATCHING: Day/Night keep whatever armed flag is already set

        log.debug("Mode=%s armed=%s policy=%s", mode.value, self._armed, self.policy.value)
        return mode

    def get_status(self) -> dict:
        return {
            "mode": self._mode.value,
            "armed": self._armed,
            "arming_policy": self.policy.value,
        }
