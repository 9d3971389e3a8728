"""
State containers for the two-motor drone simulation.

State includes:
- Per motor: current i (A), angular velocity omega (rad/s), applied voltage u (V)
- Drone: angular rate q (rad/s), attitude angle theta (rad)

All containers are immutable. A step reads one SimulationState (the snapshot
taken at the start of the step) and produces a new one, so every equation
sees the same view of the system regardless of update order.
"""

from enum import Enum
from typing import Iterator, Tuple

import numpy as np
from archimedes import struct


class Motor(Enum):
    """Motor position on the airframe."""

    RIGHT = 0
    LEFT = 1


@struct(frozen=True)
class MotorState:
    """Electrical and mechanical state of one motor."""

    current: float = 0.0           # A
    angular_velocity: float = 0.0  # rad/s
    applied_voltage: float = 0.0   # V, constant after initialization


@struct(frozen=True)
class DroneState:
    """Rotational state of the drone body about its single axis."""

    rate: float = 0.0       # q (rad/s)
    attitude: float = 0.0   # theta (rad)


@struct(frozen=True)
class SimulationState:
    """
    Complete simulation state: two motors and the drone body.

    State variables (8 total, 6 integrated):
    - right: MotorState
    - left: MotorState
    - drone: DroneState
    """

    right: MotorState
    left: MotorState
    drone: DroneState

    @classmethod
    def initial(cls, right_voltage: float, left_voltage: float) -> 'SimulationState':
        """
        Zero currents, speeds, rate and attitude with the given voltages.

        Parameters:
        -----------
        right_voltage : float
            Voltage applied to the right motor (V)
        left_voltage : float
            Voltage applied to the left motor (V)
        """
        return cls(
            right=MotorState(applied_voltage=right_voltage),
            left=MotorState(applied_voltage=left_voltage),
            drone=DroneState(),
        )

    def motor(self, which: Motor) -> MotorState:
        """Select a motor by position."""
        if which is Motor.RIGHT:
            return self.right
        if which is Motor.LEFT:
            return self.left
        raise ValueError(f"Unknown motor: {which!r}")

    def motors(self) -> Iterator[Tuple[Motor, MotorState]]:
        """Iterate over (position, state) pairs, right first."""
        yield Motor.RIGHT, self.right
        yield Motor.LEFT, self.left

    def to_array(self) -> np.ndarray:
        """
        Convert the integrated states to a numpy array.

        Returns:
        --------
        x : np.ndarray, shape (6,)
            [i_R, omega_R, i_L, omega_L, q, theta]
        """
        return np.array([
            self.right.current, self.right.angular_velocity,
            self.left.current, self.left.angular_velocity,
            self.drone.rate, self.drone.attitude,
        ])

    def __str__(self) -> str:
        """Pretty print state."""
        return (
            f"Two-Motor Drone State:\n"
            f"  Right motor:  i={self.right.current:10.6f} A  "
            f"omega={self.right.angular_velocity:10.3f} rad/s  u={self.right.applied_voltage:.2f} V\n"
            f"  Left motor:   i={self.left.current:10.6f} A  "
            f"omega={self.left.angular_velocity:10.3f} rad/s  u={self.left.applied_voltage:.2f} V\n"
            f"  Drone:        q={self.drone.rate:10.6f} rad/s  theta={self.drone.attitude:10.6f} rad"
        )
