"""
Core two-motor drone components.

This module provides the RK4 stepper, the motor and drone equations of
motion, and the immutable state containers.
"""

from .integrator import rk4_step, euler_step, RK4Integrator
from .dynamics import (
    MotorParameters,
    AirframeParameters,
    CurrentInputs,
    AngularVelocityInputs,
    RateInputs,
    AttitudeInputs,
    DroneDynamics
)
from .state import Motor, MotorState, DroneState, SimulationState

__all__ = [
    'rk4_step',
    'euler_step',
    'RK4Integrator',
    'MotorParameters',
    'AirframeParameters',
    'CurrentInputs',
    'AngularVelocityInputs',
    'RateInputs',
    'AttitudeInputs',
    'DroneDynamics',
    'Motor',
    'MotorState',
    'DroneState',
    'SimulationState'
]
