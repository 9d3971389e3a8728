"""
Dynamics and State Tests

Tests for the motor and drone equations of motion and the immutable
state containers.
"""

import pytest
import numpy as np
import os
import sys

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from twinrotor.core.dynamics import (
    DroneDynamics,
    MotorParameters,
    AirframeParameters,
    CurrentInputs,
    AngularVelocityInputs,
    RateInputs,
    AttitudeInputs
)
from twinrotor.core.state import Motor, MotorState, DroneState, SimulationState


@pytest.fixture
def motor_params():
    return MotorParameters(inductance=3.7e-4, resistance=1.2e-1, torque_constant=3.3e-3,
                           inertia=8.1e-6, drag_coefficient=3.0e-8, damping_coefficient=1.0e-6)


@pytest.fixture
def airframe_params():
    return AirframeParameters(thrust_coefficient=3.5e-6, arm_length=0.09, inertia=6.0e-3)


@pytest.fixture
def dynamics(motor_params, airframe_params):
    return DroneDynamics(motor_params, airframe_params)


class TestMotorEquations:
    """Electrical and mechanical motor equations."""

    def test_current_derivative(self, dynamics):
        i, omega, u = 2.0, 500.0, 7.5
        expected = (u - 1.2e-1 * i - 3.3e-3 * omega) / 3.7e-4

        result = dynamics.current_derivative(i, 0.0, CurrentInputs(omega=omega, voltage=u))
        assert result == pytest.approx(expected)

    def test_current_derivative_at_rest(self, dynamics):
        """From rest the current slope is u / L."""
        result = dynamics.current_derivative(0.0, 0.0, CurrentInputs(omega=0.0, voltage=7.5))
        assert result == pytest.approx(7.5 / 3.7e-4)

    def test_back_emf_opposes_voltage(self, dynamics):
        slow = dynamics.current_derivative(1.0, 0.0, CurrentInputs(omega=100.0, voltage=7.5))
        fast = dynamics.current_derivative(1.0, 0.0, CurrentInputs(omega=1000.0, voltage=7.5))
        assert fast < slow

    def test_angular_velocity_derivative(self, dynamics):
        omega, i = 800.0, 3.0
        expected = (3.3e-3 * i - 1.0e-6 * omega - 3.0e-8 * omega**2) / 8.1e-6

        result = dynamics.angular_velocity_derivative(omega, 0.0, AngularVelocityInputs(current=i))
        assert result == pytest.approx(expected)

    def test_no_load_torque_at_rest(self, dynamics):
        result = dynamics.angular_velocity_derivative(0.0, 0.0, AngularVelocityInputs(current=1.0))
        assert result == pytest.approx(3.3e-3 / 8.1e-6)
        assert dynamics.load_torque(0.0) == 0.0

    def test_load_torque_quadratic(self, dynamics):
        assert dynamics.load_torque(200.0) == pytest.approx(4 * dynamics.load_torque(100.0))

    def test_time_does_not_enter(self, dynamics):
        aux = CurrentInputs(omega=10.0, voltage=5.0)
        assert dynamics.current_derivative(1.0, 0.0, aux) == dynamics.current_derivative(1.0, 9.0, aux)

    def test_electrical_time_constant(self, motor_params):
        assert motor_params.electrical_time_constant == pytest.approx(3.7e-4 / 1.2e-1)


class TestDroneEquations:
    """Differential thrust and attitude kinematics."""

    def test_rate_derivative(self, dynamics):
        omega_r, omega_l = 1000.0, 950.0
        expected = (3.5e-6 * omega_r**2 - 3.5e-6 * omega_l**2) * 0.09 / 6.0e-3

        result = dynamics.rate_derivative(0.0, 0.0, RateInputs(omega_right=omega_r, omega_left=omega_l))
        assert result == pytest.approx(expected)
        assert result > 0

    def test_rate_derivative_symmetric(self, dynamics):
        """Equal motor speeds produce no net torque."""
        result = dynamics.rate_derivative(0.3, 0.0, RateInputs(omega_right=1234.5, omega_left=1234.5))
        assert result == 0.0

    def test_rate_derivative_antisymmetric(self, dynamics):
        forward = dynamics.rate_derivative(0.0, 0.0, RateInputs(omega_right=900.0, omega_left=700.0))
        reverse = dynamics.rate_derivative(0.0, 0.0, RateInputs(omega_right=700.0, omega_left=900.0))
        assert forward == pytest.approx(-reverse)

    def test_attitude_derivative(self, dynamics):
        assert dynamics.attitude_derivative(1.0, 0.0, AttitudeInputs(rate=0.25)) == 0.25

    def test_thrust(self, dynamics):
        assert dynamics.thrust(1000.0) == pytest.approx(3.5)


class TestSimulationState:
    """Immutable state containers."""

    def test_initial_state(self):
        state = SimulationState.initial(7.5, 7.4)

        assert state.right.applied_voltage == 7.5
        assert state.left.applied_voltage == 7.4
        assert np.all(state.to_array() == 0.0)
        assert state.drone == DroneState(rate=0.0, attitude=0.0)

    def test_motor_selection(self):
        state = SimulationState(
            right=MotorState(current=1.0, angular_velocity=10.0, applied_voltage=7.5),
            left=MotorState(current=2.0, angular_velocity=20.0, applied_voltage=7.4),
            drone=DroneState(rate=0.1, attitude=0.2),
        )

        assert state.motor(Motor.RIGHT).current == 1.0
        assert state.motor(Motor.LEFT).current == 2.0
        assert [m for m, _ in state.motors()] == [Motor.RIGHT, Motor.LEFT]
        assert np.allclose(state.to_array(), [1.0, 10.0, 2.0, 20.0, 0.1, 0.2])

    def test_exactly_two_motors(self):
        assert len(Motor) == 2

    def test_state_is_immutable(self):
        state = SimulationState.initial(7.5, 7.4)
        with pytest.raises(AttributeError):
            state.right.current = 5.0

    def test_string_representation(self):
        text = str(SimulationState.initial(7.5, 7.4))
        assert 'Right motor' in text
        assert 'Left motor' in text
