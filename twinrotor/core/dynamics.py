"""
Equations of motion for a two-motor differential-thrust drone.

Implements four first-order ODEs:
- Motor electrical equation:   L di/dt + R i + K omega = u
- Motor mechanical equation:   J domega/dt + D omega + Cq omega^2 = K i
- Drone rotational dynamics:   Jd dq/dt = (T_R - T_L) l,  T = Ct omega^2
- Attitude kinematics:         dtheta/dt = q

Every derivative has the signature f(x, t, aux), where aux is a small typed
struct naming exactly the coupling inputs that equation needs.
"""

from archimedes import struct


@struct(frozen=True)
class MotorParameters:
    """
    DC motor and propeller constants, shared by both motors.

    inductance          : L  (H)
    resistance          : R  (Ohm)
    torque_constant     : K  (Nm/A), also the back-EMF constant (V s/rad)
    inertia             : J  (kg m^2)
    drag_coefficient    : Cq (Nm s^2), propeller load torque Cq * omega^2
    damping_coefficient : D  (Nm s), viscous damping
    """

    inductance: float
    resistance: float
    torque_constant: float
    inertia: float
    drag_coefficient: float
    damping_coefficient: float

    @property
    def electrical_time_constant(self) -> float:
        """L / R (s)."""
        return self.inductance / self.resistance


@struct(frozen=True)
class AirframeParameters:
    """
    Drone body constants.

    thrust_coefficient : Ct (N s^2), thrust Ct * omega^2
    arm_length         : l  (m), motor axis to center of rotation
    inertia            : Jd (kg m^2), about the rotation axis
    """

    thrust_coefficient: float
    arm_length: float
    inertia: float


# Auxiliary inputs, one struct per equation.

@struct(frozen=True)
class CurrentInputs:
    omega: float      # motor's own angular velocity (rad/s)
    voltage: float    # applied voltage (V)


@struct(frozen=True)
class AngularVelocityInputs:
    current: float    # motor current (A)


@struct(frozen=True)
class RateInputs:
    omega_right: float
    omega_left: float


@struct(frozen=True)
class AttitudeInputs:
    rate: float       # drone angular rate q (rad/s)


class DroneDynamics:
    """
    Pure derivative functions for the motors and the drone body.

    The model holds only configuration constants. All state, including
    coupling values from other subsystems, arrives through the arguments.
    """

    def __init__(self, motor: MotorParameters, airframe: AirframeParameters):
        """
        Initialize drone dynamics.

        Parameters:
        -----------
        motor : MotorParameters
            Motor/propeller constants (both motors are identical)
        airframe : AirframeParameters
            Drone body constants
        """
        self.motor = motor
        self.airframe = airframe

    def thrust(self, omega: float) -> float:
        """Propeller thrust Ct * omega^2 (N)."""
        return self.airframe.thrust_coefficient * omega * omega

    def load_torque(self, omega: float) -> float:
        """Propeller drag torque Cq * omega^2 (Nm)."""
        return self.motor.drag_coefficient * omega * omega

    def current_derivative(self, i: float, t: float, aux: CurrentInputs) -> float:
        """di/dt = (u - R i - K omega) / L"""
        m = self.motor
        return (aux.voltage - m.resistance * i - m.torque_constant * aux.omega) / m.inductance

    def angular_velocity_derivative(self, omega: float, t: float,
                                    aux: AngularVelocityInputs) -> float:
        """domega/dt = (K i - D omega - Cq omega^2) / J"""
        m = self.motor
        return (m.torque_constant * aux.current
                - m.damping_coefficient * omega
                - self.load_torque(omega)) / m.inertia

    def rate_derivative(self, q: float, t: float, aux: RateInputs) -> float:
        """dq/dt = (T_R - T_L) l / Jd"""
        thrust_right = self.thrust(aux.omega_right)
        thrust_left = self.thrust(aux.omega_left)
        return (thrust_right - thrust_left) * self.airframe.arm_length / self.airframe.inertia

    def attitude_derivative(self, theta: float, t: float, aux: AttitudeInputs) -> float:
        """dtheta/dt = q"""
        return aux.rate

    def __repr__(self) -> str:
        return f"DroneDynamics(motor={self.motor}, airframe={self.airframe})"
