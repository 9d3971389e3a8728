"""
Fixed-step simulation loop for the two-motor drone.

Each step:
1. Take the current state as the snapshot (immutable)
2. Integrate all six scalars with RK4; every coupling input comes from the
   snapshot, never from a value already advanced in this step
3. Advance time to n*h
4. Emit a StateRecord to every reporter

The six ODEs are coupled, but each is integrated on its own with its
auxiliary inputs frozen at the step start. This is not a joint RK4 over a
6-dimensional vector and gives numerically different trajectories.
"""

from enum import Enum
from typing import Iterable, List, Optional

from ..core.dynamics import (
    AngularVelocityInputs,
    AttitudeInputs,
    CurrentInputs,
    DroneDynamics,
    RateInputs,
)
from ..core.integrator import rk4_step
from ..core.state import DroneState, MotorState, SimulationState
from ..io.config import SimulationConfig
from ..io.reporter import Reporter, StateRecord, TrajectoryHistory


class SimulationError(RuntimeError):
    """Simulation driven outside its lifecycle."""


class SimulationPhase(Enum):
    """Lifecycle of a run: initializing, stepping, done."""

    INITIALIZING = 'initializing'
    STEPPING = 'stepping'
    DONE = 'done'


class DroneSimulation:
    """
    Open-loop simulation of two motors driving a single-axis drone.

    Voltages are fixed at initialization; the whole run is a deterministic
    function of the configuration.
    """

    def __init__(self, config: SimulationConfig,
                 reporters: Optional[Iterable[Reporter]] = None):
        """
        Initialize simulation.

        Parameters:
        -----------
        config : SimulationConfig
            Physical parameters, voltages, step size and end time
        reporters : iterable of Reporter, optional
            Consumers of the per-step StateRecord

        Raises:
        -------
        ConfigurationError
            If the configuration is invalid
        """
        config.validate()
        self.config = config
        self.dynamics = DroneDynamics(config.motor, config.airframe)
        self.reporters: List[Reporter] = list(reporters) if reporters else []

        self.phase = SimulationPhase.INITIALIZING
        self.state: Optional[SimulationState] = None
        self.step_count = 0
        self.time = 0.0

    def add_reporter(self, reporter: Reporter):
        """Attach another consumer of emitted records."""
        self.reporters.append(reporter)

    def _emit(self):
        record = StateRecord.from_state(self.time, self.state)
        for reporter in self.reporters:
            reporter.report(record)
        return record

    def reset(self) -> StateRecord:
        """
        Initialize state and emit the initial record.

        Currents, speeds, drone rate and attitude start at zero; each motor
        gets its configured voltage.
        """
        self.phase = SimulationPhase.INITIALIZING
        self.state = SimulationState.initial(self.config.right_voltage,
                                             self.config.left_voltage)
        self.step_count = 0
        self.time = 0.0

        record = self._emit()
        self.phase = SimulationPhase.STEPPING
        return record

    def _advance_motor(self, motor: MotorState, t: float, h: float) -> MotorState:
        dyn = self.dynamics
        current = rk4_step(dyn.current_derivative, motor.current, t, h,
                           CurrentInputs(omega=motor.angular_velocity,
                                         voltage=motor.applied_voltage))
        omega = rk4_step(dyn.angular_velocity_derivative, motor.angular_velocity, t, h,
                         AngularVelocityInputs(current=motor.current))
        return MotorState(current=current, angular_velocity=omega,
                          applied_voltage=motor.applied_voltage)

    def advance(self, snapshot: SimulationState, t: float) -> SimulationState:
        """
        Compute the state one step after the snapshot.

        Pure: reads only the snapshot and returns a new state.

        Parameters:
        -----------
        snapshot : SimulationState
            State at the start of the step
        t : float
            Time at the start of the step (s)

        Returns:
        --------
        new_state : SimulationState
            State at t + h
        """
        h = self.config.step_size
        dyn = self.dynamics

        right = self._advance_motor(snapshot.right, t, h)
        left = self._advance_motor(snapshot.left, t, h)

        rate = rk4_step(dyn.rate_derivative, snapshot.drone.rate, t, h,
                        RateInputs(omega_right=snapshot.right.angular_velocity,
                                   omega_left=snapshot.left.angular_velocity))
        attitude = rk4_step(dyn.attitude_derivative, snapshot.drone.attitude, t, h,
                            AttitudeInputs(rate=snapshot.drone.rate))

        return SimulationState(right=right, left=left,
                               drone=DroneState(rate=rate, attitude=attitude))

    def step(self) -> StateRecord:
        """
        Advance one step and emit the new state.

        Raises:
        -------
        SimulationError
            If the simulation has not been reset or is already done
        """
        if self.phase is SimulationPhase.INITIALIZING:
            raise SimulationError("Simulation not initialized; call reset() first")
        if self.phase is SimulationPhase.DONE:
            raise SimulationError(f"Simulation finished at t={self.time}")

        snapshot = self.state
        self.state = self.advance(snapshot, self.time)
        self.step_count += 1
        self.time = self.step_count * self.config.step_size

        if self.time >= self.config.end_time:
            self.phase = SimulationPhase.DONE
        return self._emit()

    @property
    def done(self) -> bool:
        """True once time has reached end time."""
        return self.phase is SimulationPhase.DONE

    def run(self) -> TrajectoryHistory:
        """
        Run from the initial state until end time.

        Returns:
        --------
        history : TrajectoryHistory
            Every emitted record, initial state first
        """
        history = TrajectoryHistory()
        self.reporters.append(history)
        try:
            self.reset()
            while not self.done:
                self.step()
        finally:
            self.reporters.remove(history)
            for reporter in self.reporters:
                reporter.close()
        return history


def simulate(config: SimulationConfig,
             reporters: Optional[Iterable[Reporter]] = None) -> TrajectoryHistory:
    """Run one complete simulation and return its trajectory."""
    return DroneSimulation(config, reporters).run()
