"""
twinrotor: RK4 simulation of a two-motor differential-thrust drone.
"""

from .core import Motor, SimulationState, DroneDynamics, RK4Integrator, rk4_step
from .io import (
    ConfigurationError,
    SimulationConfig,
    load_simulation_config,
    StateRecord,
    PrintReporter,
    TrajectoryHistory
)
from .simulation import DroneSimulation, SimulationPhase, SimulationError, simulate

__version__ = '0.1.0'

__all__ = [
    'Motor',
    'SimulationState',
    'DroneDynamics',
    'RK4Integrator',
    'rk4_step',
    'ConfigurationError',
    'SimulationConfig',
    'load_simulation_config',
    'StateRecord',
    'PrintReporter',
    'TrajectoryHistory',
    'DroneSimulation',
    'SimulationPhase',
    'SimulationError',
    'simulate'
]
