"""
Simulation loop for the two-motor drone.
"""

from .drone_simulation import DroneSimulation, SimulationPhase, SimulationError, simulate

__all__ = ['DroneSimulation', 'SimulationPhase', 'SimulationError', 'simulate']
