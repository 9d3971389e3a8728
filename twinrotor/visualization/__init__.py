"""
Visualization Module

Provides plotting of recorded drone trajectories.
"""

from .plotting import (
    plot_motor_states,
    plot_drone_attitude
)

__all__ = [
    'plot_motor_states',
    'plot_drone_attitude'
]
