"""
Configuration and state reporting.
"""

from .config import (
    ConfigurationError,
    SimulationConfig,
    load_simulation_config,
    save_simulation_config,
    create_default_config
)
from .reporter import (
    StateRecord,
    Reporter,
    PrintReporter,
    TrajectoryHistory,
    rad_per_s_to_rpm
)

__all__ = [
    'ConfigurationError',
    'SimulationConfig',
    'load_simulation_config',
    'save_simulation_config',
    'create_default_config',
    'StateRecord',
    'Reporter',
    'PrintReporter',
    'TrajectoryHistory',
    'rad_per_s_to_rpm'
]
