"""
Simulation Configuration System

Provides the configuration object for the two-motor drone simulation,
YAML loading/saving, and validation of physical parameters.
"""

import math
import warnings
from typing import Any, Dict

import yaml
from archimedes import struct

from ..core.dynamics import AirframeParameters, MotorParameters


class ConfigurationError(ValueError):
    """Invalid or incomplete simulation configuration."""


MOTOR_KEYS = (
    'inductance',
    'resistance',
    'torque_constant',
    'inertia',
    'drag_coefficient',
    'damping_coefficient',
)
AIRFRAME_KEYS = ('thrust_coefficient', 'arm_length', 'inertia')
VOLTAGE_KEYS = ('right', 'left')
SIMULATION_KEYS = ('step_size', 'end_time')

# Divisors in the equations of motion
_POSITIVE_PARAMETERS = (
    ('motor.inductance', lambda c: c.motor.inductance),
    ('motor.inertia', lambda c: c.motor.inertia),
    ('airframe.inertia', lambda c: c.airframe.inertia),
    ('simulation.step_size', lambda c: c.step_size),
    ('simulation.end_time', lambda c: c.end_time),
)


@struct(frozen=True)
class SimulationConfig:
    """
    Read-only configuration for one simulation run.

    Attributes
    ----------
    motor : MotorParameters
        Motor and propeller constants (shared by both motors)
    airframe : AirframeParameters
        Drone body constants
    right_voltage : float
        Open-loop voltage applied to the right motor (V)
    left_voltage : float
        Open-loop voltage applied to the left motor (V)
    step_size : float
        Fixed integration step h (s)
    end_time : float
        Simulation end time (s)
    """

    motor: MotorParameters
    airframe: AirframeParameters
    right_voltage: float
    left_voltage: float
    step_size: float
    end_time: float

    @classmethod
    def nominal(cls) -> 'SimulationConfig':
        """Reference scenario: 7.5 V right, 7.4 V left, h = 0.1 ms for 0.5 s."""
        return cls.from_dict(create_default_config())

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SimulationConfig':
        """
        Build and validate a configuration from a nested dictionary.

        Every parameter is required. Missing, unknown or non-numeric entries
        raise ConfigurationError.

        Parameters
        ----------
        config_dict : dict
            Dictionary with 'motor', 'airframe', 'voltages' and
            'simulation' sections (typically from YAML)
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(config_dict).__name__}")

        sections = {
            'motor': MOTOR_KEYS,
            'airframe': AIRFRAME_KEYS,
            'voltages': VOLTAGE_KEYS,
            'simulation': SIMULATION_KEYS,
        }
        unknown = set(config_dict) - set(sections)
        if unknown:
            raise ConfigurationError(f"Unknown configuration sections: {sorted(unknown)}")

        values = {name: _read_section(config_dict, name, keys)
                  for name, keys in sections.items()}

        config = cls(
            motor=MotorParameters(**values['motor']),
            airframe=AirframeParameters(**values['airframe']),
            right_voltage=values['voltages']['right'],
            left_voltage=values['voltages']['left'],
            step_size=values['simulation']['step_size'],
            end_time=values['simulation']['end_time'],
        )
        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Nested dictionary in the layout accepted by from_dict."""
        return {
            'motor': {key: getattr(self.motor, key) for key in MOTOR_KEYS},
            'airframe': {key: getattr(self.airframe, key) for key in AIRFRAME_KEYS},
            'voltages': {'right': self.right_voltage, 'left': self.left_voltage},
            'simulation': {'step_size': self.step_size, 'end_time': self.end_time},
        }

    def validate(self):
        """
        Check physical parameters before a run.

        Raises
        ------
        ConfigurationError
            If a parameter is non-finite, or a divisor, the step size or
            the end time is not strictly positive
        """
        for section, params in self.to_dict().items():
            for key, value in params.items():
                if not math.isfinite(value):
                    raise ConfigurationError(f"{section}.{key} must be finite, got {value}")

        for name, getter in _POSITIVE_PARAMETERS:
            value = getter(self)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

        if self.motor.resistance > 0 and self.step_size > self.motor.electrical_time_constant:
            warnings.warn(
                f"Step size {self.step_size} s exceeds the motor electrical time constant "
                f"{self.motor.electrical_time_constant:.3e} s; the trajectory may be unstable",
                RuntimeWarning,
            )
        if self.step_size > self.end_time:
            warnings.warn(
                f"Step size {self.step_size} s exceeds end time {self.end_time} s; "
                f"only one step will be taken",
                RuntimeWarning,
            )

    @property
    def n_steps(self) -> int:
        """
        Number of steps after the initial state.

        Smallest n >= 1 with n * step_size >= end_time, the same test the
        simulation loop uses to stop.
        """
        n = max(1, math.ceil(self.end_time / self.step_size))
        while n * self.step_size < self.end_time:
            n += 1
        while n > 1 and (n - 1) * self.step_size >= self.end_time:
            n -= 1
        return n

    def __str__(self) -> str:
        return (f"SimulationConfig(u_R={self.right_voltage} V, u_L={self.left_voltage} V, "
                f"h={self.step_size} s, end={self.end_time} s)")


def _read_section(config_dict: Dict[str, Any], name: str, keys) -> Dict[str, float]:
    """Extract one section, requiring exactly the given numeric keys."""
    section = config_dict.get(name)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Missing configuration section: '{name}'")

    missing = [key for key in keys if key not in section]
    if missing:
        raise ConfigurationError(f"Missing parameters in '{name}': {missing}")

    unknown = sorted(set(section) - set(keys))
    if unknown:
        raise ConfigurationError(f"Unknown parameters in '{name}': {unknown}")

    values = {}
    for key in keys:
        raw = section[key]
        if isinstance(raw, bool):
            raise ConfigurationError(f"{name}.{key} must be a number, got {raw!r}")
        try:
            values[key] = float(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{name}.{key} must be a number, got {raw!r}") from None
    return values


def load_simulation_config(yaml_file: str) -> SimulationConfig:
    """
    Load simulation configuration from YAML file.

    Parameters
    ----------
    yaml_file : str
        Path to YAML configuration file

    Returns
    -------
    SimulationConfig
        Loaded and validated configuration

    Examples
    --------
    >>> config = load_simulation_config('config/nominal.yaml')
    >>> config.step_size
    0.0001
    """
    with open(yaml_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    return SimulationConfig.from_dict(config_dict)


def save_simulation_config(config: SimulationConfig, yaml_file: str):
    """
    Save simulation configuration to YAML file.

    Parameters
    ----------
    config : SimulationConfig
        Configuration to save
    yaml_file : str
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    print(f"Configuration saved to: {yaml_file}")


def create_default_config() -> Dict[str, Any]:
    """
    Create the nominal configuration dictionary.

    Returns
    -------
    dict
        Reference scenario parameters
    """
    config = {
        'motor': {
            'inductance': 3.7e-4,         # H
            'resistance': 1.2e-1,         # Ohm
            'torque_constant': 3.3e-3,    # Nm/A
            'inertia': 8.1e-6,            # kg m^2
            'drag_coefficient': 3.0e-8,   # propeller torque coefficient
            'damping_coefficient': 0.0,   # Nm s
        },
        'airframe': {
            'thrust_coefficient': 3.5e-6,  # N s^2
            'arm_length': 0.09,            # m
            'inertia': 6.0e-3,             # kg m^2
        },
        'voltages': {
            'right': 7.5,  # V
            'left': 7.4,   # V
        },
        'simulation': {
            'step_size': 1.0e-4,  # s
            'end_time': 0.5,      # s
        },
    }

    return config
