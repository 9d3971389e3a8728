"""
Configuration Demonstration

Demonstrates the YAML-based configuration system for the two-motor drone.
Shows how to:
- Load a simulation configuration from YAML
- Run the simulation and inspect the final state
- Export the trajectory to CSV and plot it
- Save a modified configuration
"""

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
import numpy as np
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from twinrotor.io.config import (
    SimulationConfig,
    create_default_config,
    load_simulation_config,
    save_simulation_config
)
from twinrotor.simulation import simulate
from twinrotor.visualization import plot_motor_states, plot_drone_attitude


def main():
    """Run configuration demonstration."""
    print("=" * 70)
    print("Two-Motor Drone: Configuration Demonstration")
    print("=" * 70)
    print()

    # 1. Load configuration
    print("1. Loading simulation configuration from YAML...")
    config_path = os.path.join(os.path.dirname(__file__), '..', 'config', 'nominal.yaml')

    try:
        config = load_simulation_config(config_path)
        print(f"   Loaded: {config}")
    except FileNotFoundError:
        print("   Warning: Config file not found, using nominal parameters...")
        config = SimulationConfig.from_dict(create_default_config())
    print(f"   Electrical time constant: {config.motor.electrical_time_constant * 1e3:.3f} ms")
    print(f"   Steps: {config.n_steps}")
    print()

    # 2. Run
    print("2. Running simulation...")
    history = simulate(config)
    final = history.final
    print(f"   Completed {len(history)} records")
    print(f"   Final time:      {final.time:.4f} s")
    print(f"   Right motor:     {final.right_current:8.4f} A  {final.right_rpm:9.1f} RPM")
    print(f"   Left motor:      {final.left_current:8.4f} A  {final.left_rpm:9.1f} RPM")
    print(f"   Angular rate:    {final.rate:8.4f} rad/s")
    print(f"   Attitude:        {np.degrees(final.attitude):8.4f} deg")
    print()

    # 3. Export and plot
    print("3. Exporting results...")
    out_dir = os.path.dirname(__file__)
    history.save_csv(os.path.join(out_dir, 'two_motor_trajectory.csv'))
    plot_motor_states(history, save_path=os.path.join(out_dir, 'motor_states.png'))
    plot_drone_attitude(history, save_path=os.path.join(out_dir, 'drone_attitude.png'))
    plt.close('all')
    print()

    # 4. Equal voltages: no differential torque
    print("4. Saving a symmetric configuration...")
    symmetric = config.to_dict()
    symmetric['voltages']['left'] = symmetric['voltages']['right']
    symmetric_config = SimulationConfig.from_dict(symmetric)
    save_simulation_config(symmetric_config,
                           os.path.join(out_dir, '..', 'config', 'symmetric.yaml'))
    print(f"   Final rate with equal voltages: {simulate(symmetric_config).final.rate:.3e} rad/s")
    print()

    print("=" * 70)
    print("Configuration demonstration complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
