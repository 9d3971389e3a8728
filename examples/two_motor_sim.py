"""
Two-Motor Drone Simulation Example

Runs the nominal scenario (7.5 V right, 7.4 V left, h = 0.1 ms, 0.5 s) and
prints one line per step:

    time  i_R  i_L  rpm_R  rpm_L  q  theta
"""

import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from twinrotor.io.config import SimulationConfig
from twinrotor.io.reporter import PrintReporter
from twinrotor.simulation import simulate


def main():
    config = SimulationConfig.nominal()
    simulate(config, reporters=[PrintReporter()])


if __name__ == "__main__":
    main()
