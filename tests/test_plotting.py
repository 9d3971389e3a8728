"""
Plotting Tests

Smoke tests for trajectory figures.
"""

import pytest
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import os
import sys

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from twinrotor.io.config import SimulationConfig, create_default_config
from twinrotor.simulation import simulate
from twinrotor.visualization import plot_motor_states, plot_drone_attitude


@pytest.fixture(scope='module')
def history():
    config_dict = create_default_config()
    config_dict['simulation']['end_time'] = 0.01
    return simulate(SimulationConfig.from_dict(config_dict))


class TestPlotting:

    def teardown_method(self):
        plt.close('all')

    def test_motor_states(self, history):
        fig = plot_motor_states(history)
        assert len(fig.axes) == 2
        assert len(fig.axes[0].lines) == 2

    def test_drone_attitude(self, history):
        fig = plot_drone_attitude(history, degrees=False)
        assert fig.axes[1].get_ylabel() == 'theta (rad)'

    def test_save_figure(self, history, tmp_path):
        path = tmp_path / 'motors.png'
        plot_motor_states(history, save_path=str(path))
        assert path.exists()
