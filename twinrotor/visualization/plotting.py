"""
Standard Plotting Functions

Provides visualization of recorded two-motor drone trajectories:
motor currents and speeds, drone angular rate and attitude.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Optional, Tuple

from ..io.reporter import TrajectoryHistory


def plot_motor_states(
    history: TrajectoryHistory,
    title: str = "Motor States vs Time",
    figsize: Tuple[float, float] = (10, 7),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot both motors' current and angular velocity vs time.

    Parameters
    ----------
    history : TrajectoryHistory
        Recorded trajectory
    title : str, optional
        Main plot title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure (if None, figure is not saved)

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    time = history.times
    fig, axes = plt.subplots(2, 1, figsize=figsize, sharex=True)

    # Current
    axes[0].plot(time, history.column('right_current'), 'r-', label='Right', linewidth=1.5)
    axes[0].plot(time, history.column('left_current'), 'b--', label='Left', linewidth=1.5)
    axes[0].set_ylabel('Current (A)', fontsize=11)
    axes[0].legend(loc='best')
    axes[0].grid(True, alpha=0.3)
    axes[0].set_title('Motor Current', fontsize=11, fontweight='bold')

    # Angular velocity
    axes[1].plot(time, history.column('right_rpm'), 'r-', label='Right', linewidth=1.5)
    axes[1].plot(time, history.column('left_rpm'), 'b--', label='Left', linewidth=1.5)
    axes[1].set_ylabel('Speed (RPM)', fontsize=11)
    axes[1].set_xlabel('Time (s)', fontsize=11)
    axes[1].legend(loc='best')
    axes[1].grid(True, alpha=0.3)
    axes[1].set_title('Motor Angular Velocity', fontsize=11, fontweight='bold')

    fig.suptitle(title, fontsize=13, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_drone_attitude(
    history: TrajectoryHistory,
    title: str = "Drone Rotation vs Time",
    degrees: bool = True,
    figsize: Tuple[float, float] = (10, 7),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot drone angular rate and attitude angle vs time.

    Parameters
    ----------
    history : TrajectoryHistory
        Recorded trajectory
    title : str, optional
        Main plot title
    degrees : bool, optional
        Plot in degrees instead of radians
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    time = history.times
    rate = history.column('rate')
    attitude = history.column('attitude')
    unit = 'rad'
    if degrees:
        rate, attitude = np.degrees(rate), np.degrees(attitude)
        unit = 'deg'

    fig, axes = plt.subplots(2, 1, figsize=figsize, sharex=True)

    axes[0].plot(time, rate, 'g-', linewidth=1.5)
    axes[0].set_ylabel(f'q ({unit}/s)', fontsize=11)
    axes[0].grid(True, alpha=0.3)
    axes[0].set_title('Angular Rate', fontsize=11, fontweight='bold')

    axes[1].plot(time, attitude, 'm-', linewidth=1.5)
    axes[1].set_ylabel(f'theta ({unit})', fontsize=11)
    axes[1].set_xlabel('Time (s)', fontsize=11)
    axes[1].grid(True, alpha=0.3)
    axes[1].set_title('Attitude Angle', fontsize=11, fontweight='bold')

    fig.suptitle(title, fontsize=13, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig

