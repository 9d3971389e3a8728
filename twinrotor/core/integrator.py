"""
Numerical integrators for the two-motor drone model.

Implements:
- RK4 (Runge-Kutta 4th order, fixed step) for a single scalar state
- Explicit Euler step (first order, used as an accuracy baseline)

Each scalar is advanced on its own. Auxiliary coupling inputs (the values of
other states that a derivative needs) are passed as one typed struct and are
held constant across all four RK stages.
"""

import numpy as np
from typing import Any, Callable, Tuple

# f(x, t, aux) -> dx/dt
DerivativeFunc = Callable[[float, float, Any], float]


def rk4_step(derivative_func: DerivativeFunc, x: float, t: float,
             h: float, aux: Any) -> float:
    """
    Advance a scalar state by one step using classical RK4.

    Parameters:
    -----------
    derivative_func : Callable
        Function f(x, t, aux) returning dx/dt
    x : float
        Current value of the state
    t : float
        Current time (s)
    h : float
        Step size (s)
    aux : struct
        Auxiliary inputs, frozen for the whole step

    Returns:
    --------
    x_new : float
        State at t + h
    """
    k1 = h * derivative_func(x, t, aux)
    k2 = h * derivative_func(x + 0.5 * k1, t + 0.5 * h, aux)
    k3 = h * derivative_func(x + 0.5 * k2, t + 0.5 * h, aux)
    k4 = h * derivative_func(x + k3, t + h, aux)

    return x + (k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0


def euler_step(derivative_func: DerivativeFunc, x: float, t: float,
               h: float, aux: Any) -> float:
    """Advance a scalar state by one explicit Euler step."""
    return x + h * derivative_func(x, t, aux)


class RK4Integrator:
    """
    4th-order Runge-Kutta integrator (fixed time step) for scalar ODEs.

    Local truncation error is O(h^5), global error O(h^4).
    """

    def __init__(self, dt: float = 1e-4):
        """
        Initialize RK4 integrator.

        Parameters:
        -----------
        dt : float
            Fixed time step (seconds), must be positive
        """
        if dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.dt = dt

    def step(self, derivative_func: DerivativeFunc, x: float, t: float,
             aux: Any) -> float:
        """Advance x from t to t + dt."""
        return rk4_step(derivative_func, x, t, self.dt, aux)

    def integrate(self, derivative_func: DerivativeFunc, x0: float,
                  t_span: Tuple[float, float],
                  aux: Any) -> Tuple[np.ndarray, np.ndarray]:
        """
        Integrate a scalar ODE from t0 to tf with fixed auxiliary inputs.

        Parameters:
        -----------
        derivative_func : Callable
            Function f(x, t, aux) returning dx/dt
        x0 : float
            Initial value
        t_span : tuple
            (t0, tf) time span
        aux : struct
            Auxiliary inputs, constant over the whole span

        Returns:
        --------
        t_history : np.ndarray
            Time points, t0 + n*dt
        x_history : np.ndarray
            State at each time point
        """
        t0, tf = t_span
        n_steps = int(np.ceil((tf - t0) / self.dt - 1e-9)) + 1

        t_history = t0 + self.dt * np.arange(n_steps)
        x_history = np.zeros(n_steps)
        x_history[0] = x0

        x = x0
        for n in range(1, n_steps):
            x = self.step(derivative_func, x, t_history[n - 1], aux)
            x_history[n] = x

        return t_history, x_history


if __name__ == "__main__":
    print("=== Integrator Tests ===\n")

    def exponential_decay(x, t, rate):
        """Test ODE: dx/dt = -rate * x"""
        return -rate * x

    print("Test: dx/dt = -0.5 * x, x(0) = 1")
    print("Analytical solution: x(t) = exp(-0.5*t)")
    print()

    for dt in (0.1, 0.01):
        rk4 = RK4Integrator(dt=dt)
        t_hist, x_hist = rk4.integrate(exponential_decay, 1.0, (0.0, 2.0), 0.5)
        error = abs(x_hist[-1] - np.exp(-0.5 * t_hist[-1]))
        print(f"RK4 (dt={dt}): x(2.0)={x_hist[-1]:.8f}  error={error:.2e}")
