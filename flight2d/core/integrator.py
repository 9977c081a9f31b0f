"""
Fixed-step 4th-order Runge-Kutta integration.

The step works on any state type that supports ``+``, multiplication by a
scalar and division by a scalar: floats, numpy arrays, Vector, Kinematics.
The derivative may be of a different type than the state as long as
``state + derivative`` is defined (e.g. pose + rate).
"""

from typing import Callable, List, Tuple, TypeVar

import numpy as np

T = TypeVar('T')


def rk4(f: Callable, x: T, t: float, h: float) -> T:
    """
    Advance ``x`` by one RK4 step.

    Parameters:
    -----------
    f : Callable
        Derivative function f(t, x) -> dx/dt
    x : state
        State at time t
    t : float
        Current time (s)
    h : float
        Step size (s)

    Returns:
    --------
    x_new : state
        State at t + h
    """
    k1 = h * f(t, x)
    k2 = h * f(t + 0.5 * h, x + k1 / 2)
    k3 = h * f(t + 0.5 * h, x + k2 / 2)
    k4 = h * f(t + h, x + k3)

    return x + (k1 + 2 * k2 + 2 * k3 + k4) / 6


class RK4Integrator:
    """
    4th-order Runge-Kutta integrator (fixed time step).

    No error control: accuracy and stability follow from the choice of dt.
    """

    def __init__(self, dt: float = 0.01):
        """
        Initialize RK4 integrator.

        Parameters:
        -----------
        dt : float
            Fixed time step (seconds)
        """
        if dt <= 0.0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.dt = dt

    def step(self, x: T, derivative_func: Callable, t: float = 0.0) -> T:
        """Advance ``x`` from t to t + dt."""
        return rk4(derivative_func, x, t, self.dt)

    def integrate(self, x0: T, t_span: Tuple[float, float],
                  derivative_func: Callable) -> Tuple[np.ndarray, List[T]]:
        """
        Integrate from t0 to tf.

        Parameters:
        -----------
        x0 : state
            Initial state
        t_span : tuple
            (t0, tf) time span
        derivative_func : Callable
            f(t, x) -> dx/dt

        Returns:
        --------
        t_history : np.ndarray
            Time points
        x_history : list
            State at each time point (x_history[0] is x0)
        """
        t0, tf = t_span
        n_steps = int(round((tf - t0) / self.dt))

        t_history = t0 + self.dt * np.arange(n_steps + 1)
        x_history = [x0]

        x = x0
        for i in range(n_steps):
            x = rk4(derivative_func, x, float(t_history[i]), self.dt)
            x_history.append(x)

        return t_history, x_history
