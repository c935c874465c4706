"""Time integration for the three watch-face engines.

Each engine advances by one fixed slice per call; nothing here reads a clock.

- Point masses use position Verlet: velocity is implicit in the difference
  between the current and previous positions, so constraint relaxation (which
  only moves positions) feeds straight back into the motion.
- Particles and rigid bodies use explicit Euler: velocity is updated by
  gravity first, then position by the updated velocity.
- Pinned points and dragged bodies are masked out and keep their state.

All functions return new arrays and leave their inputs untouched.
"""
import numpy as np


def verlet_integrate(x: np.ndarray, x_prev: np.ndarray, pinned: np.ndarray,
                     gravity: np.ndarray, dt: float) -> tuple[np.ndarray, np.ndarray]:
    """Advance point masses by one Verlet step.

    Args:
        x: Current positions (N, 2)
        x_prev: Previous positions (N, 2)
        pinned: Pinned flags (N,)
        gravity: Scaled gravity acceleration (2,)
        dt: Time step

    Returns:
        Tuple of (x_new, x_prev_new) where
        x_new = x + (x - x_prev) + g * dt^2 and x_prev_new = x for free points
    """
    free = ~pinned.reshape(-1, 1)
    velocity = x - x_prev
    x_new = np.where(free, x + velocity + gravity * (dt * dt), x)
    x_prev_new = np.where(free, x, x_prev)
    return x_new, x_prev_new


def euler_integrate(x: np.ndarray, v: np.ndarray, gravity: np.ndarray, dt: float,
                    active: np.ndarray | None = None) -> tuple[np.ndarray, np.ndarray]:
    """Advance positions and velocities by one explicit Euler step.

    Args:
        x: Positions (N, 2)
        v: Velocities (N, 2)
        gravity: Scaled gravity acceleration (2,)
        dt: Time step
        active: Optional mask (N,); inactive entries are left unchanged

    Returns:
        Tuple of (x_new, v_new)
    """
    v_new = v + gravity * dt
    x_new = x + v_new * dt
    if active is None:
        return x_new, v_new

    mask = active.reshape(-1, 1)
    return np.where(mask, x_new, x), np.where(mask, v_new, v)


def integrate_rotation(angle: np.ndarray, omega: np.ndarray, dt: float) -> np.ndarray:
    """Advance rotation angles by their angular velocities."""
    return angle + omega * dt
