# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "gravjax"]
#
# [tool.uv.sources]
# gravjax = { path = ".." }
# ///
"""Propagate a circular orbit under point-mass and zonal gravity.

Integrates the same initial state with the point-mass gradient and with
the J2..J4 zonal gradient of a predefined Earth gravity field using a
fixed-step RK4 inside ``lax.scan``, then prints the position difference
and the gravity gradient tensor at the final point.

Usage:
    uv run examples/compare_gravity_fields.py [OPTIONS]

Examples:
    # One orbit at 500 km altitude with WGS-84
    uv run examples/compare_gravity_fields.py

    # WGS-72, inclined, one day at 30 s
    uv run examples/compare_gravity_fields.py --preset WGS72 --inclination 63.4 \\
        --duration 86400 --timestep 30
"""

import math
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from gravjax import GravityFieldModel, set_dtype
from gravjax.gravity_field import gradient_point_mass, gradient_zonal

set_dtype(jnp.float64)  # Must be before any JIT compilation


def _rk4_propagate(accel, x0, dt, n_steps):
    def deriv(x):
        return jnp.concatenate([x[3:], accel(x[:3])])

    def step(x, _):
        k1 = deriv(x)
        k2 = deriv(x + 0.5 * dt * k1)
        k3 = deriv(x + 0.5 * dt * k2)
        k4 = deriv(x + dt * k3)
        x_next = x + dt / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
        return x_next, x_next

    _, traj = jax.lax.scan(step, x0, None, length=n_steps)
    return traj


def main(
    preset: Annotated[str, typer.Option(help="Predefined gravity field (WGS72 or WGS84)")] = "WGS84",
    altitude: Annotated[float, typer.Option(help="Orbit altitude [km]")] = 500.0,
    inclination: Annotated[float, typer.Option(help="Inclination [deg]")] = 51.6,
    duration: Annotated[float, typer.Option(help="Propagation time [s]")] = 5700.0,
    timestep: Annotated[float, typer.Option(help="RK4 step [s]")] = 10.0,
):
    model = GravityFieldModel.from_preset(preset)
    typer.echo(model.describe())

    gm = model.gravitational_parameter
    a = model.reference_radius + altitude * 1e3
    v = math.sqrt(gm / a)
    inc = math.radians(inclination)
    x0 = jnp.array([a, 0.0, 0.0, 0.0, v * math.cos(inc), v * math.sin(inc)])

    n_steps = int(duration / timestep)
    origin = model.origin

    def accel_pm(r):
        return gradient_point_mass(r, origin, gm)

    def accel_zonal(r):
        return gradient_zonal(
            r, origin, gm, model.reference_radius, model.j2, model.j3, model.j4
        )

    propagate = jax.jit(_rk4_propagate, static_argnums=(0, 3))
    traj_pm = propagate(accel_pm, x0, timestep, n_steps)
    traj_zonal = propagate(accel_zonal, x0, timestep, n_steps)

    dr = jnp.linalg.norm(traj_pm[:, :3] - traj_zonal[:, :3], axis=1)
    typer.echo(f"\nSteps: {n_steps}")
    typer.echo(f"Final position difference (point mass vs zonal): {float(dr[-1]) / 1e3:.3f} km")
    typer.echo(f"Maximum position difference: {float(jnp.max(dr)) / 1e3:.3f} km")

    r_final = traj_zonal[-1, :3]
    typer.echo("\nPoint-mass gradient tensor at final position [1/s^2]:")
    typer.echo(str(model.gradient_tensor(r_final)))
    typer.echo("Zonal gradient tensor at final position [1/s^2]:")
    typer.echo(str(model.zonal_gradient_tensor(r_final)))


if __name__ == "__main__":
    typer.run(main)
