"""Tests for the point-mass gravity field kernels.

Tests cover:
- Potential value and inverse-distance scaling
- Gradient direction and magnitude
- Gradient tensor symmetry, trace and consistency with autodiff
- Non-zero origin and state-vector inputs
- JIT and vmap compatibility
- Behaviour at zero distance
"""

import jax
import jax.numpy as jnp
import pytest

from gravjax.config import get_symmetry_tolerance
from gravjax.constants import GM_EARTH, R_EARTH
from gravjax.gravity_field import (
    gradient_point_mass,
    gradient_tensor_point_mass,
    potential_point_mass,
    relative_position,
)

_POSITIONS = [
    [R_EARTH, 0.0, 0.0],
    [0.0, R_EARTH + 500e3, 0.0],
    [0.0, 0.0, -(R_EARTH + 35786e3)],
    [4000e3, -5000e3, 3000e3],
    [1.0, 2.0, -3.0],
]


# ===========================================================================
# Potential
# ===========================================================================
class TestPotentialPointMass:
    """Tests for potential_point_mass()."""

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_value(self, r):
        """Potential equals gm / distance."""
        r = jnp.array(r)
        U = potential_point_mass(r, jnp.zeros(3), GM_EARTH)
        expected = GM_EARTH / float(jnp.linalg.norm(r))
        assert float(U) == pytest.approx(expected, rel=1e-14)

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_positive(self, r):
        U = potential_point_mass(jnp.array(r), jnp.zeros(3), GM_EARTH)
        assert float(U) > 0.0

    def test_inverse_distance_scaling(self):
        """Doubling the distance halves the potential."""
        r = jnp.array([4000e3, -5000e3, 3000e3])
        U1 = potential_point_mass(r, jnp.zeros(3), GM_EARTH)
        U2 = potential_point_mass(2.0 * r, jnp.zeros(3), GM_EARTH)
        assert float(U2) == pytest.approx(0.5 * float(U1), rel=1e-14)

    def test_shifted_origin(self):
        """Only the position relative to the origin matters."""
        origin = jnp.array([1.0e8, -2.0e7, 3.0e6])
        d = jnp.array([R_EARTH, 0.0, 0.0])
        U_shifted = potential_point_mass(origin + d, origin, GM_EARTH)
        U_centred = potential_point_mass(d, jnp.zeros(3), GM_EARTH)
        assert float(U_shifted) == pytest.approx(float(U_centred), rel=1e-12)

    def test_state_vector_input(self):
        """A 6-element state uses only its position part."""
        x = jnp.array([R_EARTH + 500e3, 0.0, 0.0, 0.0, 7.6e3, 0.0])
        U_state = potential_point_mass(x, jnp.zeros(3), GM_EARTH)
        U_pos = potential_point_mass(x[:3], jnp.zeros(3), GM_EARTH)
        assert float(U_state) == float(U_pos)

    def test_relative_position(self):
        d = relative_position(jnp.array([3.0, 2.0, 1.0, 9.0, 9.0, 9.0]), jnp.array([1.0, 1.0, 1.0]))
        assert jnp.allclose(d, jnp.array([2.0, 1.0, 0.0]))


# ===========================================================================
# Gradient
# ===========================================================================
class TestGradientPointMass:
    """Tests for gradient_point_mass()."""

    def test_surface_gravity(self):
        """Gravity at Earth's surface should be ~9.8 m/s^2."""
        r = jnp.array([R_EARTH, 0.0, 0.0])
        a = gradient_point_mass(r, jnp.zeros(3), GM_EARTH)
        assert float(jnp.linalg.norm(a)) == pytest.approx(9.798, abs=1e-3)

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_magnitude(self, r):
        """Magnitude equals gm / distance^2."""
        r = jnp.array(r)
        a = gradient_point_mass(r, jnp.zeros(3), GM_EARTH)
        dist = float(jnp.linalg.norm(r))
        assert float(jnp.linalg.norm(a)) == pytest.approx(GM_EARTH / dist**2, rel=1e-13)

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_points_to_origin(self, r):
        """Gradient is anti-parallel to the relative position."""
        r = jnp.array(r)
        a = gradient_point_mass(r, jnp.zeros(3), GM_EARTH)
        cos_angle = jnp.dot(a, r) / (jnp.linalg.norm(a) * jnp.linalg.norm(r))
        assert float(cos_angle) == pytest.approx(-1.0, abs=1e-14)

    def test_points_to_shifted_origin(self):
        origin = jnp.array([1.0e7, 1.0e7, 0.0])
        r = jnp.array([1.0e7, 1.0e7, 7.0e6])
        a = gradient_point_mass(r, origin, GM_EARTH)
        assert float(a[0]) == pytest.approx(0.0, abs=1e-15)
        assert float(a[1]) == pytest.approx(0.0, abs=1e-15)
        assert float(a[2]) < 0.0

    @pytest.mark.parametrize("r", _POSITIONS[:4])
    def test_matches_autodiff(self, r):
        """Gradient equals jax.grad of the potential."""
        r = jnp.array(r)
        a = gradient_point_mass(r, jnp.zeros(3), GM_EARTH)
        a_ad = jax.grad(potential_point_mass)(r, jnp.zeros(3), GM_EARTH)
        assert jnp.allclose(a, a_ad, rtol=1e-12, atol=0.0)

    def test_jit_compatible(self):
        r = jnp.array([R_EARTH + 500e3, 0.0, 0.0])
        a_eager = gradient_point_mass(r, jnp.zeros(3), GM_EARTH)
        a_jit = jax.jit(gradient_point_mass)(r, jnp.zeros(3), GM_EARTH)
        assert jnp.allclose(a_eager, a_jit, rtol=1e-14)

    def test_vmap(self):
        rs = jnp.array(_POSITIONS)
        a = jax.vmap(gradient_point_mass, in_axes=(0, None, None))(rs, jnp.zeros(3), GM_EARTH)
        assert a.shape == (len(_POSITIONS), 3)
        for i, r in enumerate(rs):
            assert jnp.allclose(a[i], gradient_point_mass(r, jnp.zeros(3), GM_EARTH))


# ===========================================================================
# Gradient tensor
# ===========================================================================
class TestGradientTensorPointMass:
    """Tests for gradient_tensor_point_mass()."""

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_shape(self, r):
        G = gradient_tensor_point_mass(jnp.array(r), jnp.zeros(3), GM_EARTH)
        assert G.shape == (3, 3)

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_symmetric(self, r):
        G = gradient_tensor_point_mass(jnp.array(r), jnp.zeros(3), GM_EARTH)
        scale = float(jnp.max(jnp.abs(G)))
        assert float(jnp.max(jnp.abs(G - G.T))) <= get_symmetry_tolerance() * scale

    @pytest.mark.parametrize("r", _POSITIONS)
    def test_traceless(self, r):
        """Laplace's equation: the trace vanishes away from the origin."""
        G = gradient_tensor_point_mass(jnp.array(r), jnp.zeros(3), GM_EARTH)
        scale = float(jnp.max(jnp.abs(G)))
        assert abs(float(jnp.trace(G))) <= get_symmetry_tolerance() * scale

    def test_radial_axis_values(self):
        """Along x the tensor is gm/r^3 * diag(2, -1, -1)."""
        r = R_EARTH + 500e3
        G = gradient_tensor_point_mass(jnp.array([r, 0.0, 0.0]), jnp.zeros(3), GM_EARTH)
        k = GM_EARTH / r**3
        expected = jnp.diag(jnp.array([2.0 * k, -k, -k]))
        assert jnp.allclose(G, expected, rtol=1e-13, atol=0.0)

    @pytest.mark.parametrize("r", _POSITIONS[:4])
    def test_matches_jacobian_of_gradient(self, r):
        r = jnp.array(r)
        G = gradient_tensor_point_mass(r, jnp.zeros(3), GM_EARTH)
        G_ad = jax.jacfwd(gradient_point_mass)(r, jnp.zeros(3), GM_EARTH)
        scale = float(jnp.max(jnp.abs(G)))
        assert float(jnp.max(jnp.abs(G - G_ad))) <= 1e-12 * scale

    def test_jit_compatible(self):
        r = jnp.array([4000e3, -5000e3, 3000e3])
        G_eager = gradient_tensor_point_mass(r, jnp.zeros(3), GM_EARTH)
        G_jit = jax.jit(gradient_tensor_point_mass)(r, jnp.zeros(3), GM_EARTH)
        assert jnp.allclose(G_eager, G_jit, rtol=1e-14)


class TestZeroDistance:
    """The kernels do not validate; a query at the origin is non-finite."""

    def test_potential_is_inf(self):
        U = potential_point_mass(jnp.zeros(3), jnp.zeros(3), GM_EARTH)
        assert jnp.isinf(U)

    def test_gradient_not_finite(self):
        a = gradient_point_mass(jnp.zeros(3), jnp.zeros(3), GM_EARTH)
        assert not bool(jnp.all(jnp.isfinite(a)))

    def test_tensor_not_finite(self):
        G = gradient_tensor_point_mass(jnp.zeros(3), jnp.zeros(3), GM_EARTH)
        assert not bool(jnp.all(jnp.isfinite(G)))
