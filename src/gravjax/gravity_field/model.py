"""Configurable point-mass gravity field model.

:class:`GravityFieldModel` bundles the parameters of a central body's
gravity field (gravitational parameter, reference radius, truncation
degree and order of a spherical harmonic expansion, J2..J4 zonal
coefficients and origin) with checked evaluation of the potential, its
gradient and its gradient tensor.

Evaluation uses the point-mass term only.  The degree, order and zonal
coefficients are carried as descriptive configuration; the zonal terms
are available through the separate ``zonal_*`` methods, which delegate to
:mod:`gravjax.gravity_field.zonal`.

Instances are immutable.  The ``with_*`` methods return a modified copy,
so a configured model can be shared between threads and evaluated
concurrently.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from gravjax.config import get_dtype
from gravjax.gravity_field._types import (
    DegenerateGeometryError,
    PredefinedGravityField,
    UnconfiguredGravityFieldError,
    UnknownPresetError,
)
from gravjax.gravity_field.point_mass import (
    gradient_point_mass,
    gradient_tensor_point_mass,
    potential_point_mass,
    relative_position,
)
from gravjax.gravity_field.presets import get_preset
from gravjax.gravity_field.zonal import (
    gradient_tensor_zonal,
    gradient_zonal,
    potential_zonal,
)
from gravjax.gravity_gradient import torque_gravity_gradient

logger = logging.getLogger(__name__)


def _zero_origin() -> Array:
    return jnp.zeros(3, dtype=get_dtype())


@dataclass(frozen=True, eq=False)
class GravityFieldModel:
    """Gravity field of a central body.

    A freshly constructed model has no gravitational parameter and must be
    configured, either with :meth:`with_gravitational_parameter` or with a
    predefined field through :meth:`with_preset` / :meth:`from_preset`,
    before it can be evaluated.

    Args:
        gravitational_parameter: Gravitational parameter [m^3/s^2].
            ``None`` while unset.
        reference_radius: Reference radius of the expansion [m].
        degree_of_expansion: Maximum degree of the spherical harmonic
            expansion.
        order_of_expansion: Maximum order of the spherical harmonic
            expansion.
        j2: Zonal coefficient of degree 2.
        j3: Zonal coefficient of degree 3.
        j4: Zonal coefficient of degree 4.
        origin: Position of the body's centre in the caller's frame [m],
            shape ``(3,)``.  Defaults to the zero vector.

    Examples:
        ```python
        import jax.numpy as jnp
        from gravjax.gravity_field import GravityFieldModel
        model = GravityFieldModel.from_preset("WGS84")
        a = model.gradient(jnp.array([7000e3, 0.0, 0.0]))
        ```
    """

    gravitational_parameter: float | None = None
    reference_radius: float = 0.0
    degree_of_expansion: int = 0
    order_of_expansion: int = 0
    j2: float = 0.0
    j3: float = 0.0
    j4: float = 0.0
    origin: Array = field(default_factory=_zero_origin)

    def __post_init__(self):
        origin = jnp.asarray(self.origin, dtype=get_dtype())[:3]
        if origin.shape != (3,):
            raise ValueError(
                f"Origin must have at least 3 components, got shape {origin.shape}."
            )
        object.__setattr__(self, "origin", origin)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @classmethod
    def from_preset(
        cls,
        preset: PredefinedGravityField | str,
        origin: ArrayLike | None = None,
    ) -> GravityFieldModel:
        """Create a model configured with a predefined gravity field.

        Args:
            preset: Preset member or name, e.g. ``"WGS84"``.
            origin: Origin of the field [m].  Defaults to the zero vector.

        Returns:
            GravityFieldModel: Configured model.

        Raises:
            UnknownPresetError: If *preset* is not a predefined field.
        """
        model = cls() if origin is None else cls(origin=origin)
        return model.with_preset(preset)

    def with_preset(self, preset: PredefinedGravityField | str) -> GravityFieldModel:
        """Apply a predefined gravity field.

        Replaces the gravitational parameter, reference radius and J2..J4
        coefficients.  Degree, order and origin are kept.

        Args:
            preset: Preset member or name, e.g. ``"WGS-72"``.

        Returns:
            GravityFieldModel: New model with the preset applied.

        Raises:
            UnknownPresetError: If *preset* is not a predefined field.  This
                model is left unchanged.
        """
        try:
            values = get_preset(preset)
        except UnknownPresetError:
            logger.warning("Predefined gravity field %r does not exist", preset)
            raise

        logger.debug("Applying predefined gravity field %s (%s)", preset, values.reference)
        return dataclasses.replace(
            self,
            gravitational_parameter=values.gm,
            reference_radius=values.radius,
            j2=values.j2,
            j3=values.j3,
            j4=values.j4,
        )

    def with_gravitational_parameter(self, gm: float) -> GravityFieldModel:
        """Return a copy with a new gravitational parameter [m^3/s^2]."""
        return dataclasses.replace(self, gravitational_parameter=gm)

    def with_reference_radius(self, radius: float) -> GravityFieldModel:
        """Return a copy with a new reference radius [m]."""
        return dataclasses.replace(self, reference_radius=radius)

    def with_degree_of_expansion(self, degree: int) -> GravityFieldModel:
        """Return a copy with a new expansion degree."""
        return dataclasses.replace(self, degree_of_expansion=int(degree))

    def with_order_of_expansion(self, order: int) -> GravityFieldModel:
        """Return a copy with a new expansion order."""
        return dataclasses.replace(self, order_of_expansion=int(order))

    def with_zonal_coefficients(
        self,
        j2: float,
        j3: float = 0.0,
        j4: float = 0.0,
    ) -> GravityFieldModel:
        """Return a copy with new J2, J3 and J4 coefficients."""
        return dataclasses.replace(self, j2=j2, j3=j3, j4=j4)

    def with_origin(self, origin: ArrayLike) -> GravityFieldModel:
        """Return a copy centred on *origin* [m].

        Args:
            origin: New origin, shape ``(3,)`` or ``(6,)`` (only first 3
                elements used).
        """
        return dataclasses.replace(self, origin=origin)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_gravitational_parameter(self) -> float | None:
        return self.gravitational_parameter

    def get_reference_radius(self) -> float:
        return self.reference_radius

    def get_degree_of_expansion(self) -> int:
        return self.degree_of_expansion

    def get_order_of_expansion(self) -> int:
        return self.order_of_expansion

    def get_origin(self) -> Array:
        return self.origin

    @property
    def is_configured(self) -> bool:
        """Whether the gravitational parameter is set and positive."""
        gm = self.gravitational_parameter
        return gm is not None and gm > 0.0

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _check(self, position: ArrayLike) -> None:
        """Validate the model and the query position before evaluation.

        Requires a concrete (non-traced) position.  Inside ``jax.jit`` use
        the kernels in :mod:`gravjax.gravity_field.point_mass` directly.
        """
        if not self.is_configured:
            raise UnconfiguredGravityFieldError(
                f"Gravitational parameter must be set to a positive value "
                f"before evaluation, got {self.gravitational_parameter!r}."
            )
        d = relative_position(position, self.origin)
        if float(jnp.linalg.norm(d)) == 0.0:
            raise DegenerateGeometryError(
                "Query position coincides with the gravity field origin "
                f"{[float(x) for x in self.origin]}; the potential is singular there."
            )

    def potential(self, position: ArrayLike) -> Array:
        """Point-mass potential at *position*.

        Args:
            position: Query position [m], shape ``(3,)`` or ``(6,)``.

        Returns:
            Potential [m^2/s^2], scalar array.

        Raises:
            UnconfiguredGravityFieldError: If no positive gravitational
                parameter is set.
            DegenerateGeometryError: If *position* equals the origin.
        """
        self._check(position)
        return potential_point_mass(position, self.origin, self.gravitational_parameter)

    def gradient(self, position: ArrayLike) -> Array:
        """Gradient of the point-mass potential (gravitational acceleration).

        Args:
            position: Query position [m], shape ``(3,)`` or ``(6,)``.

        Returns:
            Gradient [m/s^2], shape ``(3,)``.

        Raises:
            UnconfiguredGravityFieldError: If no positive gravitational
                parameter is set.
            DegenerateGeometryError: If *position* equals the origin.
        """
        self._check(position)
        return gradient_point_mass(position, self.origin, self.gravitational_parameter)

    def gradient_tensor(self, position: ArrayLike) -> Array:
        """Gradient tensor of the point-mass potential.

        Args:
            position: Query position [m], shape ``(3,)`` or ``(6,)``.

        Returns:
            Symmetric, traceless tensor [1/s^2], shape ``(3, 3)``.

        Raises:
            UnconfiguredGravityFieldError: If no positive gravitational
                parameter is set.
            DegenerateGeometryError: If *position* equals the origin.
        """
        self._check(position)
        return gradient_tensor_point_mass(
            position, self.origin, self.gravitational_parameter
        )

    def gravity_gradient_torque(
        self,
        position: ArrayLike,
        I: ArrayLike,  # noqa: E741
        R_eci_to_body: ArrayLike | None = None,
    ) -> Array:
        """Gravity gradient torque on a rigid body at *position*.

        Args:
            position: Centre of mass of the body [m], shape ``(3,)`` or
                ``(6,)``.
            I: Inertia tensor in the body frame, shape ``(3, 3)`` [kg m^2].
            R_eci_to_body: Rotation into the body frame.  ``None`` means the
                frames coincide.

        Returns:
            Torque in the body frame [N m], shape ``(3,)``.
        """
        return torque_gravity_gradient(self.gradient_tensor(position), I, R_eci_to_body)

    # ------------------------------------------------------------------
    # Zonal extension
    # ------------------------------------------------------------------

    def _zonal_args(self, position: ArrayLike) -> tuple:
        self._check(position)
        if not self.reference_radius > 0.0:
            raise UnconfiguredGravityFieldError(
                f"Reference radius must be positive for zonal evaluation, "
                f"got {self.reference_radius!r}."
            )
        return (
            position,
            self.origin,
            self.gravitational_parameter,
            self.reference_radius,
            self.j2,
            self.j3,
            self.j4,
        )

    def zonal_potential(self, position: ArrayLike) -> Array:
        """Potential including the J2..J4 zonal terms [m^2/s^2]."""
        return potential_zonal(*self._zonal_args(position))

    def zonal_gradient(self, position: ArrayLike) -> Array:
        """Gradient of the zonal potential [m/s^2], shape ``(3,)``."""
        return gradient_zonal(*self._zonal_args(position))

    def zonal_gradient_tensor(self, position: ArrayLike) -> Array:
        """Gradient tensor of the zonal potential [1/s^2], shape ``(3, 3)``."""
        return gradient_tensor_zonal(*self._zonal_args(position))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Multi-line summary of the model configuration.

        Returns:
            str: Gravitational parameter, origin, degree and order of
                expansion, and reference radius, one per line.
        """
        gm = self.gravitational_parameter
        gm_text = "unset" if gm is None else f"{float(gm)!r} m^3/s^2"
        origin_text = "[" + ", ".join(f"{float(x)!r}" for x in self.origin) + "] m"
        return "\n".join([
            "GravityFieldModel",
            f"  gravitational parameter: {gm_text}",
            f"  origin: {origin_text}",
            f"  degree of expansion: {self.degree_of_expansion}",
            f"  order of expansion: {self.order_of_expansion}",
            f"  reference radius: {float(self.reference_radius)!r} m",
        ])

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        gm = self.gravitational_parameter
        gm_text = "None" if gm is None else f"{gm:.6e}"
        return (
            f"GravityFieldModel(gm={gm_text}, "
            f"radius={self.reference_radius:.1f}, "
            f"degree={self.degree_of_expansion}, order={self.order_of_expansion})"
        )
