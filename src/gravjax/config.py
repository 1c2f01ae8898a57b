"""Package-wide floating-point precision for gravjax.

Every kernel in gravjax materializes its inputs with the dtype returned
by :func:`get_dtype`.  The default is ``jnp.float32`` so the kernels run
unchanged on accelerators; selecting ``jnp.float64`` switches on JAX's
64-bit mode (``jax_enable_x64``) as a side effect.

Select the dtype **before** anything is compiled with ``jax.jit``.  The
value is read while tracing, so a compiled function keeps the dtype that
was active when it was traced until its inputs change dtype and force a
retrace.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_SUPPORTED_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Select the float dtype used by all gravjax kernels.

    Passing ``jnp.float64`` also enables ``jax_enable_x64``; without it
    JAX silently truncates double-precision arrays to single precision.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not one of the supported float types.

    Examples:
        ```python
        import jax.numpy as jnp
        from gravjax.config import set_dtype
        set_dtype(jnp.float64)
        ```
    """
    global _dtype
    if dtype not in _SUPPORTED_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the float dtype currently used by gravjax kernels.

    Returns:
        The active float dtype (``jnp.float32`` unless changed).
    """
    return _dtype


def get_symmetry_tolerance() -> float:
    """Relative tolerance for symmetry and trace checks on gradient tensors.

    Scales with the resolution of the active dtype:

    - ``float16``/``bfloat16``: 1e-2
    - ``float32``: 1e-5
    - ``float64``: 1e-12

    Returns:
        float: Relative tolerance, dimensionless.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-5
    return 1e-2
