import jax.numpy as jnp
import pytest

from gravjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Under pytest-xdist every worker starts at the float32 default.  Tests
    that need another dtype (test_config.py) override this with their own
    autouse fixture.
    """
    set_dtype(jnp.float64)
