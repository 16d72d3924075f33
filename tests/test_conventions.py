"""Tests for selectors, unit conversion and argument validation."""

import jax.numpy as jnp
import numpy as np
import pytest

import robotics_toolbox
from robotics_toolbox.core import (
    Axis,
    AxisOrder,
    InvalidAxisError,
    InvalidAxisOrderError,
    InvalidShapeError,
    InvalidUnitsError,
    TransformError,
    Units,
    as_axis,
    as_axis_order,
    as_units,
    check_square,
    from_radians,
    to_radians,
)


def test_float64_enabled():
    """Test that importing the package switches JAX to double precision."""
    assert robotics_toolbox.rotx(0.1).dtype == jnp.float64


def test_selectors_accept_members_and_values():
    """Test coercion of enum members and their string values."""
    assert as_units(Units.DEGREES) is Units.DEGREES
    assert as_units("radians") is Units.RADIANS
    assert as_axis("z") is Axis.Z
    assert as_axis_order("zyx") is AxisOrder.ZYX


def test_selectors_reject_unknown_values():
    """Test that anything outside the closed set raises the matching error."""
    for value in ("foo", "RADIANS", None):
        with pytest.raises(InvalidUnitsError):
            as_units(value)

    for value in ("w", Units.RADIANS):
        with pytest.raises(InvalidAxisError):
            as_axis(value)

    for value in ("yxz", ["x", "y", "z"]):
        with pytest.raises(InvalidAxisOrderError):
            as_axis_order(value)


def test_error_hierarchy():
    """Test that every error is a TransformError and a ValueError."""
    for error in (InvalidUnitsError, InvalidAxisError, InvalidAxisOrderError, InvalidShapeError):
        assert issubclass(error, TransformError)
        assert issubclass(error, ValueError)


def test_to_radians():
    """Test angle conversion in both units."""
    np.testing.assert_allclose(to_radians(180, "degrees"), jnp.pi, atol=1e-12)
    np.testing.assert_allclose(to_radians(1.25), 1.25, atol=1e-12)
    np.testing.assert_allclose(
        to_radians(jnp.array([0.0, 90.0, -45.0]), Units.DEGREES),
        jnp.array([0.0, jnp.pi / 2, -jnp.pi / 4]),
        atol=1e-12,
    )


def test_from_radians():
    """Test that from_radians inverts to_radians."""
    angles = jnp.array([0.1, -2.0, 3.0])
    np.testing.assert_allclose(from_radians(to_radians(angles, "degrees"), "degrees"), angles, atol=1e-12)
    np.testing.assert_allclose(from_radians(jnp.pi, "degrees"), 180.0, atol=1e-9)


def test_check_square():
    """Test shape validation with and without batch dimensions."""
    M = check_square([[1, 2], [3, 4]], (2, 3), "R")
    assert jnp.issubdtype(M.dtype, jnp.floating)
    assert check_square(jnp.zeros((7, 3, 3)), (3, 4), "T").shape == (7, 3, 3)

    with pytest.raises(InvalidShapeError, match=r"argument T, instead had size \(2, 3\)"):
        check_square(jnp.zeros((2, 3)), (2, 3), "T")
    with pytest.raises(InvalidShapeError):
        check_square(jnp.zeros(4), (2,), "R")
    with pytest.raises(InvalidShapeError):
        check_square(5.0, (2,), "R")
