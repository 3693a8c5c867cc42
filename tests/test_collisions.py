"""Tests for collision resolution."""

import numpy as np
import pytest
from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.collisions import CollisionResolver, merge_bodies
from gravity_sandbox.physics.diagnostics import Diagnostics


def test_merge_conserves_mass_and_momentum():
    """Merged body has summed mass and mass-weighted position and velocity."""
    a = Body(0.0, 0.0, 1.0, vx=10.0, vy=0.0)
    b = Body(4.0, 0.0, 3.0)
    merged = merge_bodies(a, b)

    assert merged.mass == 4.0
    assert (merged.x, merged.y) == pytest.approx((3.0, 0.0))
    assert (merged.vx, merged.vy) == pytest.approx((2.5, 0.0))


def test_merged_radius_follows_new_mass():
    """The merge product derives its radius from the combined mass."""
    merged = merge_bodies(Body(0, 0, 60.0), Body(1, 0, 40.0))

    assert merged.radius == 39


def test_resolver_merges_overlapping_pair():
    """Two overlapping bodies become one."""
    resolver = CollisionResolver()
    result = resolver.resolve([Body(0.0, 0.0, 1.0, vx=10.0), Body(4.0, 0.0, 3.0)], True)

    assert len(result) == 1
    assert result[0].mass == 4.0
    assert result[0].x == pytest.approx(3.0)
    assert result[0].vx == pytest.approx(2.5)
    assert resolver.last_merge_count == 1


def test_touching_is_not_overlapping():
    """Distance equal to the radius sum is not a collision."""
    bodies = [Body(0.0, 0.0, 1.0), Body(10.0, 0.0, 1.0)]

    assert len(CollisionResolver().resolve(bodies, True)) == 2


def test_disabled_returns_input_unchanged():
    """With collisions off the input comes back as is."""
    bodies = [Body(0.0, 0.0, 1.0), Body(1.0, 0.0, 1.0), Body(2.0, 0.0, 1.0)]
    snapshot = [b.view() for b in bodies]
    result = CollisionResolver().resolve(bodies, False)

    assert result is bodies
    assert [b.view() for b in result] == snapshot


def test_body_merges_at_most_once_per_pass():
    """Three mutually overlapping bodies yield one merge and one survivor."""
    a, b, c = Body(0.0, 0.0, 1.0), Body(1.0, 0.0, 1.0), Body(2.0, 0.0, 1.0)
    result = CollisionResolver().resolve([a, b, c], True)

    assert len(result) == 2
    assert result[0] is c
    assert result[1].mass == 2.0
    assert result[1].x == pytest.approx(0.5)


def test_merge_products_are_not_merged_again():
    """Four overlapping bodies pair up; the two products stay separate this pass."""
    bodies = [Body(float(i), 0.0, 1.0) for i in range(4)]
    result = CollisionResolver().resolve(bodies, True)

    assert [b.mass for b in result] == [2.0, 2.0]
    assert result[0].x == pytest.approx(0.5)
    assert result[1].x == pytest.approx(2.5)


def test_output_order_survivors_then_products():
    """Survivors keep their relative order; products follow in discovery order."""
    p = Body(0.0, 0.0, 1.0)
    q = Body(1000.0, 0.0, 1.0)
    r = Body(3.0, 0.0, 1.0)
    s = Body(2000.0, 0.0, 1.0)
    t = Body(1004.0, 0.0, 1.0)
    result = CollisionResolver().resolve([p, q, r, s, t], True)

    assert result[0] is s
    assert result[1].x == pytest.approx(1.5)
    assert result[2].x == pytest.approx(1002.0)
    assert len(result) == 3


def test_first_partner_in_index_order_wins():
    """A body merges with the first overlapping later body, not the nearest."""
    a = Body(0.0, 0.0, 1.0)
    far_partner = Body(9.0, 0.0, 1.0)
    near_partner = Body(1.0, 0.0, 1.0)
    result = CollisionResolver().resolve([a, far_partner, near_partner], True)

    assert result[0] is near_partner
    assert result[1].x == pytest.approx(4.5)


def test_dense_cluster_conserves_mass_and_momentum():
    """No body is counted twice however crowded the pass is."""
    rng = np.random.default_rng(3)
    bodies = [
        Body(x, y, m, vx, vy)
        for x, y, m, vx, vy in zip(
            rng.uniform(0, 20, 30), rng.uniform(0, 20, 30), rng.uniform(1, 2, 30),
            rng.uniform(-5, 5, 30), rng.uniform(-5, 5, 30),
        )
    ]
    diagnostics = Diagnostics()
    resolver = CollisionResolver()
    result = resolver.resolve(bodies, True)

    assert len(result) == len(bodies) - resolver.last_merge_count
    assert diagnostics.total_mass(result) == pytest.approx(diagnostics.total_mass(bodies))
    assert np.allclose(diagnostics.total_momentum(result), diagnostics.total_momentum(bodies))
