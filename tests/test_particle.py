import pytest
from hypothesis import given
from hypothesis import strategies as st

from rivo.particle import Particle
from rivo.vector import REAL_MAX, Vector3

component = st.floats(min_value=-100, max_value=100, allow_nan=False)
triples = st.tuples(component, component, component)
durations = st.floats(min_value=1e-3, max_value=10)
masses = st.floats(min_value=1e-3, max_value=1e3)


def approx_vector(expected, tol=1e-9):
    return pytest.approx(list(expected), abs=tol, rel=tol)


@given(masses)
def test_mass_round_trip(m):
    p = Particle()
    p.mass = m
    assert p.mass == pytest.approx(m)
    assert p.inverse_mass == pytest.approx(1.0 / m)
    assert p.has_finite_mass()


def test_zero_mass_rejected():
    p = Particle()
    p.mass = 2.0
    with pytest.raises(ValueError):
        p.mass = 0
    assert p.mass == pytest.approx(2.0)
    assert p.inverse_mass == pytest.approx(0.5)


def test_zero_inverse_mass_is_infinite():
    p = Particle(inverse_mass=0.0)
    assert p.mass == REAL_MAX
    assert REAL_MAX == 3.4028234663852886e38
    assert not p.has_finite_mass()


def test_negative_inverse_mass_not_finite():
    p = Particle(inverse_mass=-1.0)
    assert not p.has_finite_mass()


def test_position_setter_copies():
    v = Vector3(1, 2, 3)
    p = Particle()
    p.position = v
    v.x = 50
    assert p.position == Vector3(1, 2, 3)


def test_setters_accept_triples():
    p = Particle()
    p.velocity = (4, 5, 6)
    p.acceleration = [7, 8, 9]
    assert p.velocity == Vector3(4, 5, 6)
    assert p.acceleration == Vector3(7, 8, 9)


@pytest.mark.parametrize("duration", [0.0, -1.0])
def test_integrate_rejects_non_positive_duration(duration):
    p = Particle()
    with pytest.raises(ValueError):
        p.integrate(duration)


def test_integrate_single_step_values():
    p = Particle(position=(1, 2, 3), velocity=(2, 0, -2))
    p.integrate(0.5)
    assert list(p.position) == pytest.approx([2.0, 2.0, 2.0])
    assert list(p.velocity) == pytest.approx([2.0, 0.0, -2.0])


@given(triples, triples, durations)
def test_integrate_moves_by_velocity(tpos, tvel, dt):
    pos = Vector3(*tpos)
    vel = Vector3(*tvel)
    p = Particle(position=pos, velocity=vel)
    p.integrate(dt)
    assert list(p.position) == approx_vector(pos + vel * dt)
    assert list(p.velocity) == approx_vector(vel)


@given(triples, durations)
def test_constant_acceleration_changes_velocity(tacc, dt):
    acc = Vector3(*tacc)
    p = Particle(acceleration=acc)
    p.integrate(dt)
    assert list(p.velocity) == approx_vector(acc * dt)
    assert p.position == Vector3()


@given(triples, masses, durations)
def test_force_applied_then_cleared(tforce, m, dt):
    force = Vector3(*tforce)
    p = Particle()
    p.mass = m
    p.add_force(force)
    p.integrate(dt)
    assert list(p.velocity) == approx_vector(force * (dt / m), tol=1e-7)
    assert p.force_accum == Vector3()


def test_forces_accumulate():
    p = Particle()
    p.add_force(Vector3(1, 0, 0))
    p.add_force(Vector3(0, 2, 0))
    assert p.force_accum == Vector3(1, 2, 0)
    p.clear_accumulator()
    assert p.force_accum == Vector3()


def test_force_ignored_for_infinite_mass():
    p = Particle()
    p.add_force(Vector3(10, 10, 10))
    p.integrate(1.0)
    assert p.velocity == Vector3()


def test_damping_over_unit_step():
    p = Particle(velocity=(2, 4, 6), damping=0.5)
    p.integrate(1.0)
    assert list(p.velocity) == pytest.approx([1.0, 2.0, 3.0])


def test_zero_damping_stops_particle():
    p = Particle(velocity=(1, 1, 1), damping=0.0)
    p.integrate(0.5)
    assert p.velocity == Vector3()
    assert list(p.position) == pytest.approx([0.5, 0.5, 0.5])