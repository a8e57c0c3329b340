# rivo

A small particle physics engine. It has two parts: a mutable 3D vector type (`rivo.vector.Vector3`) and a point-mass particle (`rivo.particle.Particle`). Each integration step moves the particle by its velocity. It then updates the velocity from the particle's acceleration and any forces added to it, applies damping, and clears the forces.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Vectors

`Vector3` is a dataclass with float components `x`, `y` and `z`, which default to zero. Components you pass are converted to `float`.

```python
from rivo.vector import Vector3

a = Vector3(1.0, 2.0, 3.0)
b = Vector3(4.0, 5.0, 6.0)

a + b                 # component-wise sum
a - b                 # component-wise difference
a * 2.0, 2.0 * a      # scaled copy
a * b                 # dot product (a float)
a % b                 # cross product
a.scalar_product(b)   # dot product
a.vector_product(b)   # cross product
a.component_product(b)

a.add_scaled_vector(b, 0.5)   # a += b * 0.5, in place
a.normalize()                 # unit length; a zero vector is left unchanged
a.magnitude(), a.square_magnitude()
x, y, z = a                   # vectors can be unpacked
```

The in-place operators `+=`, `-=`, `*=` (by a number) and `%=` (cross product) change the vector itself. Using `*=` with another vector raises `TypeError`. `invert`, `clear` and `component_product_update` also work in place. `copy` returns an independent vector.

`rivo.vector.REAL_MAX` is the largest finite single-precision value. A particle with infinite mass reports this value as its mass.

## Particles

A `Particle` holds a position, a velocity, an acceleration, a damping factor and an inverse mass. All of these can be given to the constructor. By default the vectors are zero, the damping is `1.0` and the inverse mass is `0.0`, which means the mass is infinite.

```python
from rivo.particle import Particle
from rivo.vector import Vector3

p = Particle(damping=0.99)
p.mass = 2.0                         # sets inverse_mass to 0.5
p.velocity = (0.0, 0.0, 35.0)        # any three numbers, or a Vector3
p.acceleration = Vector3(0.0, -9.81, 0.0)

p.add_force(Vector3(1.0, 0.0, 0.0))
p.integrate(1.0 / 60.0)

print(p.position, p.mass, p.has_finite_mass())
```

- `position`, `velocity` and `acceleration` are properties. Reading one returns the particle's own vector. Assigning to one stores a new `Vector3` built from the value you give.
- `mass` is a property computed from `inverse_mass`. It is `REAL_MAX` when the inverse mass is zero. Assigning a mass of zero raises `ValueError`.
- `has_finite_mass()` is true when the inverse mass is positive.
- `add_force(force)` adds to the force accumulator. `force_accum` returns a copy of it, and `clear_accumulator()` resets it to zero.
- `integrate(duration)` advances the particle. It raises `ValueError` unless `duration` is positive. The velocity is scaled by `damping ** duration`, and the accumulated force is cleared afterwards.

## What it does not do

`rivo` is a library only. It has no command-line tool. It has no force generators, collision detection, contact resolution or rendering. Callers must compute the forces themselves, pass them to `add_force`, and call `integrate` in their own loop.