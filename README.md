# minirt

A compact ray tracer written as a small library. It renders spheres,
planes, cylinders and cones with Phong lighting, hard shadows, mirror
reflections and simple procedural patterns, and writes the result as a
PPM image.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `minirt.tuples` – `Tuple` with `point`, `vector` and `color` helpers;
  addition, subtraction, scaling, `dot`, `cross`, `hadamard`,
  `magnitude`, `normalize` and `approx_eq`.
- `minirt.matrix` – immutable `Matrix` with `@`, `apply`, `transpose`,
  `determinant`, `submatrix`, `cofactor` and `inverse` (a singular matrix
  is returned unchanged); transforms `identity`, `from_rows`,
  `translation`, `scaling`, `rotation`, `shearing` and `rodrigues`, which
  turns one direction onto another.
- `minirt.ray` – `Ray` with `position` and `transform`.
- `minirt.patterns` – `PatternType` (none, stripe, gradient, ring,
  checker), `Pattern`, `Material` and the pattern functions `stripe_at`,
  `gradient_at` and `ring_at`.
- `minirt.shapes` – `Shape` of a `ShapeKind`, built with `sphere()`,
  `plane()`, `cylinder()` or `cone()`; `intersect`, `local_intersect`,
  `normal_at`; `Intersection` and `reflect`.
- `minirt.world` – `Scene` holding objects, `Light`s, an ambient colour
  and a camera; `hit`, `prepare_computations`, shading, shadows and
  reflections up to a depth of two; `rgb_to_int` packs a colour into
  `0xRRGGBB`.
- `minirt.camera` – `Camera` (sizes and field of view in radians),
  `view_transform` and `render`, which traces one ray per pixel.
- `minirt.canvas` – `Canvas` with `put_pixel`, `get_pixel`, `to_ppm` and
  `save`.
- `minirt.report` – `format_tuple`, `format_matrix`, `format_material`
  and `format_scene` produce text summaries.

## Example

```python
import math

from minirt.camera import Camera, render, view_transform
from minirt.matrix import scaling, translation
from minirt.patterns import Material, Pattern, PatternType
from minirt.ray import Ray
from minirt.shapes import plane, sphere
from minirt.tuples import color, point, vector
from minirt.world import Light, Scene, hit

ball = sphere()
r = Ray(point(0, 0, -5), vector(0, 0, 1))
print(hit(ball.intersect(r)).t)  # 4.0

ball.transform = translation(point(0, 1, 0)) @ scaling(point(1, 1, 1))
ball.material = Material(color=color(1, 0.2, 0.2), reflective=0.3)

floor = plane()
floor.material = Material(pattern=Pattern(enabled=True, type=PatternType.CHECKER))

cam = Camera(200, 100, math.pi / 3,
             transform=view_transform(point(0, 1, -5), vector(0, 0, 1)))
scene = Scene(
    objects=[floor, ball],
    lights=[Light(point(-4, 6, -6), color(1, 1, 1))],
    ambient=color(0.1, 0.1, 0.1),
    camera=cam,
)
render(cam, scene).save("out.ppm")
```

## What it does not do

The package has no command-line program and does not read scene
description files: scenes are built in Python as shown above. It opens
no window; images are only written as PPM files through `Canvas`.