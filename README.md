# minitrace

The pieces of a small ray tracer: a reader for scenes described in `.rt`
files, spheres, planes and capped cylinders that rays can be intersected with,
Phong shading (ambient, diffuse and specular parts) with a single point light,
an in-memory pixel image that can be written as PPM, and a loader for XPM
pictures.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## What it does not do

There is no command-line program and no function that loops over the pixels
of an image to render a whole scene. Casting a ray per pixel, testing for
shadows and writing each result into an `Image` is left to the caller, using
the pieces below.

## Scene format

Each line holds one element. Fields are separated by single spaces. Vectors
and colours are comma-separated triples.

| Id   | Fields                                                        |
|------|---------------------------------------------------------------|
| `A`  | ratio `0..1`, colour                                          |
| `C`  | position `x,y,z`, orientation `x,y,z` (each `-1..1`), field of view `0..180` |
| `L`  | position `x,y,z`, ratio `0..1`, colour                        |
| `sp` | centre `x,y,z`, diameter, colour                              |
| `pl` | point `x,y,z`, normal `x,y,z` (each `-1..1`), colour          |
| `cy` | centre `x,y,z`, axis `x,y,z` (each `-1..1`), diameter, height, colour |

A scene must hold exactly one `A`, one `C` and one `L`. Empty lines are
allowed; any other identifier, or a line with the wrong number of fields,
raises `minitrace.scene.SceneError`. A colour is three whole numbers from 0
to 255; the second is stored as blue and the third as green. A field of view
of 180 is taken as 179.

```
A 0.2 255,255,255
C 0,0,-20 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,0 5 255,0,0
pl 0,-3,0 0,1,0 200,200,200
cy 6,0,0 0,1,0 2 4 0,0,255
```

## Using it

```python
from minitrace.scene import load_scene
from minitrace.ray import Ray
from minitrace.vector import Vec
from minitrace.shading import light_object
from minitrace.image import Image

scene = load_scene("scene.rt")

ray = Ray(origin=scene.camera.position, direction=Vec(0.0, 0.0, 1.0))
for index, obj in enumerate(scene.objects):
    obj.intersect(ray, scene, index)

image = Image(1, 1)
if ray.hit is not None:
    pixel = light_object(scene, ray, scene.objects[ray.hit], in_shadow=False)
    image.put_pixel(0, 0, pixel)
image.save_ppm("pixel.ppm")
```

The modules:

- `minitrace.scene`: `parse_scene`, `load_scene` and the `Scene`, `Camera`,
  `Light`, `AmbientLight` and `Counter` classes. `check_arguments` tells
  whether a command line names exactly one `.rt` file.
- `minitrace.shapes`: `Sphere`, `Plane` and `Cylinder`, each with
  `intersect`, `intersect_shadow`, `surface_normal` and `make_shadow`.
  A hit lowers `ray.tmax` and records the object's index in `ray.hit`.
- `minitrace.ray`: `Ray` with `point_at`.
- `minitrace.shading`: `light_object`, `ambient_color`, `specular_color` and
  the `ShadowInfo` directions at a hit point.
- `minitrace.vector.Vec`: vector arithmetic, dot and cross products,
  rotations in degrees and products with 4x4 matrices.
- `minitrace.transform`: `obj_to_world_matrix` and `make_mat44`.
- `minitrace.color.Color`: channel-wise colour arithmetic and packing to
  `0xTTRRGGBB` with `to_trgb`.
- `minitrace.fields`: the field readers behind the scene format
  (`char_to_double`, `check_colors`, `split_words`, `expected_words`).
- `minitrace.numeric`: `quad_solver`, `find_min_value`, `isequal`, `degtorad`.
- `minitrace.image`: `Image` with `put_pixel`, `get_pixel`, `to_ppm` and
  `save_ppm`, and `get_color_value` for visuals of fewer than 24 bits.
- `minitrace.xpm`: `xpm_file_to_image` and `xpm_to_image` load XPM pictures
  into an `Image`; problems raise `XpmError`.
- `minitrace.colornames`: `lookup_color` for the X11 colour names used in
  XPM files.

## Tests

```
pip install .[test]
pytest
```