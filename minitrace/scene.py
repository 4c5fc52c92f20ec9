"""Reading a scene description: lights, camera and objects.

A scene file holds one element per line, its fields separated by single
spaces. Every line is first counted and checked for the right number of
fields; only then are the elements built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from minitrace.color import Color
from minitrace.fields import char_to_double, check_colors, expected_words, split_words
from minitrace.shapes import Cylinder, Plane, Sphere
from minitrace.transform import Matrix, obj_to_world_matrix
from minitrace.vector import Vec

Shape = Union[Sphere, Plane, Cylinder]

# Number of fields, identifier included, that each element carries.
_FIELD_COUNTS = {"A": 3, "C": 4, "L": 4, "sp": 4, "cy": 6, "pl": 4}

_COUNTER_ATTRIBUTES = {
    "A": "ambient",
    "C": "camera",
    "L": "light",
    "sp": "sphere",
    "cy": "cylinder",
    "pl": "plane",
}


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


def _word(words: Sequence[str], index: int) -> str:
    return words[index] if index < len(words) else ""


def _lines(text: str) -> list[str]:
    """Split text into lines that keep their trailing newline."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


@dataclass
class Counter:
    """How many of each element a scene description declares."""

    ambient: int = 0
    light: int = 0
    camera: int = 0
    sphere: int = 0
    cylinder: int = 0
    plane: int = 0
    newline: int = 0

    def increase(self, words: Sequence[str]) -> None:
        """Count the element named by the first word of a line."""
        if not words:
            raise SceneError("unidentified element")
        key = words[0]
        attribute = _COUNTER_ATTRIBUTES.get(key)
        if attribute is not None:
            setattr(self, attribute, getattr(self, attribute) + 1)
        elif key.startswith("\n"):
            self.newline += 1
        else:
            raise SceneError("unidentified element")

    def check(self) -> None:
        """Require exactly one ambient light, one light and one camera."""
        if self.ambient != 1:
            raise SceneError(
                f"declare ambient light once; amount of ambient light is {self.ambient}"
            )
        if self.light != 1:
            raise SceneError("declare light once")
        if self.camera != 1:
            raise SceneError("declare camera once")

    @property
    def objects(self) -> int:
        """Number of spheres, planes and cylinders."""
        return self.sphere + self.cylinder + self.plane


@dataclass
class AmbientLight:
    """Light that reaches every surface equally."""

    ratio: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Light:
    """A point light."""

    position: Vec
    ratio: float
    color: Color


@dataclass
class Camera:
    """The viewpoint, its viewing direction and horizontal field of view."""

    position: Vec
    orientation: Vec
    fov_w: int
    matrix: Matrix = field(init=False)

    def __post_init__(self) -> None:
        self.matrix = obj_to_world_matrix(self.orientation, self.position)

    def angles(self, width: int, height: int) -> tuple[float, float]:
        """Horizontal and vertical angle per pixel, in degrees.

        The vertical field of view is the horizontal one times the aspect
        ratio ``width / height``.
        """
        fov_h = self.fov_w * (width / height)
        return self.fov_w / width, fov_h / height


@dataclass
class Scene:
    """Everything a scene description declares."""

    ambient: Optional[AmbientLight] = None
    light: Optional[Light] = None
    camera: Optional[Camera] = None
    objects: list[Shape] = field(default_factory=list)
    counter: Counter = field(default_factory=Counter)


def init_vector(text: str) -> Vec:
    """Read an "x,y,z" triple; a malformed one gives a vector marked invalid."""
    parts = split_words(text, ",")
    if not expected_words(3, parts):
        return Vec(0.0, 0.0, 0.0, valid=False)
    values: list[float] = []
    valid = True
    for part in parts[:3]:
        try:
            values.append(char_to_double(part))
        except ValueError:
            valid = False
            break
    values.extend([0.0] * (3 - len(values)))
    return Vec(values[0], values[1], values[2], valid=valid)


def check_vector_bounds(vector: Vec, low: float, high: float) -> bool:
    """Tell whether every coordinate lies between ``low`` and ``high``."""
    return all(low <= value <= high for value in (vector.x, vector.y, vector.z))


def assign_info(words: Sequence[str]) -> int:
    """Number of fields expected for the element named by the first word."""
    if not words:
        return 0
    return _FIELD_COUNTS.get(words[0], 0)


def count_elements(line: str, counter: Counter) -> None:
    """Count one line and check that it carries the right number of fields."""
    words = split_words(line, " ")
    counter.increase(words)
    if not expected_words(assign_info(words), words):
        raise SceneError(f"incorrect amount of info for element {words[0]}")


def counting_elements(lines: Iterable[str]) -> Counter:
    """Count every line of a description and check the required elements."""
    counter = Counter()
    for line in lines:
        count_elements(line, counter)
    counter.check()
    return counter


def parse_ambient(words: Sequence[str]) -> AmbientLight:
    """Build the ambient light from "A ratio R,G,B"."""
    ambient = AmbientLight()
    if len(words) > 1:
        try:
            ratio = char_to_double(words[1])
        except ValueError:
            raise SceneError("wrong light ratio") from None
        if not 0 <= ratio <= 1:
            raise SceneError("wrong light ratio")
        ambient.ratio = ratio
    if len(words) > 2:
        try:
            ambient.color = check_colors(words[2])
        except ValueError:
            raise SceneError("wrong ambient light color input") from None
    return ambient


def parse_light(words: Sequence[str]) -> Light:
    """Build the light from "L x,y,z ratio R,G,B"."""
    if not expected_words(4, words):
        raise SceneError("wrong light declaration")
    position = init_vector(words[1])
    try:
        ratio = char_to_double(words[2])
        color = check_colors(words[3])
    except ValueError:
        raise SceneError("wrong light declaration") from None
    if not position.valid or not 0 <= ratio <= 1:
        raise SceneError("wrong light declaration")
    return Light(position=position, ratio=ratio, color=color)


def parse_camera_fov(words: Sequence[str]) -> int:
    """Read the camera's field of view, in whole degrees from 0 to 180.

    The value must be digits ended by a newline; 180 is taken as 179.
    """
    text = _word(words, 3)
    for ch in text:
        if ch == "\n":
            break
        if not ch.isdigit() or not ch.isascii():
            raise SceneError("wrong camera field-of-view declaration")
    else:
        raise SceneError("wrong camera field-of-view declaration")
    digits = text.split("\n", 1)[0]
    fov = int(digits) if digits else 0
    if fov < 0 or fov > 180:
        raise SceneError("wrong camera field-of-view declaration")
    return 179 if fov == 180 else fov


def parse_camera(words: Sequence[str]) -> Camera:
    """Build the camera from "C x,y,z ox,oy,oz fov"."""
    if not expected_words(4, words):
        raise SceneError("wrong camera declaration")
    position = init_vector(words[1])
    if not position.valid:
        raise SceneError("wrong camera viewpoint declaration")
    orientation = init_vector(words[2])
    if not check_vector_bounds(orientation, -1, 1):
        raise SceneError("wrong camera orientation vector declaration")
    fov = parse_camera_fov(words)
    return Camera(position=position, orientation=orientation, fov_w=fov)


def conversion(pixel_x: int, pixel_y: int, width: int, height: int) -> tuple[int, int]:
    """Pixel coordinates relative to the centre of the image."""
    return pixel_x - width // 2, pixel_y - height // 2


def parse_sphere(words: Sequence[str]) -> Sphere:
    """Build a sphere from "sp x,y,z diameter R,G,B"."""
    position = init_vector(_word(words, 1))
    try:
        diameter = char_to_double(_word(words, 2))
        color = check_colors(_word(words, 3))
    except ValueError:
        raise SceneError("wrong sphere declaration") from None
    if not position.valid:
        raise SceneError("wrong sphere declaration")
    return Sphere(position=position, diameter=diameter, color=color)


def parse_cylinder(words: Sequence[str]) -> Cylinder:
    """Build a cylinder from "cy x,y,z ox,oy,oz diameter height R,G,B"."""
    position = init_vector(_word(words, 1))
    orientation = init_vector(_word(words, 2))
    if (
        not position.valid
        or not check_vector_bounds(orientation, -1, 1)
        or not orientation.valid
    ):
        raise SceneError("wrong cylinder declaration")
    try:
        diameter = char_to_double(_word(words, 3))
        height = char_to_double(_word(words, 4))
        color = check_colors(_word(words, 5))
    except ValueError:
        raise SceneError("wrong cylinder declaration") from None
    return Cylinder(
        position=position,
        orientation=orientation,
        diameter=diameter,
        height=height,
        color=color,
    )


def parse_plane(words: Sequence[str]) -> Plane:
    """Build a plane from "pl x,y,z nx,ny,nz R,G,B"."""
    position = init_vector(_word(words, 1))
    orientation = init_vector(_word(words, 2))
    if (
        not position.valid
        or not check_vector_bounds(orientation, -1, 1)
        or not orientation.valid
    ):
        raise SceneError("wrong plane declaration")
    try:
        color = check_colors(_word(words, 3))
    except ValueError:
        raise SceneError("wrong plane declaration") from None
    return Plane(position=position, orientation=orientation, color=color)


def parse_line(line: str, scene: Scene) -> None:
    """Build the element on one line and add it to ``scene``."""
    words = split_words(line, " ")
    if not words:
        return
    key = words[0]
    if key == "A":
        scene.ambient = parse_ambient(words)
    elif key == "C":
        scene.camera = parse_camera(words)
    elif key == "L":
        scene.light = parse_light(words)
    elif key == "sp":
        scene.objects.append(parse_sphere(words))
    elif key == "cy":
        scene.objects.append(parse_cylinder(words))
    elif key == "pl":
        scene.objects.append(parse_plane(words))


def check_arguments(argv: Sequence[str]) -> bool:
    """Tell whether the command line names exactly one ".rt" file."""
    return len(argv) == 2 and argv[1].endswith(".rt")


def parse_scene(text: str) -> Scene:
    """Count, check and build every element of a scene description."""
    lines = _lines(text)
    scene = Scene(counter=counting_elements(lines))
    for line in lines:
        parse_line(line, scene)
    return scene


def load_scene(path: Union[str, Path]) -> Scene:
    """Read and parse a scene file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SceneError("file-opening failed") from exc
    return parse_scene(text)