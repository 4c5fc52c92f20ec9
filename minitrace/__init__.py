"""Ray tracing pieces: .rt scene parsing, shapes, Phong shading, images and XPM loading."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "colornames",
    "fields",
    "image",
    "numeric",
    "ray",
    "scene",
    "shading",
    "shapes",
    "transform",
    "vector",
    "xpm",
]