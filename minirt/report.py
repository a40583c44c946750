"""Human-readable summaries of tuples, matrices, materials and scenes."""

from __future__ import annotations

from minirt.matrix import Matrix
from minirt.patterns import Material, PatternType
from minirt.shapes import ShapeKind
from minirt.tuples import COLOR, POINT, VECTOR, Tuple
from minirt.world import Scene

_WEIGHT_NAMES = {VECTOR: "VECTOR", COLOR: "COLOR", POINT: "POINT"}

_PATTERN_NAMES = {
    PatternType.NONE: "NONE ",
    PatternType.CHECKER: "CHECKERBOARD ",
    PatternType.STRIPE: "STRIPE ",
    PatternType.RING: "RING ",
    PatternType.GRADIENT: "GRADIENT ",
}

_STARS = "*" * 50
_RULE = "=" * 38
_DASHES = "-" * 26


def format_tuple(t: Tuple) -> str:
    """One line naming the tuple's kind and its coordinates."""
    name = _WEIGHT_NAMES.get(t.w, "")
    return f"{name}({t.x:.5f}, {t.y:.5f}, {t.z:.5f})"


def format_matrix(m: Matrix) -> str:
    """A header line followed by one line per matrix row."""
    lines = ["MATRIX :"]
    for row in m.cells:
        lines.append("|" + "".join(f" {value:.5f} |" for value in row))
    return "\n".join(lines)


def format_material(material: Material) -> str:
    """One line with the material's lighting terms, pattern and colour."""
    try:
        pattern = _PATTERN_NAMES.get(PatternType(material.pattern.type), "")
    except ValueError:
        pattern = ""
    return (
        f"\tmaterial : spec : {material.specular:.1f} "
        f"refl : {material.reflective:.1f} "
        f"shine : {material.shininess:.1f} pattern : "
        f"{pattern}color : {format_tuple(material.color)}"
    )


def _kind_name(kind) -> str:
    try:
        return ShapeKind(kind).name
    except ValueError:
        return "ELSE"


def format_scene(scene: Scene) -> str:
    """A multi-line description of the camera, ambient light, lights and objects."""
    if scene.camera is None:
        raise ValueError("scene has no camera")
    lines = [
        _STARS,
        "\t\t ****Scene****",
        "=Camera :=",
        format_matrix(scene.camera.transform),
        _RULE,
        "=Ambient :=",
        format_tuple(scene.ambient),
        _RULE,
        f"=Lights := count {len(scene.lights)} ",
    ]
    for number, light in enumerate(scene.lights):
        lines.append(f"\tnum : {number}")
        lines.append(f"\tposition :{format_tuple(light.position)}")
        lines.append(f"\tintensity :{format_tuple(light.intensity)}")
        lines.append(_DASHES)
    lines.append(_RULE)
    lines.append(f"=Objects := count {len(scene.objects)} ")
    for shape in scene.objects:
        lines.append(f"\tid : {shape.id}")
        lines.append(f"\ttype : {_kind_name(shape.kind)}")
        geometry = "(nil)" if shape.kind == ShapeKind.PLANE else f"0x{id(shape):x}"
        lines.append(f"\tobj : {geometry}")
        lines.append(format_material(shape.material))
        lines.append(f"\ttransform : {format_matrix(shape.transform)}")
        lines.append(_DASHES)
    lines.append(_STARS)
    return "\n".join(lines) + "\n"