"""
Examples — Worked examples attached to documented symbols

Three kinds of example, each a frozen dataclass with a fixed `type` tag:

- RegularExample ("regular"): code plus an optional function whose result
  is shown next to the code when docs are generated
- GeneratedImageExample ("gen-image"): code plus a drawing function run by
  an external renderer against a canvas; the image name is derived from the
  code and description
- StaticImageExample ("image"): a pre-made image with a description

Constructors never run example code and never touch the filesystem.

Usage:
    from metadoc.core.examples import example, example_gen_image, example_image

    ex = example("MD5 of a string", '(md5 "abc")', fn=lambda: md5("abc"))
    img = example_gen_image(DrawType.SIMPLE, "Square", "(rect canvas 10 10 100 100)")
    img.filename   # '<32 hex chars>.png', stable for this code + description
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from .hashing import content_hash
from .printer import format_forms


IMAGE_FORMAT = ".png"
IMAGES_PATH = "../images/"


class DrawType(Enum):
    """How the drawing collaborator wraps the example function."""
    SIMPLE = "simple"
    XY_LOOP = "xy-loop"

    @classmethod
    def from_value(cls, value: Union["DrawType", str]) -> "DrawType":
        """Accept an enum member, 'simple', ':simple' or 'xy-loop'."""
        if isinstance(value, cls):
            return value
        return cls(str(value).lstrip(":").replace("_", "-"))


@dataclass(frozen=True)
class ImageParams:
    """
    Canvas settings for a generated image.

    Not interpreted by metadoc; handed to the drawing collaborator as-is.
    """
    width: int = 160
    height: int = 160
    hints: str = "high"
    background: Any = 0x30426a

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ImageParams":
        """Create from a mapping; short keys w/h and render_quality are accepted."""
        if not data:
            return cls()
        data = {str(k).lstrip(":"): v for k, v in data.items()}
        return cls(
            width=data.get("w", data.get("width", 160)),
            height=data.get("h", data.get("height", 160)),
            hints=data.get("hints", data.get("render_quality", "high")),
            background=data.get("background", 0x30426a),
        )

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "hints": self.hints,
            "background": self.background,
        }


# =============================================================================
# Example variants
# =============================================================================

@dataclass(frozen=True)
class RegularExample:
    """Code example, evaluated at doc generation time when value_fn is set."""
    doc: str
    example: str
    value_fn: Optional[Callable[[], Any]] = None
    type: str = field(default="regular", init=False)


@dataclass(frozen=True)
class GeneratedImageExample:
    """Code example drawn onto a canvas by an external renderer."""
    doc: str
    example: str
    draw_type: DrawType
    value_fn: Optional[Callable[[Any], Any]]
    filename: str
    value: str
    params: ImageParams = field(default_factory=ImageParams)
    type: str = field(default="gen-image", init=False)

    @property
    def path(self) -> str:
        """Relative path the image is expected at."""
        return IMAGES_PATH + self.filename


@dataclass(frozen=True)
class StaticImageExample:
    """Pre-made image with a description."""
    doc: str
    value: str
    type: str = field(default="image", init=False)


Example = Union[RegularExample, GeneratedImageExample, StaticImageExample]


# =============================================================================
# Constructors
# =============================================================================

def image_markdown(alt: str, filename: str, title: str) -> str:
    """Markdown image link pointing into the images directory."""
    return f'![{alt}]({IMAGES_PATH}{filename} "{title}")'


def example(
    doc: str,
    body: Any,
    evaluate: bool = True,
    fn: Optional[Callable[[], Any]] = None,
    block_forms: Optional[Iterable[str]] = None,
) -> RegularExample:
    """
    Create a regular example.

    Args:
        doc: Description shown above the code
        body: Forms, or source text, shown as the example code
        evaluate: When False, fn is dropped and nothing is evaluated later
        fn: Zero-argument function producing the value shown after the code
        block_forms: Heads that get block layout (default: printer BLOCK_FORMS)

    Returns:
        RegularExample
    """
    return RegularExample(
        doc=doc,
        example=format_forms(body, block_forms=block_forms),
        value_fn=fn if evaluate else None,
    )


def example_gen_image(
    draw_type: Union[DrawType, str],
    doc: str,
    body: Any,
    params: Optional[Union[ImageParams, Mapping[str, Any]]] = None,
    fn: Optional[Callable[[Any], Any]] = None,
    block_forms: Optional[Iterable[str]] = None,
) -> GeneratedImageExample:
    """
    Create an example rendered as an image.

    The image name is content_hash(code + doc) + ".png", so identical code
    and description always map to the same file.

    Args:
        draw_type: DrawType or its name ("simple", "xy-loop")
        doc: Description, also used as the image title
        body: Forms, or source text, shown as the example code
        params: ImageParams or a mapping (w, h, hints, background)
        fn: Function called with a canvas by the drawing collaborator
        block_forms: Heads that get block layout (default: printer BLOCK_FORMS)

    Returns:
        GeneratedImageExample
    """
    sx = format_forms(body, block_forms=block_forms)
    fname = content_hash(sx + doc) + IMAGE_FORMAT
    if not isinstance(params, ImageParams):
        params = ImageParams.from_dict(params)

    return GeneratedImageExample(
        doc=doc,
        example=sx,
        draw_type=DrawType.from_value(draw_type),
        value_fn=fn,
        filename=fname,
        value=image_markdown(sx, fname, doc),
        params=params,
    )


def example_image(doc: str, filename: str) -> StaticImageExample:
    """Create an example that shows an existing image file."""
    return StaticImageExample(doc=doc, value=image_markdown(filename, filename, doc))
