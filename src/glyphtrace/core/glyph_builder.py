"""Assembly of vector glyph records."""

import uuid

from glyphtrace.domain import VectorGlyph


def new_glyph_id() -> str:
    """Generate a unique glyph identifier."""
    return uuid.uuid4().hex


def default_glyph_name(glyph_id: str) -> str:
    """Human-readable default label derived from the id."""
    return f"Glyph {glyph_id[-4:].upper()}"


def build_glyph(
    path_description: str,
    width: int,
    height: int,
    name: str | None = None,
) -> VectorGlyph:
    """Create a new glyph record for a traced outline.

    Args:
        path_description: Serialized outline
        width: Width of the traced region in natural pixels
        height: Height of the traced region in natural pixels
        name: Label; defaults to "Glyph XXXX"

    Returns:
        VectorGlyph with a freshly generated id
    """
    if width < 0 or height < 0:
        raise ValueError(f"Glyph size must be non-negative, got {width}x{height}")

    glyph_id = new_glyph_id()
    return VectorGlyph(
        id=glyph_id,
        path_description=path_description,
        width=int(width),
        height=int(height),
        name=name if name is not None else default_glyph_name(glyph_id),
    )
