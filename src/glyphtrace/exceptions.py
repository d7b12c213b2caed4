"""Exception hierarchy for Glyphtrace."""


class GlyphTraceError(Exception):
    """Base exception for all Glyphtrace errors."""

    pass


class RasterError(GlyphTraceError):
    """Invalid raster buffer data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid raster buffer: {reason}")


class SelectionError(GlyphTraceError):
    """Errors related to the extraction selection."""

    pass


class DegenerateSelectionError(SelectionError):
    """Selection is too small to trace."""

    def __init__(self, width: float, height: float, min_size: float) -> None:
        self.width = width
        self.height = height
        self.min_size = min_size
        super().__init__(
            f"Selection {width:g}x{height:g} is smaller than the minimum of {min_size:g} pixels"
        )


class TraceError(GlyphTraceError):
    """Errors raised while tracing a contour."""

    pass


class TraceLimitExceededError(TraceError):
    """Boundary walk did not close within its step budget."""

    def __init__(self, seed: tuple[int, int], max_steps: int) -> None:
        self.seed = seed
        self.max_steps = max_steps
        super().__init__(
            f"Trace from {seed} did not return to its start within {max_steps} steps"
        )


class PathError(GlyphTraceError):
    """Errors related to path data or path edits."""

    pass


class PathParseError(PathError):
    """Path description could not be parsed."""

    def __init__(self, description: str, reason: str, offset: int | None = None) -> None:
        self.description = description
        self.reason = reason
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"Cannot parse path description{where}: {reason}")


class PathInvariantError(PathError):
    """Edit would leave a path with fewer than three points."""

    def __init__(self, operation: str, point_count: int) -> None:
        self.operation = operation
        self.point_count = point_count
        super().__init__(
            f"Refusing '{operation}': a closed path needs at least 3 points, "
            f"result would have {point_count}"
        )
