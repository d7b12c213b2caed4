"""Boundary tracing of a single foreground component.

The tracer uses Moore-neighbor tracing: standing on a boundary pixel it
scans the 8 neighbours clockwise, starting just after the pixel it came
from (the backtrack pixel), and steps onto the first foreground neighbour.
The walk ends when it returns to the seed pixel.

Only one component is traced per call. Holes and other components in the
same region are ignored, which is a known limitation of single-contour
extraction rather than something the tracer tries to detect.
"""

from glyphtrace.core.sampler import DEFAULT_THRESHOLD, is_foreground, validate_threshold
from glyphtrace.domain import RasterBuffer
from glyphtrace.exceptions import TraceLimitExceededError

PixelCoord = tuple[int, int]

# Clockwise in image coordinates (y grows downwards): N, NE, E, SE, S, SW, W, NW
NEIGHBOR_OFFSETS: tuple[PixelCoord, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class ContourTracer:
    """Traces the outer boundary of one connected foreground component.

    Example:
        tracer = ContourTracer(buffer, threshold=128)
        boundary = tracer.trace()  # [(x, y), ...] or [] when nothing is inked
    """

    def __init__(
        self,
        buffer: RasterBuffer,
        threshold: int = DEFAULT_THRESHOLD,
        step_limit_factor: int = 2,
    ) -> None:
        """Initialize the tracer.

        Args:
            buffer: Region to trace, in its own pixel coordinates
            threshold: Brightness cutoff for foreground pixels
            step_limit_factor: The walk fails after
                step_limit_factor * width * height steps
        """
        self.buffer = buffer
        self.threshold = validate_threshold(threshold)
        self.max_steps = max(1, step_limit_factor * buffer.width * buffer.height)

    def is_foreground(self, x: int, y: int) -> bool:
        """Classify one pixel with this tracer's threshold."""
        return is_foreground(self.buffer, x, y, self.threshold)

    def find_seed(self) -> PixelCoord | None:
        """Find the first foreground pixel in raster-scan order.

        Returns:
            (x, y) of the pixel, or None if the region holds no ink
        """
        for y in range(self.buffer.height):
            for x in range(self.buffer.width):
                if self.is_foreground(x, y):
                    return (x, y)
        return None

    def trace(self) -> list[PixelCoord]:
        """Trace the component containing the first foreground pixel.

        Returns:
            Closed boundary in walk order (the seed is not repeated at the
            end); empty when the region has no foreground pixels

        Raises:
            TraceLimitExceededError: If the walk does not close in time
        """
        seed = self.find_seed()
        if seed is None:
            return []
        return self.trace_from(seed)

    def trace_from(
        self, seed: PixelCoord, backtrack: PixelCoord | None = None
    ) -> list[PixelCoord]:
        """Walk the boundary of the component containing seed.

        Args:
            seed: A foreground boundary pixel
            backtrack: Background neighbour of seed the walk enters from;
                defaults to the pixel left of seed, which is background
                whenever seed was found by find_seed

        Returns:
            Closed boundary in walk order; just [seed] for an isolated pixel

        Raises:
            ValueError: If seed is background or backtrack is not adjacent
            TraceLimitExceededError: If the walk does not close in time
        """
        if not self.is_foreground(*seed):
            raise ValueError(f"Seed {seed} is not a foreground pixel")

        if backtrack is None:
            backtrack = (seed[0] - 1, seed[1])

        current = seed
        back = backtrack
        points: list[PixelCoord] = []
        steps = 0

        while True:
            points.append(current)

            step = self._next_boundary_pixel(current, back)
            if step is None:
                # Isolated pixel
                return points

            current, back = step
            steps += 1

            if current == seed:
                return points
            if steps >= self.max_steps:
                raise TraceLimitExceededError(seed, self.max_steps)

    def _next_boundary_pixel(
        self, current: PixelCoord, back: PixelCoord
    ) -> tuple[PixelCoord, PixelCoord] | None:
        """Find the next boundary pixel and its backtrack.

        Returns:
            (next pixel, new backtrack), or None if current has no
            foreground neighbours
        """
        cx, cy = current
        offset = (back[0] - cx, back[1] - cy)
        try:
            start = NEIGHBOR_OFFSETS.index(offset)
        except ValueError:
            raise ValueError(f"Backtrack {back} is not adjacent to {current}") from None

        for i in range(1, 9):
            idx = (start + i) % 8
            dx, dy = NEIGHBOR_OFFSETS[idx]
            candidate = (cx + dx, cy + dy)
            if self.is_foreground(*candidate):
                pdx, pdy = NEIGHBOR_OFFSETS[(idx - 1) % 8]
                return candidate, (cx + pdx, cy + pdy)

        return None
