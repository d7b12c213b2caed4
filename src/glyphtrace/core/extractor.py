"""Raster-to-vector extraction pipeline.

Turns a selection over a decoded image into a glyph record:

1. Reject selections too small to trace
2. Convert the selection from display to natural pixels and crop it
3. Trace the first foreground component's boundary
4. Collapse collinear boundary points
5. Serialize the outline and build the glyph record

Tracing runs synchronously. Hosts that must stay responsive can hand the
work to an executor with GlyphExtractor.submit.
"""

import math
import time
from concurrent.futures import Executor, Future

from glyphtrace.config import GlyphTraceSettings
from glyphtrace.core.glyph_builder import build_glyph
from glyphtrace.core.simplify import remove_collinear
from glyphtrace.core.tracer import ContourTracer
from glyphtrace.domain import BoundingBox, Point, RasterBuffer, VectorGlyph
from glyphtrace.exceptions import DegenerateSelectionError, TraceLimitExceededError
from glyphtrace.io.path_codec import serialize_path
from glyphtrace.utils import ExtractionLogger


class GlyphExtractor:
    """Extracts one glyph outline per selection.

    Example:
        extractor = GlyphExtractor()
        glyph = extractor.extract(raster, BoundingBox(10, 10, 40, 60))
        if glyph is None:
            ...  # nothing inked in the selection
    """

    def __init__(
        self,
        settings: GlyphTraceSettings | None = None,
        extraction_logger: ExtractionLogger | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            settings: Application settings (defaults if None)
            extraction_logger: Outcome logger (a fresh one if None)
        """
        self.settings = settings if settings is not None else GlyphTraceSettings()
        self.extraction_logger = (
            extraction_logger if extraction_logger is not None else ExtractionLogger()
        )

    def trace_points(self, region: RasterBuffer, threshold: int) -> tuple[list[Point], int]:
        """Trace a region and simplify its boundary.

        Returns:
            (simplified outline points, raw boundary length)

        Raises:
            TraceLimitExceededError: If the boundary walk does not close
        """
        tracer = ContourTracer(
            region,
            threshold=threshold,
            step_limit_factor=self.settings.trace.step_limit_factor,
        )
        boundary = tracer.trace()
        points = [Point(float(x), float(y)) for x, y in boundary]
        return remove_collinear(points, closed=True), len(boundary)

    def extract(
        self,
        raster: RasterBuffer,
        selection: BoundingBox,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        threshold: int | None = None,
    ) -> VectorGlyph | None:
        """Extract the glyph under a selection.

        Args:
            raster: Decoded source image
            selection: Selection in display coordinates
            scale_x: Natural pixels per display pixel, horizontally
            scale_y: Natural pixels per display pixel, vertically
            threshold: Brightness cutoff (settings default if None)

        Returns:
            New glyph, or None when the selection holds no traceable outline

        Raises:
            DegenerateSelectionError: If the selection is under the minimum size
            TraceLimitExceededError: If the boundary walk does not close
        """
        min_size = self.settings.trace.min_selection_size
        if selection.is_degenerate(min_size):
            error = DegenerateSelectionError(selection.width, selection.height, min_size)
            self.extraction_logger.log_selection_rejected(error)
            raise error

        if threshold is None:
            threshold = self.settings.trace.threshold

        natural = selection.scaled(scale_x, scale_y)
        width = math.floor(natural.width)
        height = math.floor(natural.height)
        region = raster.crop(natural.x, natural.y, width, height)

        self.extraction_logger.log_extraction_start(width, height, threshold)
        start_time = time.time()

        try:
            points, raw_count = self.trace_points(region, threshold)
        except TraceLimitExceededError as e:
            self.extraction_logger.log_trace_failed(e)
            raise

        if len(points) <= 2:
            self.extraction_logger.log_empty_selection(raw_count)
            return None

        glyph = build_glyph(serialize_path(points), width, height)

        duration_ms = (time.time() - start_time) * 1000
        self.extraction_logger.log_glyph_extracted(
            glyph.id, raw_count, len(points), duration_ms
        )
        return glyph

    def submit(
        self,
        executor: Executor,
        raster: RasterBuffer,
        selection: BoundingBox,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        threshold: int | None = None,
    ) -> "Future[VectorGlyph | None]":
        """Run extract on an executor and return its future.

        Errors raised by extract are delivered through the future.
        """
        return executor.submit(self.extract, raster, selection, scale_x, scale_y, threshold)
