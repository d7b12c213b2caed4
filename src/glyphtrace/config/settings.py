"""Configuration settings for Glyphtrace."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class TraceConfig(BaseModel):
    """Configuration for pixel classification and contour tracing."""

    threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Luma below which a pixel counts as ink",
    )
    min_selection_size: float = Field(
        default=5.0,
        ge=0.0,
        description="Smallest selection width/height (display pixels) worth tracing",
    )
    step_limit_factor: int = Field(
        default=2,
        ge=1,
        le=16,
        description="Boundary walk gives up after factor * width * height steps",
    )


class ViewportConfig(BaseModel):
    """Configuration for pan/zoom behaviour."""

    min_scale: float = Field(default=0.1, gt=0.0, description="Smallest zoom level")
    max_scale: float = Field(default=10.0, gt=0.0, description="Largest zoom level")
    zoom_step: float = Field(
        default=1.2,
        gt=1.0,
        le=4.0,
        description="Factor applied by the zoom in/out buttons",
    )
    editor_fit_margin: float = Field(
        default=20.0,
        ge=0.0,
        description="Padding around a glyph when fitting it in the editor",
    )
    editor_max_fit_scale: float = Field(
        default=2.0,
        gt=0.0,
        description="Fit-to-view never magnifies a glyph beyond this scale",
    )
    selection_fit_margin: float = Field(
        default=0.0,
        ge=0.0,
        description="Padding around the source image in the selection view",
    )
    selection_max_fit_scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Fit-to-view never magnifies the source image beyond this scale",
    )

    @model_validator(mode="after")
    def _check_scale_range(self) -> "ViewportConfig":
        if self.min_scale > self.max_scale:
            raise ValueError("min_scale must not exceed max_scale")
        return self


class EditorConfig(BaseModel):
    """Configuration for the path editor."""

    history_capacity: int = Field(
        default=11,
        ge=1,
        le=1000,
        description="Number of undo snapshots kept",
    )
    decimate_min_points: int = Field(
        default=6,
        ge=3,
        description="Simplify only thins paths with more points than this",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphTraceSettings(BaseModel):
    """Main application settings."""

    trace: TraceConfig = Field(default_factory=TraceConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphTraceSettings:
    """Get default application settings."""
    return GlyphTraceSettings()
