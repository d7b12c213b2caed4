"""Configuration management for glyphtrace.

This module provides configuration management using Pydantic models.
Configuration can be provided by the host application or defaults.

Key classes:
- TraceConfig: Threshold and tracing limits
- ViewportConfig: Pan/zoom limits and fit-to-view parameters
- EditorConfig: Undo depth and simplify settings
- LoggingConfig: Logging settings
- GlyphTraceSettings: Main application settings
"""

from glyphtrace.config.settings import (
    EditorConfig,
    GlyphTraceSettings,
    LoggingConfig,
    TraceConfig,
    ViewportConfig,
    get_default_settings,
)

__all__ = [
    "EditorConfig",
    "GlyphTraceSettings",
    "LoggingConfig",
    "TraceConfig",
    "ViewportConfig",
    "get_default_settings",
]
