"""A small ray tracer: shapes, lighting, shadows, reflections and PPM output."""

__version__ = "0.1.0"