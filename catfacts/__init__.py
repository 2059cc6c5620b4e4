"""Cat Facts API: a greeting and a cat-fact proxy."""

__version__ = "1.0.0"
