"""A small CPU path tracer: spheres, diffuse and metal materials, PNG export."""

__version__ = "0.1.0"