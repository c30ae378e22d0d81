"""Level compilation entry point.

Provides the RouteFactory, which runs the whole pipeline:
classify -> resolve adjacency -> enumerate routes -> project to pixels.
"""

from route_compiler.generators.route_factory import RouteFactory

__all__ = [
    "RouteFactory",
]
