"""Level Route Compiler - deterministic routes for tile-grid levels.

Compiles a fixed-size tile layout into one route per boundary entry point:
- Tile classification (empty, obstacle, goal, path) with strict validation
- Path adjacency and fork detection
- Backward walk with fork exclusion, one deterministic route per entry
- Projection of routes to pixel-space waypoints for movement logic

Modules:
    core: Pipeline stages (layout reader, classifier, adjacency, enumerator, projector)
    model: Data structures (Coordinate, EntryPoint, Route, CompiledLevel, errors)
    generators: RouteFactory running the full pipeline

Example:
    from route_compiler.generators import RouteFactory

    level = RouteFactory().compile_file(path="levels/level1.txt")
    print(level.entry_count, level.waypoint_lists[0])
"""
