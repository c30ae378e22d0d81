"""Integration tests on the bundled 20x20 example levels.

These tests verify:
1. The example levels compile with the default 20x20 grid and projection
2. Routes, exclusions and waypoints match the hand-traced expectations
3. Compiled levels survive a JSON save/load roundtrip unchanged
4. Every waypoint maps back onto its route tile

Run these after editing a level file to catch routing surprises early.
"""

import json

import pytest

from route_compiler.constants import GridConfig, ProjectionConfig
from route_compiler.core.coordinate_projector import CoordinateProjector
from route_compiler.generators.route_factory import RouteFactory
from route_compiler.model.compiled_level import CompiledLevel
from route_compiler.model.coordinate import Coordinate
from route_compiler.model.route import Waypoint


def c(col: int, row: int) -> Coordinate:
    return Coordinate(col=col, row=row)


# =============================================================================
# IMPORT SMOKE TESTS
# =============================================================================


class TestImportSmoke:
    """Verify all modules import without errors."""

    def test_package_exports(self) -> None:
        from route_compiler import core, generators, model

        assert hasattr(core, "RouteEnumerator")
        assert hasattr(generators, "RouteFactory")
        assert hasattr(model, "CompiledLevel")

    def test_default_constants(self) -> None:
        assert GridConfig.SIZE == 20
        assert ProjectionConfig.TILE_SIZE == 32
        assert ProjectionConfig.HEADER_HEIGHT == 40


# =============================================================================
# LEVEL 1 - two forks, dead-end walks
# =============================================================================


class TestLevelOne:
    """Three entries; two forks; the bottom branch needs two stuck walks to open."""

    @pytest.fixture
    def level(self, factory: RouteFactory, level1_path) -> CompiledLevel:
        return factory.compile_file(path=level1_path)

    def test_structure(self, level: CompiledLevel) -> None:
        assert level.grid_size == 20
        assert level.goal == c(15, 10)
        assert len(level.path) == 34
        assert level.forks == (c(5, 10), c(10, 10))
        assert [entry.coordinate for entry in level.entry_points] == [c(5, 0), c(0, 10), c(10, 19)]

    def test_exclusions(self, level: CompiledLevel) -> None:
        assert level.exclusions == (c(4, 10), c(5, 9), c(5, 10), c(9, 10), c(10, 11))

    def test_routes(self, level: CompiledLevel) -> None:
        top = level.route_for(c(5, 0)).route
        left = level.route_for(c(0, 10)).route
        bottom = level.route_for(c(10, 19)).route

        assert len(top) == 21
        assert top.coordinates[:11] == tuple(c(5, row) for row in range(11))
        assert len(left) == 16
        assert left.coordinates == tuple(c(col, 10) for col in range(16))
        assert len(bottom) == 15
        assert bottom.coordinates[:10] == tuple(c(10, row) for row in range(19, 9, -1))
        assert c(9, 10) not in bottom.coordinates

    def test_spawn_waypoints(self, level: CompiledLevel) -> None:
        spawns = [waypoints[0] for waypoints in level.waypoint_lists]
        assert spawns == [(166, 14), (-26, 366), (326, 686)]
        assert all(waypoints[-1] == (486, 366) for waypoints in level.waypoint_lists)


# =============================================================================
# LEVEL 2 - four-way fork
# =============================================================================


class TestLevelTwo:
    """Cross-shaped level resolved in one walk per entry."""

    @pytest.fixture
    def level(self, factory: RouteFactory, level2_path) -> CompiledLevel:
        return factory.compile_file(path=level2_path)

    def test_structure(self, level: CompiledLevel) -> None:
        assert level.goal == c(15, 10)
        assert level.forks == (c(10, 10),)
        assert [entry.coordinate for entry in level.entry_points] == [c(10, 0), c(0, 10), c(10, 19)]

    def test_exclusions(self, level: CompiledLevel) -> None:
        assert level.exclusions == (c(9, 10), c(10, 11), c(10, 9))

    def test_route_lengths(self, level: CompiledLevel) -> None:
        assert [len(projected.route) for projected in level.routes] == [16, 16, 15]

    def test_every_route_enters_the_fork_from_its_own_branch(self, level: CompiledLevel) -> None:
        before_fork = []
        for projected in level.routes:
            index = projected.route.coordinates.index(c(10, 10))
            before_fork.append(projected.route.coordinates[index - 1])
        assert before_fork == [c(10, 9), c(9, 10), c(10, 11)]


# =============================================================================
# SERIALIZATION AND PROJECTION
# =============================================================================


class TestCompiledLevelFiles:
    """Saving, loading and re-projecting compiled levels."""

    @pytest.mark.parametrize("level_fixture", ["level1_path", "level2_path"])
    def test_json_roundtrip(self, factory: RouteFactory, level_fixture: str, request, tmp_path) -> None:
        level = factory.compile_file(path=request.getfixturevalue(level_fixture))

        saved = level.save_json(path=tmp_path / "nested" / "level.json")
        assert saved.exists()
        assert CompiledLevel.load_json(path=saved) == level

    def test_json_is_plain_lists(self, factory: RouteFactory, level1_path, tmp_path) -> None:
        saved = factory.compile_file(path=level1_path).save_json(path=tmp_path / "level1.json")

        with open(saved, "r", encoding="utf-8") as f:
            data = json.load(f)
        assert data["goal"] == [15, 10]
        assert data["routes"][0]["waypoints"][0] == [166, 14]
        assert len(data["routes"]) == 3

    def test_waypoints_map_back_onto_routes(self, factory: RouteFactory, level1_path) -> None:
        level = factory.compile_file(path=level1_path)
        projector = CoordinateProjector(
            tile_size=ProjectionConfig.TILE_SIZE,
            offset_x=ProjectionConfig.OFFSET_X,
            offset_y=ProjectionConfig.OFFSET_Y,
            header_height=ProjectionConfig.HEADER_HEIGHT,
        )
        for projected in level.routes:
            tiles = [projector.unproject(waypoint) for waypoint in projected.waypoints]
            assert tiles == [projected.entry.spawn, *projected.route.coordinates]

    def test_spawn_lookup(self, factory: RouteFactory, level1_path) -> None:
        level = factory.compile_file(path=level1_path)
        projected = level.route_from_spawn(Waypoint(x=326, y=686))
        assert projected.entry.coordinate == c(10, 19)
