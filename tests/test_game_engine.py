"""Tests for game_engine.py - the per-tick update loop."""
import pytest

from term_flappy.config import GameConfig
from term_flappy.data_models import Obstacle, GameStatus
from term_flappy.exceptions import ConfigError
from term_flappy.game_engine import GameEngine

SCREEN = (80, 24)


def _block(x: int, width: int = 5, height: int = 10) -> Obstacle:
    return Obstacle(x=x, width=width, height=height, color="magenta", screen_size=SCREEN)


@pytest.mark.unit
class TestEngineSetup:

    def test_fresh_engine(self, engine):
        assert not engine.is_game_over()
        assert engine.obstacles == []
        assert engine.score == 0
        assert engine.level == 1
        assert engine.session.status is GameStatus.RUNNING
        assert engine.bird.y == 12.0

    def test_rejects_degenerate_screen(self, clock):
        with pytest.raises(ConfigError):
            GameEngine(config=GameConfig(screen_height=13), clock=clock)

    def test_physics_follows_config(self, clock):
        engine = GameEngine(config=GameConfig(jump_velocity=-5.0), clock=clock)
        engine.jump()
        assert engine.bird.velocity == -5.0


@pytest.mark.unit
class TestSpawning:

    def test_no_spawn_before_interval(self, engine, clock):
        for _ in range(3):
            clock.advance(0.3)
            engine.update()
        assert engine.obstacles == []
        assert engine.score == 0

    def test_one_spawn_per_elapsed_interval(self, engine, clock):
        for n in range(1, 6):
            clock.advance(1.0)
            assert engine.update() is False
            assert len(engine.obstacles) == n
            assert engine.score == n

    def test_irregular_call_cadence_uses_elapsed_time(self, engine, clock):
        for _ in range(8):
            clock.advance(0.25)
            engine.update()
        assert len(engine.obstacles) == 2

    def test_level_rises_every_five_points(self, engine, clock):
        for _ in range(4):
            clock.advance(1.0)
            engine.update()
        assert engine.level == 1
        clock.advance(1.0)
        engine.update()
        assert engine.level == 2
        for _ in range(5):
            clock.advance(1.0)
            engine.update()
        assert (engine.score, engine.level) == (10, 3)

    def test_spawned_obstacles_start_at_the_right_edge(self, engine, clock):
        clock.advance(1.0)
        engine.update()
        obstacle = engine.obstacles[0]
        assert obstacle.x == SCREEN[0] - obstacle.width


@pytest.mark.unit
class TestScrolling:

    def test_obstacles_move_one_column_per_tick(self, engine):
        engine.obstacles.append(_block(60))
        engine.update()
        engine.update()
        assert engine.obstacles[0].x == 58

    def test_obstacle_dropped_after_reaching_zero(self, engine):
        engine.obstacles.append(_block(1, width=2))
        engine.update()
        assert engine.obstacles[0].x == 0
        engine.update()
        assert engine.obstacles == []


@pytest.mark.integration
class TestGameFlow:

    def test_floor_clamp_from_below_the_floor(self, engine):
        engine.bird.y = SCREEN[1] - 1
        engine.bird.velocity = engine.config.max_velocity
        engine.update()
        assert engine.bird.y == SCREEN[1] - 4
        assert engine.bird.velocity == 0.0

    def test_jump_moves_bird_up(self, engine):
        start = engine.bird.bottom_y
        engine.jump()
        engine.update()
        assert engine.bird.bottom_y < start

    def test_bird_stays_on_screen_while_running(self, engine, clock, rng):
        for _ in range(300):
            if rng.random() < 0.25:
                engine.jump()
            clock.advance(0.1)
            if engine.update():
                break
            assert 1 <= engine.bird.y <= SCREEN[1] - 4

    def test_collision_ends_the_game(self, engine):
        engine.obstacles.append(_block(40))
        ticks = 0
        while not engine.update():
            ticks += 1
            assert ticks < 50
        assert engine.is_game_over()
        assert engine.session.status is GameStatus.END

        # Nothing moves once the game is over
        frozen_x = [o.x for o in engine.obstacles]
        frozen_y = engine.bird.y
        for _ in range(5):
            assert engine.update() is True
        assert [o.x for o in engine.obstacles] == frozen_x
        assert engine.bird.y == frozen_y
        assert engine.is_game_over()

    def test_jump_ignored_after_game_over(self, engine):
        engine.bird.y = 20.0
        engine.obstacles.append(_block(27))
        engine.update()
        assert engine.is_game_over()
        velocity = engine.bird.velocity
        engine.jump()
        assert engine.bird.velocity == velocity

    def test_no_spawn_on_the_collision_tick(self, engine, clock):
        engine.bird.y = 20.0
        engine.obstacles.append(_block(30))
        clock.advance(5.0)
        assert engine.update() is True
        assert len(engine.obstacles) == 1
        assert engine.score == 0

    def test_restart_after_game_over(self, engine, clock):
        for _ in range(3):
            clock.advance(1.0)
            engine.update()
        engine.bird.y = 20.0
        engine.obstacles.append(_block(27))
        engine.update()
        assert engine.is_game_over()

        engine.restart()
        assert not engine.is_game_over()
        assert engine.obstacles == []
        assert (engine.score, engine.level) == (0, 1)
        assert engine.best_score == 3
        assert engine.bird.y == 12.0
        assert engine.session.is_running()

        # The spawn timer restarts from the moment of the restart
        clock.advance(0.5)
        engine.update()
        assert engine.obstacles == []

    def test_restart_is_idempotent(self, engine, clock):
        for _ in range(4):
            clock.advance(1.0)
            engine.update()

        engine.restart()
        once = (list(engine.obstacles), engine.score, engine.level,
                engine.is_game_over(), engine.bird.y, engine.bird.velocity)
        engine.restart()
        twice = (list(engine.obstacles), engine.score, engine.level,
                 engine.is_game_over(), engine.bird.y, engine.bird.velocity)

        assert once == twice == ([], 0, 1, False, 12.0, 0.0)
