import pytest

from flappy.difficulty import compute_difficulty
from flappy.driver import FrameDriver
from flappy.obstacles import Obstacle
from flappy.session import GameSession, GameState, InvalidTransition, MemoryScoreStore


def pass_obstacle_now(session):
    """Puts an unscored pipe just behind the bird, clear of it."""
    bird = session.bird
    session.stream.obstacles.append(Obstacle(
        x=bird.left - session.config.pipe_width - 10,
        gap_top=50, gap_height=session.config.min_gap, width=session.config.pipe_width))


def test_initial_state_is_idle(session):
    assert session.state is GameState.IDLE
    assert session.bird is None
    assert not session.running
    assert session.tick() is GameState.IDLE


def test_start_resets_round(session, config):
    session.start()
    assert session.state is GameState.RUNNING
    assert session.running
    assert session.score == 0
    assert session.frame_count == 0
    assert session.obstacles == []
    assert session.difficulty == compute_difficulty(0, config)
    assert session.bird.y == config.screen_height / 2


def test_first_tick_spawns_and_counts_frame(session, config):
    session.start()
    session.tick()
    assert session.frame_count == 1
    assert len(session.obstacles) == 1
    assert session.obstacles[0].x == config.screen_width


def test_spawn_interval_respected(session):
    session.start()
    every = session.difficulty.spawn_every
    for _ in range(every):
        session.bird.y = session.config.screen_height / 2
        session.bird.velocity = 0
        session.tick()
    assert len(session.obstacles) == 1
    session.bird.y = session.config.screen_height / 2
    session.tick()
    assert len(session.obstacles) == 2


def test_jump_only_while_running(session, listener):
    assert session.jump() is False
    session.start()
    assert session.jump() is True
    assert session.bird.velocity == session.config.jump_impulse
    assert listener.events == [('jump',)]


def test_scoring_increments_once_and_raises_difficulty(session, listener, config):
    session.start()
    pass_obstacle_now(session)
    session.tick()
    assert session.score == 1
    assert session.difficulty == compute_difficulty(1, config)
    for _ in range(5):
        session.bird.y = config.screen_height / 2
        session.bird.velocity = 0
        session.tick()
    assert session.score == 1
    assert listener.events.count(('score', 1)) == 1


def test_unattended_round_hits_the_ground(config, store):
    session = GameSession(config.replace(base_spawn_interval=100000, min_spawn_interval=100000),
                          store=store)
    session.start()
    driver = FrameDriver(session)
    for _ in range(1000):
        driver.step()
    floor = config.screen_height - config.floor_height
    assert session.state is GameState.GAME_OVER
    assert not session.running
    assert session.bird.y + session.bird.radius > floor
    assert session.score == 0
    assert session.best_score == 0


def test_best_score_only_moves_up(config):
    store = MemoryScoreStore(best_score=3)
    session = GameSession(config, store=store)
    session.start()
    session.bird.y = 10_000
    session.tick()
    assert session.state is GameState.GAME_OVER
    assert session.best_score == 3
    assert store.best_score == 3


def test_game_over_saves_record_and_leaderboard(session, store, listener):
    session.start()
    pass_obstacle_now(session)
    session.tick()
    pass_obstacle_now(session)
    session.tick()
    session.bird.y = -100
    session.tick()
    assert session.state is GameState.GAME_OVER
    assert session.best_score == 2
    assert store.best_score == 2
    assert store.leaderboard == [2]
    assert session.leaderboard == [2]
    assert listener.events[-1] == ('game_over', 2)


def test_collision_fires_game_over_once(session, listener):
    session.start()
    session.bird.y = -100
    assert session.tick() is GameState.GAME_OVER
    frames = session.frame_count
    assert session.tick() is GameState.GAME_OVER
    assert session.frame_count == frames
    assert [e for e in listener.events if e[0] == 'game_over'] == [('game_over', 0)]


def test_leaderboard_keeps_top_five(config):
    store = MemoryScoreStore(leaderboard=[9, 7, 5, 3, 1])
    session = GameSession(config, store=store)
    session.start()
    session.bird.y = -100
    session.tick()
    assert store.leaderboard == [9, 7, 5, 3, 1]
    session.restart()
    pass_obstacle_now(session)
    session.tick()
    pass_obstacle_now(session)
    session.tick()
    session.bird.y = -100
    session.tick()
    assert store.leaderboard == [9, 7, 5, 3, 2]


def test_restart_clears_previous_round(session, config):
    session.start()
    for _ in range(12):
        pass_obstacle_now(session)
        session.bird.y = config.screen_height / 2
        session.tick()
    assert session.score == 12
    assert session.difficulty != compute_difficulty(0, config)
    session.bird.y = -100
    session.tick()
    old_bird = session.bird

    session.restart()
    assert session.state is GameState.RUNNING
    assert session.score == 0
    assert session.frame_count == 0
    assert session.difficulty == compute_difficulty(0, config)
    assert session.obstacles == []
    assert session.bird is not old_bird
    session.tick()
    assert session.obstacles[0].gap_height == config.base_gap


def test_menu_then_start(session):
    session.start()
    session.bird.y = -100
    session.tick()
    session.menu()
    assert session.state is GameState.IDLE
    session.start()
    assert session.state is GameState.RUNNING


def test_invalid_transitions(session):
    with pytest.raises(InvalidTransition):
        session.restart()
    with pytest.raises(InvalidTransition):
        session.menu()
    session.start()
    with pytest.raises(InvalidTransition):
        session.start()
    with pytest.raises(InvalidTransition):
        session.menu()


def test_sessions_are_independent(config, store):
    a = GameSession(config, store=store)
    b = GameSession(config, store=MemoryScoreStore())
    a.start()
    b.start()
    a.jump()
    a.tick()
    b.tick()
    assert a.bird.y != b.bird.y
    assert a.obstacles is not b.obstacles


def test_dispose_returns_to_idle(session, listener):
    session.start()
    session.tick()
    session.dispose()
    assert session.state is GameState.IDLE
    assert session.bird is None
    assert session.obstacles == []
    assert session.listeners == []
    session.start()
    session.jump()
    assert listener.events == []


class CountingStore(MemoryScoreStore):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.loads = 0

    def load_best_score(self):
        self.loads += 1
        return super().load_best_score()

    def load_leaderboard(self):
        self.loads += 1
        return super().load_leaderboard()


def test_store_loaded_at_round_start_only(config):
    store = CountingStore(leaderboard=[6, 1])
    session = GameSession(config, store=store)
    session.start()
    loads = store.loads
    assert session.leaderboard == [6, 1]

    store.leaderboard = [99]
    session.bird.y = -100
    session.tick()
    assert store.loads == loads
    assert store.leaderboard == [6, 1, 0]
