from huntgrid.sim.board import Board, GenerationThresholds
from huntgrid.sim.config_loader import GameConfig
from huntgrid.sim.contracts import Direction, TileContent, TileHint, move, shoot
from huntgrid.sim.simulation import Simulation


def test_new_simulation_state() -> None:
    sim = Simulation(GameConfig(size=6, seed=11))

    assert sim.player.position == (0, 0)
    assert sim.player.heading == Direction.UP
    assert sim.player.ammo == 3
    assert sim.board.tile(0, 0).discovered
    assert sim.score == 0
    assert sim.total_score == sim.board.total_treasure_count()
    assert sim.turn == 0


def test_default_keeps_the_generated_spawn_tile() -> None:
    thresholds = GenerationThresholds(empty=0.0, hole=1.0, hazard=0.0, treasure=0.0)
    sim = Simulation(GameConfig(size=3, seed=1, thresholds=thresholds))

    assert GameConfig().safe_start is False
    assert sim.board.content_at(0, 0) == TileContent.HOLE
    assert sim.player.position == (0, 0)
    assert sim.deaths == 0


def test_safe_start_clears_the_spawn_tile() -> None:
    thresholds = GenerationThresholds(empty=0.0, hole=1.0, hazard=0.0, treasure=0.0)
    sim = Simulation(
        GameConfig(size=3, seed=1, thresholds=thresholds, safe_start=True)
    )
    assert sim.board.content_at(0, 0) == TileContent.EMPTY
    assert sim.board.tile(1, 0).content == TileContent.HOLE
    assert sim.board.tile(1, 0).hints == {TileHint.WIND}


def test_same_seed_same_board() -> None:
    first = Simulation(GameConfig(size=8, seed=5))
    second = Simulation(GameConfig(size=8, seed=5))
    assert first.snapshot() == second.snapshot()


def test_stepping_on_treasure_scores() -> None:
    sim = _simulation_with(
        _board(4, {(0, 1): TileContent.TREASURE, (3, 3): TileContent.TREASURE})
    )
    assert sim.total_score == 2

    events = sim.handle_input(move(Direction.UP))

    assert [event.kind for event in events] == ["MOVE", "COLLECT"]
    assert sim.score == 1
    assert sim.total_score == 2
    assert sim.board.content_at(0, 1) == TileContent.EMPTY
    assert TileHint.GLITTER not in sim.board.tile(0, 1).hints
    assert not sim.is_won()


def test_collecting_the_last_treasure_wins() -> None:
    sim = _simulation_with(_board(3, {(0, 1): TileContent.TREASURE}))

    events = sim.handle_input({"kind": "MOVE", "direction": "UP"})

    assert [event.kind for event in events] == ["MOVE", "COLLECT", "WIN"]
    assert sim.is_won()
    assert sim.snapshot().won


def test_stepping_into_a_hole_resets() -> None:
    sim = _simulation_with(
        _board(4, {(0, 1): TileContent.TREASURE, (1, 1): TileContent.HOLE}),
        starting_ammo=2,
    )
    sim.handle_input(move(Direction.UP))
    sim.handle_input(shoot())
    sim.handle_input(move(Direction.RIGHT))
    assert sim.score == 1
    old_board = sim.board

    events = sim.handle_input(move(Direction.RIGHT))

    assert [event.kind for event in events] == ["MOVE", "DEATH", "RESET"]
    assert events[1].payload["cause"] == "FELL"
    assert sim.board is not old_board
    assert sim.score == 0
    assert sim.total_score == sim.board.total_treasure_count()
    assert sim.player.position == (0, 0)
    assert sim.player.heading == Direction.UP
    assert sim.player.ammo == 2
    assert sim.deaths == 1


def test_walking_into_a_hazard_resets() -> None:
    sim = _simulation_with(_board(3, {(0, 1): TileContent.HAZARD}))

    events = sim.handle_input(move(Direction.UP))

    assert events[1].kind == "DEATH"
    assert events[1].payload["cause"] == "EATEN"
    assert sim.player.position == (0, 0)


def test_turning_does_not_trigger_tile_effects() -> None:
    sim = _simulation_with(_board(3, {(1, 0): TileContent.HOLE}))

    events = sim.handle_input(move(Direction.RIGHT))

    assert [event.kind for event in events] == ["TURN"]
    assert sim.deaths == 0
    assert sim.player.heading == Direction.RIGHT


def test_shoot_through_handle_input() -> None:
    sim = _simulation_with(_board(5, {(0, 3): TileContent.HAZARD}))

    events = sim.handle_input(shoot())

    assert [event.kind for event in events] == ["SHOOT", "HIT"]
    assert events[1].payload["at"] == (0, 3)
    assert sim.player.ammo == 2
    assert TileHint.STENCH not in sim.board.tile(0, 2).hints


def test_empty_quiver_event() -> None:
    sim = _simulation_with(_board(3, {}), starting_ammo=0)

    events = sim.handle_input(shoot())

    assert [event.kind for event in events] == ["EMPTY_QUIVER"]
    assert sim.player.ammo == 0


def test_unknown_inputs_are_ignored() -> None:
    sim = _simulation_with(_board(3, {}))
    before = sim.snapshot()

    assert sim.handle_input({"kind": "JUMP"}) == []
    assert sim.handle_input("pause") == []
    assert sim.turn == 0
    assert sim.snapshot() == before


def test_raw_inputs_dispatch_by_kind() -> None:
    sim = _simulation_with(_board(3, {}))

    assert sim.handle_input({"kind": "MOVE"}) == []
    assert sim.turn == 0

    turned = sim.handle_input({"kind": "MOVE", "direction": "RIGHT"})
    fired = sim.handle_input({"kind": "SHOOT"})

    assert [event.kind for event in turned] == ["TURN"]
    assert [event.kind for event in fired] == ["SHOOT", "MISS"]
    assert sim.player.ammo == 2
    assert sim.turn == 2


def test_board_without_treasure_is_won() -> None:
    thresholds = GenerationThresholds(empty=1.0, hole=0.0, hazard=0.0, treasure=0.0)
    sim = Simulation(GameConfig(size=3, seed=2, thresholds=thresholds))
    assert sim.total_score == 0
    assert sim.is_won()


def test_score_bounds_hold_over_random_play() -> None:
    sim = Simulation(GameConfig(size=6, seed=99))
    presses = [
        move(Direction.UP),
        move(Direction.RIGHT),
        move(Direction.DOWN),
        move(Direction.LEFT),
        shoot(),
    ]
    last_score = 0
    last_deaths = 0
    for index in range(300):
        sim.handle_input(presses[(index // 2) % len(presses)])
        assert 0 <= sim.score <= sim.total_score
        assert sim.board.in_bounds(*sim.player.position)
        if sim.deaths == last_deaths:
            assert sim.score >= last_score
        last_score = sim.score
        last_deaths = sim.deaths


def test_payload_wraps_snapshot() -> None:
    sim = Simulation(GameConfig(size=4, seed=3))
    events = sim.handle_input(move(Direction.RIGHT))
    payload = sim.payload(events)

    assert payload.turn == 1
    assert payload.state.size == 4
    assert len(payload.state.tiles) == 16
    assert payload.state.player.heading == Direction.RIGHT
    assert payload.events is not None
    assert payload.events[0].kind == "TURN"


def _board(size: int, placements: dict[tuple[int, int], TileContent]) -> Board:
    rows = [[TileContent.EMPTY] * size for _ in range(size)]
    for (x, y), content in placements.items():
        rows[y][x] = content
    return Board(size, rows)


def _simulation_with(board: Board, **config) -> Simulation:
    sim = Simulation(GameConfig(size=board.size, seed=0, **config))
    board.tile(0, 0).discover()
    sim.board = board
    sim.total_score = board.total_treasure_count()
    return sim
