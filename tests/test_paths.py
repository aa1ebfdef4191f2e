from taxisearch.search import is_contiguous, join_paths, reconstruct_path, remove_duplicates
from taxisearch.types import AgentStep, Direction


def _chain():
    root = AgentStep(current_position=(0, 0))
    a = AgentStep((1, 0), previous_position=(0, 0), action=Direction.RIGHT, depth=1)
    b = AgentStep((1, 1), previous_position=(1, 0), action=Direction.DOWN, depth=2)
    c = AgentStep((2, 1), previous_position=(1, 1), action=Direction.RIGHT, depth=3)
    return root, a, b, c


def test_reconstruct_returns_root_to_leaf():
    root, a, b, c = _chain()
    parents = {step.current_position: step for step in (root, a, b)}
    path = reconstruct_path(parents, c)
    assert path == [(0, 0), (1, 0), (1, 1), (2, 1)]
    assert path.count((0, 0)) == 1


def test_reconstruct_stops_at_origin():
    seed = AgentStep((1, 0), previous_position=(0, 0), depth=1)
    child = AgentStep((1, 1), previous_position=(1, 0), depth=2)
    # The seed's own parent is known but belongs to the earlier phase.
    parents = {(0, 0): AgentStep((0, 0)), (1, 0): seed}
    assert reconstruct_path(parents, child, origin=(1, 0)) == [(1, 0), (1, 1)]


def test_reconstruct_exits_when_parent_missing():
    _, a, b, c = _chain()
    parents = {b.current_position: b}
    assert reconstruct_path(parents, c) == [(1, 1), (2, 1)]


def test_remove_duplicates_keeps_first_occurrence_order():
    coords = [(0, 0), (1, 0), (0, 0), (1, 1), (1, 0)]
    assert remove_duplicates(coords) == [(0, 0), (1, 0), (1, 1)]


def test_join_paths_keeps_junction_once():
    assert join_paths([(0, 0), (0, 1)], [(0, 1), (1, 1)]) == [(0, 0), (0, 1), (1, 1)]
    assert join_paths([], [(0, 1)]) == [(0, 1)]


def test_is_contiguous():
    assert is_contiguous([(0, 0), (0, 1), (1, 1)])
    assert not is_contiguous([(0, 0), (1, 1)])
    assert not is_contiguous([(0, 0), (0, 0)])
