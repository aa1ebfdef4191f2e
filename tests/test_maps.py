from taxisearch.env import Grid
from taxisearch.types import SearchResult
from taxisearch.utils.maps import ascii_path_map, summarize_result


def test_ascii_path_map_marks_route_and_keeps_landmarks():
    grid = Grid([[0, 0, 3], [0, 1, 0], [5, 0, 6]])
    path = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert ascii_path_map(grid, path) == "* . 3\n* # .\nP * G"


def test_summarize_result_counts_steps_and_cells():
    result = SearchResult(
        path=((0, 0), (1, 0), (0, 0)),
        solution_found=True,
        expanded_nodes=7,
        tree_depth=2,
        cost=1.333,
        elapsed=0.002,
    )
    summary = summarize_result(result)
    assert "solution=True steps=2 cells=2 expanded=7 depth=2" in summary
    assert "cost=1.333" in summary
