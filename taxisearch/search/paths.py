"""Path reconstruction and path helpers."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

from taxisearch.types import AgentStep, Coord


def reconstruct_path(
    parent_nodes: Mapping[Coord, AgentStep],
    end_step: AgentStep,
    origin: Optional[Coord] = None,
) -> List[Coord]:
    """Walk parent links back from ``end_step`` and return root-to-leaf coords.

    ``parent_nodes`` maps a coordinate to the first step dequeued there. The
    walk stops at a root step, at ``origin`` (the phase seed) or when no
    parent was recorded.
    """
    path: List[Coord] = [end_step.current_position]
    step = end_step
    while not step.is_root and step.current_position != origin:
        parent = parent_nodes.get(step.previous_position)
        if parent is None:
            break
        path.append(parent.current_position)
        step = parent
    path.reverse()
    return path


def join_paths(first: Sequence[Coord], second: Sequence[Coord]) -> List[Coord]:
    """Concatenate two legs sharing a junction cell, keeping the junction once."""
    if first and second and first[-1] == second[0]:
        return list(first) + list(second[1:])
    return list(first) + list(second)


def remove_duplicates(coords: Iterable[Coord]) -> List[Coord]:
    seen = set()
    result: List[Coord] = []
    for coord in coords:
        if coord not in seen:
            seen.add(coord)
            result.append(coord)
    return result


def is_contiguous(path: Sequence[Coord]) -> bool:
    for prev, cur in zip(path, path[1:]):
        if abs(cur[0] - prev[0]) + abs(cur[1] - prev[1]) != 1:
            return False
    return True


__all__ = ["reconstruct_path", "join_paths", "remove_duplicates", "is_contiguous"]
