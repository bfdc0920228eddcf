"""
Room tree: the fixed binary map of the mansion.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Set

from .exceptions import AllocationFailure, MapDefinitionError


@dataclass
class Room:
    """A location in the mansion. Each room owns its left and right subtrees."""
    name: str
    clue: Optional[str] = None
    left: Optional['Room'] = None
    right: Optional['Room'] = None

    def __str__(self) -> str:
        return self.name

    @property
    def has_clue(self) -> bool:
        """Check if a clue can be found here."""
        return bool(self.clue)

    @property
    def has_left(self) -> bool:
        return self.left is not None

    @property
    def has_right(self) -> bool:
        return self.right is not None

    def child(self, direction: str) -> Optional['Room']:
        """Get the child room for 'left' or 'right'."""
        if direction == "left":
            return self.left
        if direction == "right":
            return self.right
        raise ValueError(f"Unknown direction: {direction}")


def create_room(name: str, clue: Optional[str] = None) -> Room:
    """
    Create a room with an optional clue.

    Args:
        name: Room name, must be non-empty
        clue: Clue text; None or empty text means no clue here

    Returns:
        The new Room, with no children

    Raises:
        ValueError: If name is empty
        AllocationFailure: If the room cannot be allocated
    """
    if not name:
        raise ValueError("Room name must be non-empty")
    try:
        return Room(name=name, clue=clue if clue else None)
    except MemoryError as e:
        raise AllocationFailure("room", name) from e


def destroy_tree(root: Optional[Room]) -> None:
    """Release every room of the tree rooted at root. No-op on an empty tree."""
    if root is None:
        return
    destroy_tree(root.left)
    destroy_tree(root.right)
    root.left = None
    root.right = None
    root.clue = None


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Walk the tree in pre-order (room, left subtree, right subtree)."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def build_tree(spec: Optional[Dict[str, Any]], _seen: Optional[Set[int]] = None) -> Optional[Room]:
    """
    Build a room tree from nested mapping data.

    Each node is a mapping with 'name', optional 'clue', and optional 'left'
    and 'right' nodes of the same shape.

    Raises:
        MapDefinitionError: If a node is not a mapping, has no name, or
            appears twice (a YAML alias pointing back into the tree)
    """
    if spec is None:
        return None
    if not isinstance(spec, dict):
        raise MapDefinitionError(f"Room definition must be a mapping, got {type(spec).__name__}")

    if _seen is None:
        _seen = set()
    if id(spec) in _seen:
        raise MapDefinitionError(f"Room {spec.get('name')!r} appears more than once in the map")
    _seen.add(id(spec))

    name = spec.get("name")
    if not name or not isinstance(name, str):
        raise MapDefinitionError(f"Room definition without a name: {spec!r}")

    clue = spec.get("clue")
    if clue is not None and not isinstance(clue, str):
        raise MapDefinitionError(f"Clue of room {name!r} must be text")

    room = create_room(name, clue)
    room.left = build_tree(spec.get("left"), _seen)
    room.right = build_tree(spec.get("right"), _seen)
    return room
