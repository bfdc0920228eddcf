"""
Clue ledger: an ordered binary search tree of collected clues, without duplicates.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from .exceptions import AllocationFailure


@dataclass
class ClueNode:
    """One distinct collected clue."""
    clue: str
    left: Optional['ClueNode'] = None
    right: Optional['ClueNode'] = None


def _new_node(clue_text: str) -> ClueNode:
    try:
        return ClueNode(clue=clue_text)
    except MemoryError as e:
        raise AllocationFailure("clue ledger node", clue_text) from e


def insert(root: Optional[ClueNode], clue_text: Optional[str]) -> Optional[ClueNode]:
    """
    Insert a clue, keeping lexicographic order and skipping duplicates.

    The node is fully built before it is linked, so a failed allocation
    leaves the tree untouched.

    Args:
        root: Current root (None for an empty ledger)
        clue_text: Clue to insert; None or empty text is ignored

    Returns:
        The root of the tree, which is new when the ledger was empty

    Raises:
        AllocationFailure: If the new node cannot be allocated
    """
    if not clue_text:
        return root
    if root is None:
        return _new_node(clue_text)

    node = root
    while True:
        if clue_text == node.clue:
            return root
        if clue_text < node.clue:
            if node.left is None:
                node.left = _new_node(clue_text)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = _new_node(clue_text)
                return root
            node = node.right


def contains(root: Optional[ClueNode], clue_text: str) -> bool:
    """Check if a clue is in the tree."""
    node = root
    while node is not None:
        if clue_text == node.clue:
            return True
        node = node.left if clue_text < node.clue else node.right
    return False


def inorder_traverse(root: Optional[ClueNode], visit: Callable[[str], None]) -> None:
    """Call visit with every clue in ascending order."""
    if root is None:
        return
    inorder_traverse(root.left, visit)
    visit(root.clue)
    inorder_traverse(root.right, visit)


def destroy(root: Optional[ClueNode]) -> None:
    """Release every node of the tree."""
    if root is None:
        return
    destroy(root.left)
    destroy(root.right)
    root.left = None
    root.right = None


class ClueLedger:
    """Collected clues, ordered and deduplicated."""

    def __init__(self):
        self.root: Optional[ClueNode] = None
        self._size = 0

    def add(self, clue_text: Optional[str]) -> bool:
        """
        Add a clue to the ledger.
        Returns True if the clue was not collected before.
        """
        if not clue_text or contains(self.root, clue_text):
            return False
        self.root = insert(self.root, clue_text)
        self._size += 1
        return True

    def traverse(self, visit: Callable[[str], None]) -> None:
        """Visit every clue in ascending order."""
        inorder_traverse(self.root, visit)

    def clues(self) -> List[str]:
        """Get all clues in ascending order."""
        result: List[str] = []
        self.traverse(result.append)
        return result

    def is_empty(self) -> bool:
        return self.root is None

    def destroy(self) -> None:
        """Release every entry. The ledger is empty afterwards."""
        destroy(self.root)
        self.root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue_text: object) -> bool:
        return isinstance(clue_text, str) and contains(self.root, clue_text)

    def __iter__(self) -> Iterator[str]:
        return iter(self.clues())
