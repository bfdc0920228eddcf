"""
Suspect index: a chained hash table mapping clue text to the suspect it implicates.
"""

from typing import Iterator, List, Optional, Tuple

from .exceptions import AllocationFailure

_HASH_MASK = 0xFFFFFFFFFFFFFFFF


def djb2_hash(text: str) -> int:
    """Classic djb2 string hash (hash * 33 + byte) over the UTF-8 bytes."""
    h = 5381
    for byte in text.encode("utf-8"):
        h = ((h << 5) + h + byte) & _HASH_MASK
    return h


class SuspectIndex:
    """
    Hash table with a fixed number of buckets. Collisions are resolved by
    chaining; each bucket is a list of [clue, suspect] entries, newest first.
    Keys are compared case-sensitively.
    """

    def __init__(self, bucket_count: int = 31):
        if not isinstance(bucket_count, int) or isinstance(bucket_count, bool) or bucket_count <= 0:
            raise ValueError(f"bucket_count must be a positive integer, got {bucket_count!r}")
        self.bucket_count = bucket_count
        self.buckets: List[List[List[str]]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def _bucket_for(self, clue_text: str) -> List[List[str]]:
        return self.buckets[djb2_hash(clue_text) % self.bucket_count]

    def upsert(self, clue_text: str, suspect_name: str) -> None:
        """
        Associate a clue with a suspect. An existing association for the
        same clue is overwritten.

        Raises:
            ValueError: If clue_text or suspect_name is empty
            AllocationFailure: If a new entry cannot be allocated
        """
        if not clue_text:
            raise ValueError("clue_text must be non-empty")
        if not suspect_name:
            raise ValueError("suspect_name must be non-empty")

        chain = self._bucket_for(clue_text)
        for entry in chain:
            if entry[0] == clue_text:
                entry[1] = suspect_name
                return

        try:
            chain.insert(0, [clue_text, suspect_name])
        except MemoryError as e:
            raise AllocationFailure("suspect index entry", clue_text) from e
        self._size += 1

    def lookup(self, clue_text: str) -> Optional[str]:
        """Get the suspect for a clue, or None if the clue is unknown."""
        if not clue_text:
            return None
        for key, suspect in self._bucket_for(clue_text):
            if key == clue_text:
                return suspect
        return None

    def list_distinct_suspects(self) -> List[str]:
        """Get every suspect named in the index once, in bucket order."""
        seen = set()
        suspects = []
        for chain in self.buckets:
            for _, suspect in chain:
                if suspect not in seen:
                    seen.add(suspect)
                    suspects.append(suspect)
        return suspects

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over (clue, suspect) pairs in bucket order."""
        for chain in self.buckets:
            for key, suspect in chain:
                yield key, suspect

    def destroy(self) -> None:
        """Release every entry. The index is empty but still usable afterwards."""
        for chain in self.buckets:
            chain.clear()
        self.buckets = [[] for _ in range(self.bucket_count)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue_text: object) -> bool:
        return isinstance(clue_text, str) and self.lookup(clue_text) is not None
