"""
Judge: turns collected evidence into a verdict on the player's accusation.
"""

from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass

from .clue_ledger import ClueLedger
from .suspect_index import SuspectIndex

# Distinct clues needed to find a suspect guilty. Fixed game rule.
GUILTY_THRESHOLD = 2


class VerdictOutcome(Enum):
    """How an investigation ended."""
    NO_EVIDENCE = "no_evidence"
    CANCELLED = "cancelled"
    NO_MATCH = "no_match"
    CLEARED = "cleared"
    GUILTY = "guilty"


@dataclass
class Verdict:
    """Result of judging an accusation."""
    outcome: VerdictOutcome
    accused: str = ""
    suspect: Optional[str] = None  # Tally name the accusation matched
    clue_count: int = 0
    message: str = ""

    @property
    def is_guilty(self) -> bool:
        return self.outcome == VerdictOutcome.GUILTY


class Judge:
    """Counts evidence per suspect and rules on accusations."""

    def __init__(self, ledger: ClueLedger, suspect_index: SuspectIndex):
        self.ledger = ledger
        self.suspect_index = suspect_index

    def build_tally(self) -> Dict[str, int]:
        """
        Count how many collected clues point at each suspect.
        Clues without a known suspect are skipped.
        """
        tally: Dict[str, int] = {}

        def count(clue_text: str) -> None:
            suspect = self.suspect_index.lookup(clue_text)
            if suspect is not None:
                tally[suspect] = tally.get(suspect, 0) + 1

        self.ledger.traverse(count)
        return tally

    def no_evidence(self) -> Verdict:
        return Verdict(
            outcome=VerdictOutcome.NO_EVIDENCE,
            message="You did not collect enough clues to accuse anyone."
        )

    def judge(self, accusation: str, tally: Optional[Dict[str, int]] = None) -> Verdict:
        """
        Rule on an accusation.

        Args:
            accusation: Suspect name typed by the player, already trimmed
            tally: Evidence counts; built from the ledger when not given

        Returns:
            Verdict for the accusation
        """
        if not accusation:
            return Verdict(
                outcome=VerdictOutcome.CANCELLED,
                message="No name given. Accusation cancelled."
            )

        if tally is None:
            tally = self.build_tally()

        wanted = accusation.casefold()
        for suspect, count in tally.items():
            if suspect.casefold() == wanted:
                if count >= GUILTY_THRESHOLD:
                    return Verdict(
                        outcome=VerdictOutcome.GUILTY,
                        accused=accusation,
                        suspect=suspect,
                        clue_count=count,
                        message="You gathered enough evidence. The suspect is found GUILTY."
                    )
                return Verdict(
                    outcome=VerdictOutcome.CLEARED,
                    accused=accusation,
                    suspect=suspect,
                    clue_count=count,
                    message=(f"Insufficient evidence (at least {GUILTY_THRESHOLD} clues are needed). "
                             "The suspect is cleared.")
                )

        return Verdict(
            outcome=VerdictOutcome.NO_MATCH,
            accused=accusation,
            message=(f"'{accusation}' does not correspond to any suspect with collected evidence. "
                     "The accusation is dismissed.")
        )
