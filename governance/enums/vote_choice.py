from enum import IntEnum


class VoteChoice(IntEnum):
    """Support codes understood by GovernorCountingSimple."""

    AGAINST = 0
    FOR = 1
    ABSTAIN = 2

    @classmethod
    def from_label(cls, label: str) -> "VoteChoice":
        """
        Parses "against" / "for" / "abstain" (case-insensitive).

        Raises:
            ValueError: If the label is not one of the three choices
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown vote choice '{label}'") from None
