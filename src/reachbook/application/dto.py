"""Value types passed between the parser, commands and the caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command: feedback to show, plus flags for the caller."""

    feedback: str
    show_help: bool = False
    exit: bool = False


@dataclass(frozen=True)
class Index:
    """
    Position in the displayed person list. Stored zero-based; users type one-based values.
    """

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ValueError("Index must be non-negative.")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
