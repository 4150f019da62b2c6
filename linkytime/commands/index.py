from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """
    A position in the filtered view.

    Users count from 1, the collection counts from 0. Out-of-range
    values are kept as-is and rejected when the command executes,
    against the view the user is looking at.
    """
    zero_based: int

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
