"""Problems solved by sorting the input first."""

from collections.abc import Iterable

__all__ = ["count_apartment_matches", "count_distinct"]


def count_apartment_matches(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Return how many applicants can be given an apartment.

    An applicant wanting size ``a`` accepts any apartment whose size lies in
    ``[a - tolerance, a + tolerance]``; each apartment goes to at most one
    applicant.
    """
    if tolerance < 0:
        raise ValueError("tolerance must not be negative")

    wanted = iter(sorted(applicants))
    offered = iter(sorted(apartments))
    applicant = next(wanted, None)
    apartment = next(offered, None)
    matches = 0

    while applicant is not None and apartment is not None:
        if applicant < apartment - tolerance:
            applicant = next(wanted, None)
        elif applicant > apartment + tolerance:
            apartment = next(offered, None)
        else:
            matches += 1
            applicant = next(wanted, None)
            apartment = next(offered, None)

    return matches


def count_distinct(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    count = 0
    last = None
    for value in sorted(values):
        if count == 0 or value != last:
            count += 1
            last = value
    return count