from collections.abc import Collection

from .candidate import Candidate


def sort_candidates_by_time(candidates: Collection[Candidate], reverse: bool = False) -> list[Candidate]:
    # stable, candidates with the same instant keep their input order
    return list(sorted(
        candidates,
        key=lambda c: c.timestamp.instant,
        reverse=reverse
    ))
