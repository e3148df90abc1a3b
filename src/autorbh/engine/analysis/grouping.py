from itertools import groupby
from operator import attrgetter
from typing import Any, Generator, Iterable

from autorbh.engine.structures.alignment import AlignmentRecord, HitGroup

DEFAULT_EVALUE_CUTOFF = 1e-10


def filter_by_evalue(records: Iterable[AlignmentRecord], evalue_cutoff: float = DEFAULT_EVALUE_CUTOFF) -> Generator[AlignmentRecord, Any, None]:
    for record in records:
        if record.expect_value > evalue_cutoff:
            continue
        yield record


def group_by_query(records: Iterable[AlignmentRecord]) -> Generator[HitGroup, Any, None]:
    """
    Splits an already query-clustered stream into groups of consecutive records
    sharing a query id.

    There is no global sort. A query id showing up again after a different one
    starts a new group of its own.
    """
    for _, group in groupby(records, key=attrgetter("query_id")):
        yield tuple(group)


def group_passing_records(records: Iterable[AlignmentRecord], evalue_cutoff: float = DEFAULT_EVALUE_CUTOFF) -> Generator[HitGroup, Any, None]:
    # Filtering first means rejected records never split a group
    return group_by_query(filter_by_evalue(records, evalue_cutoff))
