import logging
from typing import Iterable, Mapping, Union

from autorbh.engine.reading import read_alignment_records
from autorbh.engine.structures.alignment import AlignmentRecord, ReciprocalPair, ReciprocalResult

logger = logging.getLogger(__name__)


def index_by_query_and_subject(records: Iterable[AlignmentRecord]) -> Mapping[tuple[str, str], AlignmentRecord]:
    """
    Maps (query id, subject id) to the first record carrying that pair, so a
    lookup returns the same record a scan in file order would stop at.
    """
    index: dict[tuple[str, str], AlignmentRecord] = {}
    for record in records:
        index.setdefault((record.query_id, record.subject_id), record)
    return index


def match_reciprocal(forward_hits: Iterable[AlignmentRecord], reverse_hits: Iterable[AlignmentRecord]) -> ReciprocalResult:
    """
    Pairs every forward hit with the first reverse hit pointing back at it.

    A forward record (qF, sF) and a reverse record (qR, sR) are reciprocal when
    qF == sR and sF == qR. A forward record yields at most one pair.

    A pair repeats the previous one when it shares its forward query with the
    previous forward record, or its reverse query with the previous pair. The
    first repeat of a run reports its id (forward id first) and counts once;
    the run ends at the next pair that repeats neither.
    """
    reverse_index = index_by_query_and_subject(reverse_hits)
    pairs: list[ReciprocalPair] = []
    multiple_rbh_ids: list[str] = []
    last_forward_query: Union[str, None] = None
    last_reverse_query: Union[str, None] = None
    reported = False
    for forward in forward_hits:
        reverse = reverse_index.get((forward.subject_id, forward.query_id))
        if reverse is not None:
            repeats_forward = forward.query_id == last_forward_query
            repeats_reverse = reverse.query_id == last_reverse_query
            if not (repeats_forward or repeats_reverse):
                reported = False
            elif not reported:
                multiple_rbh_ids.append(forward.query_id if repeats_forward else reverse.query_id)
                reported = True
            pairs.append(ReciprocalPair(forward, reverse))
            last_reverse_query = reverse.query_id
        last_forward_query = forward.query_id
    return ReciprocalResult(tuple(pairs), tuple(multiple_rbh_ids))


def match_reciprocal_files(forward_path: str, reverse_path: str) -> ReciprocalResult:
    forward_hits = read_alignment_records(forward_path)
    reverse_hits = read_alignment_records(reverse_path)
    result = match_reciprocal(forward_hits, reverse_hits)
    logger.info("Found %d reciprocal best hits between \"%s\" and \"%s\".", len(result), forward_path, reverse_path)
    return result
