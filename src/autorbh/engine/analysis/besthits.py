import logging
from dataclasses import replace
from typing import Iterable, Sequence

from autorbh.engine.analysis.grouping import DEFAULT_EVALUE_CUTOFF, group_passing_records
from autorbh.engine.analysis.ranking import rank
from autorbh.engine.reading import TabularAlignmentReader
from autorbh.engine.structures.alignment import AlignmentRecord, BestHitSet

logger = logging.getLogger(__name__)


def select_best_hits(ranked_group: Sequence[AlignmentRecord]) -> tuple[tuple[AlignmentRecord, ...], bool]:
    """
    Takes the leading block of a ranked group that is no worse than the record
    accepted before it on both bit score and E-value. The first record is held
    against a bit score floor of 0 and an E-value ceiling of 1.

    Scanning stops at the first record that fails, so only a prefix of the
    ranked group is ever returned. The flag is True when more than one record
    made it in.
    """
    accepted: list[AlignmentRecord] = []
    last_score = 0.0
    last_evalue = 1.0
    for record in ranked_group:
        if record.bit_score < last_score or record.expect_value > last_evalue:
            break
        accepted.append(record)
        last_score = record.bit_score
        last_evalue = record.expect_value
    return tuple(accepted), len(accepted) > 1


def extract_best_hits(records: Iterable[AlignmentRecord], evalue_cutoff: float = DEFAULT_EVALUE_CUTOFF) -> BestHitSet:
    best_hits: list[AlignmentRecord] = []
    multiple_hit_queries: list[str] = []
    for group in group_passing_records(records, evalue_cutoff):
        group_best_hits, has_multiple = select_best_hits(rank(group))
        best_hits.extend(group_best_hits)
        if has_multiple:
            multiple_hit_queries.append(group[0].query_id)
    return BestHitSet(tuple(best_hits), tuple(multiple_hit_queries))


def extract_best_hits_from_file(file_path: str, evalue_cutoff: float = DEFAULT_EVALUE_CUTOFF) -> BestHitSet:
    logger.info("Extracting best hits from \"%s\" with an E-value cutoff of %g.", file_path, evalue_cutoff)
    with open(file_path, "r") as handle:
        reader = TabularAlignmentReader(handle)
        best_hit_set = extract_best_hits(reader, evalue_cutoff)
    if reader.malformed_lines > 0:
        logger.warning("Skipped %d malformed lines in \"%s\".", reader.malformed_lines, file_path)
    return replace(best_hit_set, lines_read=reader.lines_read, malformed_lines=reader.malformed_lines)
