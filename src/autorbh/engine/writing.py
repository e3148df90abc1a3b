import os
from contextlib import ExitStack
from os import PathLike
from typing import Iterable, TextIO, Union

from autorbh.engine.structures.alignment import AlignmentRecord, BestHitSet, ReciprocalPair

FilePath = Union[str, PathLike[str]]


def write_alignment_records(records: Iterable[AlignmentRecord], handle: TextIO):
    for record in records:
        handle.write(record.raw_line + "\n")


def write_subject_ids(records: Iterable[AlignmentRecord], handle: TextIO):
    for record in records:
        handle.write(record.subject_id + "\n")


def reciprocal_pair_to_row(pair: ReciprocalPair) -> list[str]:
    return [
        pair.forward_query_id,
        pair.forward_subject_id,
        pair.forward.expect_value_text,
        pair.forward.bit_score_text,
        pair.reverse.expect_value_text,
        pair.reverse.bit_score_text
    ]


def write_reciprocal_pairs(pairs: Iterable[ReciprocalPair], handle: TextIO):
    for pair in pairs:
        handle.write("\t".join(reciprocal_pair_to_row(pair)) + "\n")


def write_best_hit_set(best_hit_set: BestHitSet, output_path: FilePath, ids_path: Union[FilePath, None] = None):
    with ExitStack() as stack:
        output_handle = stack.enter_context(open(output_path, "w", newline=""))
        ids_handle = None
        if ids_path is not None:
            try:
                ids_handle = stack.enter_context(open(ids_path, "w", newline=""))
            except OSError:
                stack.close()
                os.remove(output_path)
                raise
        write_alignment_records(best_hit_set.hits, output_handle)
        if ids_handle is not None:
            write_subject_ids(best_hit_set.hits, ids_handle)


def write_reciprocal_pairs_to_file(pairs: Iterable[ReciprocalPair], output_path: FilePath):
    with open(output_path, "w", newline="") as output_handle:
        write_reciprocal_pairs(pairs, output_handle)
