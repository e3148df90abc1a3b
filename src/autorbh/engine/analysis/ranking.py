from autorbh.engine.structures.alignment import AlignmentRecord, HitGroup


def rank_key(record: AlignmentRecord) -> tuple[float, float]:
    return (-record.bit_score, record.expect_value)


def rank(group: HitGroup) -> tuple[AlignmentRecord, ...]:
    """
    Orders a group by bit score (highest first), then by E-value (lowest first).

    sorted() is stable, so records equal on both keys keep the order they were
    read in.
    """
    return tuple(sorted(group, key=rank_key))
