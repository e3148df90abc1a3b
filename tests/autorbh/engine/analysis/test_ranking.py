import random

from autorbh.engine.analysis.ranking import rank
from autorbh.engine.structures.alignment import AlignmentRecord, parse_alignment_line

def make_record(subject: str, evalue: str, score: str) -> AlignmentRecord:
    record = parse_alignment_line("\t".join(["q1", subject, "95.00", "100", "5", "0", "1", "100", "1", "100", evalue, score]))
    assert record is not None
    return record

def test_higher_bit_score_first():
    group = [make_record("s1", "1e-30", "125"), make_record("s2", "1e-30", "154"), make_record("s3", "1e-30", "140")]
    assert [record.subject_id for record in rank(group)] == ["s2", "s3", "s1"]

def test_lower_evalue_breaks_score_ties():
    group = [make_record("s1", "1e-30", "154"), make_record("s2", "1e-40", "154"), make_record("s3", "1e-35", "154")]
    assert [record.subject_id for record in rank(group)] == ["s2", "s3", "s1"]

def test_bit_score_outranks_evalue():
    group = [make_record("s1", "1e-80", "100"), make_record("s2", "1e-20", "101")]
    assert [record.subject_id for record in rank(group)] == ["s2", "s1"]

def test_full_ties_keep_encounter_order():
    group = [make_record("s" + str(i), "3e-74", "275") for i in range(10)]
    assert [record.subject_id for record in rank(group)] == [record.subject_id for record in group]

def test_ranked_output_is_sorted_and_stable():
    rand = random.Random("ranking")
    group = [make_record("s" + str(i), rand.choice(["1e-50", "1e-40", "1e-30"]), rand.choice(["100", "120", "140"])) for i in range(60)]
    ranked = rank(group)
    assert len(ranked) == len(group)
    for before, after in zip(ranked, ranked[1:]):
        assert before.bit_score >= after.bit_score
        if before.bit_score == after.bit_score:
            assert before.expect_value <= after.expect_value
            if before.expect_value == after.expect_value:
                assert group.index(before) < group.index(after)
