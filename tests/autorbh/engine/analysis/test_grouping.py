from autorbh.engine.analysis.grouping import DEFAULT_EVALUE_CUTOFF, filter_by_evalue, group_by_query, group_passing_records
from autorbh.engine.structures.alignment import AlignmentRecord, parse_alignment_line

def make_record(query: str, subject: str, evalue: str, score: str) -> AlignmentRecord:
    record = parse_alignment_line("\t".join([query, subject, "95.00", "100", "5", "0", "1", "100", "1", "100", evalue, score]))
    assert record is not None
    return record

def test_default_cutoff():
    assert DEFAULT_EVALUE_CUTOFF == 1e-10

def test_filter_drops_records_above_cutoff_only():
    records = [
        make_record("q1", "s1", "1e-20", "100"),
        make_record("q1", "s2", "1e-10", "90"),
        make_record("q1", "s3", "2e-10", "80"),
    ]
    passing = list(filter_by_evalue(records, 1e-10))
    assert [record.subject_id for record in passing] == ["s1", "s2"]

def test_groups_split_where_query_changes():
    records = [
        make_record("q1", "s1", "1e-20", "100"),
        make_record("q1", "s2", "1e-20", "90"),
        make_record("q2", "s1", "1e-20", "100"),
    ]
    groups = list(group_by_query(records))
    assert len(groups) == 2
    assert [record.subject_id for record in groups[0]] == ["s1", "s2"]
    assert all(record.query_id == "q2" for record in groups[1])

def test_non_contiguous_query_forms_separate_groups():
    records = [
        make_record("q1", "s1", "1e-20", "100"),
        make_record("q2", "s1", "1e-20", "100"),
        make_record("q1", "s2", "1e-20", "200"),
    ]
    groups = list(group_by_query(records))
    assert [group[0].query_id for group in groups] == ["q1", "q2", "q1"]

def test_filtered_records_do_not_split_groups():
    records = [
        make_record("q1", "s1", "1e-20", "100"),
        make_record("q2", "s1", "1e-3", "100"),
        make_record("q1", "s2", "1e-20", "200"),
    ]
    groups = list(group_passing_records(records, 1e-10))
    assert len(groups) == 1
    assert [record.subject_id for record in groups[0]] == ["s1", "s2"]

def test_grouping_is_lazy():
    def endless_records():
        while True:
            yield make_record("q1", "s1", "1e-20", "100")
            yield make_record("q2", "s1", "1e-20", "100")
    groups = group_by_query(endless_records())
    assert next(groups)[0].query_id == "q1"
    assert next(groups)[0].query_id == "q2"

def test_empty_input_yields_no_groups():
    assert list(group_passing_records([])) == []
