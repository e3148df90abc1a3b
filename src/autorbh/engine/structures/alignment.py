from dataclasses import dataclass
from typing import Sequence, Union

from autorbh.engine.exceptions.inputs import TabularFormatException

TABULAR_FIELD_COUNT = 12
EXPECT_VALUE_COLUMN = 10
BIT_SCORE_COLUMN = 11

_COLUMN_NAMES = (
    "query_id",
    "subject_id",
    "percent_identity",
    "alignment_length",
    "mismatches",
    "gaps",
    "query_start",
    "query_end",
    "subject_start",
    "subject_end",
    "expect_value",
    "bit_score",
)

@dataclass(frozen=True)
class AlignmentRecord:
    query_id: str
    subject_id: str
    percent_identity: float
    alignment_length: int
    mismatches: int
    gaps: int
    query_start: int
    query_end: int
    subject_start: int
    subject_end: int
    expect_value: float
    bit_score: float
    raw_line: str

    @property
    def expect_value_text(self) -> str:
        return self.raw_line.split("\t")[EXPECT_VALUE_COLUMN]

    @property
    def bit_score_text(self) -> str:
        return self.raw_line.split("\t")[BIT_SCORE_COLUMN]

HitGroup = Sequence[AlignmentRecord]

@dataclass(frozen=True)
class BestHitSet:
    """
    The best hits retained over one extraction run.

    hits keeps selection order, grouped by query. multiple_hit_queries holds the
    query id of every group that had more than one tied best hit, in the order
    the groups were encountered.
    """
    hits: tuple[AlignmentRecord, ...]
    multiple_hit_queries: tuple[str, ...]
    lines_read: int = 0
    malformed_lines: int = 0

    @property
    def multiple_hit_count(self) -> int:
        return len(self.multiple_hit_queries)

    @property
    def subject_ids(self) -> tuple[str, ...]:
        return tuple(hit.subject_id for hit in self.hits)

    def __len__(self):
        return len(self.hits)

    def __iter__(self):
        return iter(self.hits)

@dataclass(frozen=True)
class ReciprocalPair:
    forward: AlignmentRecord
    reverse: AlignmentRecord

    @property
    def forward_query_id(self) -> str:
        return self.forward.query_id

    @property
    def forward_subject_id(self) -> str:
        # Same as reverse.query_id by construction
        return self.forward.subject_id

    @property
    def forward_expect_value(self) -> float:
        return self.forward.expect_value

    @property
    def forward_bit_score(self) -> float:
        return self.forward.bit_score

    @property
    def reverse_expect_value(self) -> float:
        return self.reverse.expect_value

    @property
    def reverse_bit_score(self) -> float:
        return self.reverse.bit_score

@dataclass(frozen=True)
class ReciprocalResult:
    pairs: tuple[ReciprocalPair, ...]
    multiple_rbh_ids: tuple[str, ...]

    @property
    def multiple_rbh_count(self) -> int:
        return len(self.multiple_rbh_ids)

    def __len__(self):
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)

def _parse_number(fields: Sequence[str], column: int, number_type: type, line_number: Union[int, None]):
    try:
        return number_type(fields[column])
    except ValueError:
        raise TabularFormatException(_COLUMN_NAMES[column], fields[column], line_number)

def parse_alignment_line(line: str, line_number: Union[int, None] = None) -> Union[AlignmentRecord, None]:
    """
    Parses a single tabular alignment line.

    Returns None for blank lines and for lines that do not carry exactly twelve
    tab separated fields. Raises TabularFormatException when a numeric column
    cannot be parsed.
    """
    raw_line = line.rstrip("\r\n")
    if len(raw_line.strip()) == 0:
        return None
    fields = raw_line.split("\t")
    if len(fields) != TABULAR_FIELD_COUNT or not fields[0] or not fields[1]:
        return None
    return AlignmentRecord(
        query_id=fields[0],
        subject_id=fields[1],
        percent_identity=_parse_number(fields, 2, float, line_number),
        alignment_length=_parse_number(fields, 3, int, line_number),
        mismatches=_parse_number(fields, 4, int, line_number),
        gaps=_parse_number(fields, 5, int, line_number),
        query_start=_parse_number(fields, 6, int, line_number),
        query_end=_parse_number(fields, 7, int, line_number),
        subject_start=_parse_number(fields, 8, int, line_number),
        subject_end=_parse_number(fields, 9, int, line_number),
        expect_value=_parse_number(fields, EXPECT_VALUE_COLUMN, float, line_number),
        bit_score=_parse_number(fields, BIT_SCORE_COLUMN, float, line_number),
        raw_line=raw_line
    )
