import logging
import os
from os import path
from typing import Iterable, Iterator, TextIO

from autorbh.engine.exceptions.inputs import InputFileAccessException
from autorbh.engine.structures.alignment import AlignmentRecord, parse_alignment_line

logger = logging.getLogger(__name__)


def check_readable_files(*file_paths: str):
    for file_path in file_paths:
        if not path.exists(file_path):
            raise InputFileAccessException(file_path, "does not exist")
        if not path.isfile(file_path):
            raise InputFileAccessException(file_path, "is not a file")
        if not os.access(file_path, os.R_OK):
            raise InputFileAccessException(file_path, "is not readable")


class TabularAlignmentReader(Iterable[AlignmentRecord]):
    """
    Streams AlignmentRecords out of a tabular alignment handle.

    Every line pulled from the handle counts towards lines_read, including blank
    and malformed ones. Lines without exactly twelve fields count towards
    malformed_lines and are skipped.
    """

    def __init__(self, handle: TextIO):
        self._handle = handle
        self.lines_read = 0
        self.malformed_lines = 0

    def __iter__(self) -> Iterator[AlignmentRecord]:
        for line in self._handle:
            self.lines_read += 1
            record = parse_alignment_line(line, self.lines_read)
            if record is None:
                if len(line.strip()) > 0:
                    self.malformed_lines += 1
                    logger.debug("Skipping malformed line %d (expected 12 tab separated fields).", self.lines_read)
                continue
            yield record


def read_alignment_records(file_path: str) -> tuple[AlignmentRecord, ...]:
    with open(file_path, "r") as handle:
        reader = TabularAlignmentReader(handle)
        records = tuple(reader)
    logger.info("Read %d alignment records from \"%s\" (%d lines, %d malformed).", len(records), file_path, reader.lines_read, reader.malformed_lines)
    return records


def read_identifiers(file_path: str) -> tuple[str, ...]:
    with open(file_path, "r") as handle:
        return tuple(line.strip() for line in handle if len(line.strip()) > 0)
