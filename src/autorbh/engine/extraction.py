import logging
from itertools import count
from typing import BinaryIO, Iterable

from Bio import SeqIO

from autorbh.engine.structures.extraction import ExtractionSummary

logger = logging.getLogger(__name__)


def _index_fasta(fasta_path: str):
    # Keys are numbered by position so repeated record ids still index.
    positions = count()
    return SeqIO.index(fasta_path, "fasta", key_function=lambda record_id: f"{next(positions)}:{record_id}")


def extract_sequences(identifiers: Iterable[str], fasta_path: str, output_handle: BinaryIO, allow_multiple: bool = False) -> ExtractionSummary:
    """
    Copies every FASTA record whose header line contains a requested identifier.

    Records are written exactly as they appear in the FASTA file. Unless
    allow_multiple is set, only the first matching record is copied for each
    identifier. Records sharing an id are kept apart and matched in file order.
    """
    requested_ids = tuple(identifiers)
    missing_ids: list[str] = []
    sequences_found = 0
    fasta_index = _index_fasta(fasta_path)
    try:
        headers = [(key, fasta_index.get_raw(key).split(b"\n", 1)[0]) for key in fasta_index]
        for identifier in requested_ids:
            needle = identifier.encode()
            matches = 0
            for key, header in headers:
                if needle not in header:
                    continue
                raw_record = fasta_index.get_raw(key)
                output_handle.write(raw_record if raw_record.endswith(b"\n") else raw_record + b"\n")
                matches += 1
                if not allow_multiple:
                    break
            if matches == 0:
                missing_ids.append(identifier)
            sequences_found += matches
    finally:
        fasta_index.close()
    logger.info("Extracted %d sequences for %d identifiers from \"%s\".", sequences_found, len(requested_ids), fasta_path)
    return ExtractionSummary(requested_ids, sequences_found, tuple(missing_ids))


def extract_sequences_to_file(identifiers: Iterable[str], fasta_path: str, output_path: str, allow_multiple: bool = False) -> ExtractionSummary:
    with open(output_path, "wb") as output_handle:
        return extract_sequences(identifiers, fasta_path, output_handle, allow_multiple)
