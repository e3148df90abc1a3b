from dataclasses import dataclass

@dataclass(frozen=True)
class ExtractionSummary:
    requested_ids: tuple[str, ...]
    sequences_found: int
    missing_ids: tuple[str, ...]

    @property
    def missing_count(self) -> int:
        return len(self.missing_ids)
