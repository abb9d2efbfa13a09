from dataclasses import dataclass


@dataclass(frozen=True)
class WriteResult:
    """Counts reported by the store for a single-document write"""
    matched: int = 0
    modified: int = 0

    @property
    def found(self) -> bool:
        return self.matched > 0

    @property
    def changed(self) -> bool:
        return self.modified > 0
