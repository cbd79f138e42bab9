from dataclasses import dataclass, field
from typing import List, Optional

from .matcher import Pattern


@dataclass(frozen=True)
class PatchSpec:
    """Everything needed to patch one file; contents are fully rendered."""
    file_content: Optional[str] = None
    replace_content: Optional[str] = None
    replace_pattern: Optional[Pattern] = None
    insert_content: Optional[str] = None
    insert_pattern: Optional[Pattern] = None


@dataclass
class PatchResult:
    path: str
    target: str = ""
    created: bool = False
    replaced: bool = False
    inserted: bool = False
    warning: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.created or self.replaced or self.inserted

    @property
    def operation(self) -> str:
        if self.created:
            return "created"
        if self.replaced:
            return "replaced"
        if self.inserted:
            return "inserted"
        return "unchanged"


@dataclass
class SplashScreenReport:
    results: List[PatchResult] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    copied: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def changes(self) -> List[str]:
        changes = [f"{r.path}: {r.target or 'patch'} {r.operation}" for r in self.results if r.applied]
        changes.extend(f"{p}: removed" for p in self.removed)
        if self.copied:
            changes.append(f"{self.copied}: copied")
        return changes
