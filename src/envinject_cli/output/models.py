"""Data models for injection results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..core.errors import UnresolvedToken


class TokenStatus(Enum):
    """Outcome of a single token."""
    REPLACED = "replaced"
    NOT_FOUND = "not_found"  # bound, but no placeholder left in any artifact
    UNRESOLVED = "unresolved"


@dataclass
class FileReplacement:
    """One artifact rewritten (or, in dry-run mode, that would be) for a token."""
    path: Path
    count: int
    written: bool = True

    def get_relative_path(self, base_dir: Path) -> Path:
        """Get path relative to base directory."""
        try:
            return self.path.relative_to(base_dir)
        except ValueError:
            return self.path


@dataclass
class TokenOutcome:
    """Result of processing one declared token."""
    name: str
    placeholder: str
    status: TokenStatus
    value: Optional[str] = None
    files: List[FileReplacement] = field(default_factory=list)

    @property
    def replacements(self) -> int:
        return sum(f.count for f in self.files)


@dataclass
class InjectionResult:
    """Result of a full injection pass."""
    root: Path
    artifacts_scanned: int = 0
    outcomes: List[TokenOutcome] = field(default_factory=list)
    warnings: List[UnresolvedToken] = field(default_factory=list)
    dry_run: bool = False

    @property
    def resolved(self) -> List[TokenOutcome]:
        return [o for o in self.outcomes if o.status != TokenStatus.UNRESOLVED]

    @property
    def unresolved_tokens(self) -> List[str]:
        return [w.name for w in self.warnings]

    @property
    def total_replacements(self) -> int:
        return sum(o.replacements for o in self.outcomes)

    @property
    def files_updated(self) -> List[Path]:
        """Distinct artifacts touched, in first-touched order."""
        seen = []
        for outcome in self.outcomes:
            for f in outcome.files:
                if f.path not in seen:
                    seen.append(f.path)
        return seen

    def get_outcome(self, name: str) -> Optional[TokenOutcome]:
        for outcome in self.outcomes:
            if outcome.name == name:
                return outcome
        return None
