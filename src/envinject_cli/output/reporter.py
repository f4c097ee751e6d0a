"""Reporting of injection events.

The injector calls a reporter in token declaration order and, within a token,
in artifact order. Parallel file processing never changes this order.
"""

from pathlib import Path
from typing import List

from ..core.errors import InjectorError, UnresolvedToken
from ..utils.console import (
    _rich_success, _rich_error, _rich_warning, _rich_info, _rich_muted
)
from .models import FileReplacement, InjectionResult


class InjectionReporter:
    """Base reporter; ignores every event."""

    def start(self, root: Path, artifact_count: int, dry_run: bool = False):
        pass

    def token_resolved(self, name: str, placeholder: str, value: str):
        pass

    def file_updated(self, replacement: FileReplacement, root: Path):
        pass

    def token_not_found(self, name: str, placeholder: str):
        pass

    def token_unresolved(self, warning: UnresolvedToken):
        pass

    def fatal(self, error: InjectorError, touched: List[Path], root: Path):
        pass

    def complete(self, result: InjectionResult):
        pass


class ConsoleReporter(InjectionReporter):
    """Writes one line per event through the console helpers."""

    def start(self, root: Path, artifact_count: int, dry_run: bool = False):
        mode = " (dry run)" if dry_run else ""
        _rich_info(f"Injecting runtime variables into {root}{mode} [{artifact_count} artifacts]",
                   symbol="running")

    def token_resolved(self, name: str, placeholder: str, value: str):
        _rich_info(f"  ↳ Replacing {placeholder} with {value}")

    def file_updated(self, replacement: FileReplacement, root: Path):
        verb = "would update" if not replacement.written else "updated"
        plural = "" if replacement.count == 1 else "s"
        _rich_muted(f"      {replacement.get_relative_path(root).as_posix()} "
                    f"({verb}, {replacement.count} replacement{plural})")

    def token_not_found(self, name: str, placeholder: str):
        _rich_muted(f"      no occurrences of {placeholder}")

    def token_unresolved(self, warning: UnresolvedToken):
        _rich_warning(f"  Warning: {warning}", symbol="warning")

    def fatal(self, error: InjectorError, touched: List[Path], root: Path):
        _rich_error(f"Runtime injection aborted: {error}", symbol="error")
        if touched:
            _rich_error(f"Files already modified before the failure ({len(touched)}):")
            for path in touched:
                try:
                    shown = path.relative_to(root).as_posix()
                except ValueError:
                    shown = str(path)
                _rich_error(f"  - {shown}")

    def complete(self, result: InjectionResult):
        summary = (
            f"Runtime env injection complete: {len(result.resolved)} resolved, "
            f"{len(result.warnings)} unresolved, {len(result.files_updated)} files "
            f"{'to update' if result.dry_run else 'updated'}, "
            f"{result.total_replacements} replacements"
        )
        if result.warnings:
            _rich_warning(summary, symbol="warning")
        else:
            _rich_success(summary, symbol="success")
