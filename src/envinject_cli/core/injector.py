"""Runtime placeholder injection over built static assets."""

import os
import shutil
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Optional, Union

from .artifacts import DEFAULT_EXTENSIONS, find_artifacts, normalize_extensions
from .errors import IOFailure, UnresolvedToken, UnresolvedTokensError
from .substitution import normalize_tokens, placeholder_for, substitute
from ..output.models import FileReplacement, InjectionResult, TokenOutcome, TokenStatus
from ..output.reporter import InjectionReporter

Lookup = Callable[[str], Optional[str]]

# Keeps non-UTF-8 bytes intact across read/write
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def mapping_lookup(mapping: Mapping[str, str]) -> Lookup:
    """Build a lookup function over a mapping such as ``os.environ``."""
    return mapping.get


@dataclass
class _FileResult:
    path: Path
    count: int = 0
    written: bool = False
    error: Optional[IOFailure] = None


class PlaceholderInjector:
    """Replaces ``__TOKEN__`` placeholders in an artifact tree with runtime values."""

    def __init__(self, root: Union[str, Path], tokens: Iterable[str], lookup: Lookup,
                 extensions: Iterable[str] = DEFAULT_EXTENSIONS, strict: bool = False,
                 dry_run: bool = False, workers: int = 1,
                 reporter: Optional[InjectionReporter] = None):
        """Initialize the injector.

        Args:
            root: Directory holding the build output.
            tokens: Declared token names, processed in this order.
            lookup: Returns the runtime value for a token name, or None.
            extensions: Allow-listed artifact extensions.
            strict: Fail the run if any token is unresolved.
            dry_run: Count replacements without writing files.
            workers: Threads used to process the files of one token.
            reporter: Receives progress events; silent by default.
        """
        self.root = Path(root)
        self.tokens = normalize_tokens(tokens)
        self.lookup = lookup
        self.extensions = normalize_extensions(extensions)
        self.strict = strict
        self.dry_run = dry_run
        self.workers = max(1, int(workers))
        self.reporter = reporter or InjectionReporter()
        self._touched: List[Path] = []

    def run(self) -> InjectionResult:
        """Run one injection pass.

        Returns:
            InjectionResult: Per-token outcomes and unresolved-token warnings.

        Raises:
            IOFailure: If the root or a matched artifact cannot be read or written.
            UnresolvedTokensError: In strict mode, if any token has no binding.
        """
        self._touched = []
        try:
            artifacts = find_artifacts(self.root, self.extensions)
        except IOFailure as e:
            self.reporter.fatal(e, [], self.root)
            raise

        result = InjectionResult(root=self.root, artifacts_scanned=len(artifacts),
                                 dry_run=self.dry_run)
        self.reporter.start(self.root, len(artifacts), dry_run=self.dry_run)

        try:
            for token in self.tokens:
                result.outcomes.append(self._process_token(token, artifacts, result))
        except IOFailure as e:
            self.reporter.fatal(e, list(self._touched), self.root)
            raise

        self.reporter.complete(result)

        if self.strict and result.warnings:
            error = UnresolvedTokensError(result.unresolved_tokens)
            self.reporter.fatal(error, [], self.root)
            raise error
        return result

    def _process_token(self, token: str, artifacts: List[Path],
                       result: InjectionResult) -> TokenOutcome:
        placeholder = placeholder_for(token)
        value = self.lookup(token)

        if not value:
            warning = UnresolvedToken(name=token, placeholder=placeholder)
            result.warnings.append(warning)
            self.reporter.token_unresolved(warning)
            return TokenOutcome(name=token, placeholder=placeholder,
                                status=TokenStatus.UNRESOLVED)

        self.reporter.token_resolved(token, placeholder, value)
        outcome = TokenOutcome(name=token, placeholder=placeholder,
                               status=TokenStatus.REPLACED, value=value)

        def _apply(path: Path) -> _FileResult:
            return self._replace_in_file(path, placeholder, value)

        if self.workers > 1 and len(artifacts) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                file_results = list(executor.map(_apply, artifacts))
        else:
            file_results = []
            for path in artifacts:
                file_result = _apply(path)
                file_results.append(file_result)
                if file_result.error:
                    break

        # Report in artifact order, stopping at the first failure
        for file_result in file_results:
            if file_result.error:
                # Other workers may have written files after the failing one
                self._note_touched(file_results)
                raise file_result.error
            if file_result.count:
                replacement = FileReplacement(path=file_result.path, count=file_result.count,
                                              written=file_result.written)
                outcome.files.append(replacement)
                self.reporter.file_updated(replacement, self.root)
        self._note_touched(file_results)

        if not outcome.files:
            outcome.status = TokenStatus.NOT_FOUND
            self.reporter.token_not_found(token, placeholder)
        return outcome

    def _note_touched(self, file_results: List[_FileResult]):
        for file_result in file_results:
            if file_result.written and file_result.path not in self._touched:
                self._touched.append(file_result.path)

    def _replace_in_file(self, path: Path, placeholder: str, value: str) -> _FileResult:
        """Substitute in one artifact. I/O errors are returned, not raised."""
        file_result = _FileResult(path=path)
        try:
            # newline="" so line endings round-trip unchanged
            with open(path, "r", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
                content = f.read()
        except OSError as e:
            file_result.error = IOFailure(f"Cannot read artifact ({e.strerror or e})", path)
            return file_result

        new_content, count = substitute(content, placeholder, value)
        file_result.count = count
        if count == 0 or self.dry_run:
            return file_result

        try:
            _write_atomic(path, new_content)
        except OSError as e:
            file_result.error = IOFailure(f"Cannot write artifact ({e.strerror or e})", path)
            return file_result
        file_result.written = True
        return file_result


def _write_atomic(path: Path, content: str):
    """Write ``content`` to a sibling temp file, then rename it over ``path``.

    The artifact is either fully rewritten or left as it was.
    """
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile("w", dir=path.parent, prefix=f".{path.name}.",
                                         suffix=".tmp", delete=False, encoding=_ENCODING,
                                         errors=_ERRORS, newline="") as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def inject(root: Union[str, Path], tokens: Iterable[str], lookup: Lookup,
           **options) -> InjectionResult:
    """Convenience wrapper: build a :class:`PlaceholderInjector` and run it."""
    return PlaceholderInjector(root, tokens, lookup, **options).run()


__all__ = ["PlaceholderInjector", "inject", "mapping_lookup", "Lookup"]
