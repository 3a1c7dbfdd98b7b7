"""File discovery, per-file processing and the output file.

Files are processed one at a time, in traversal order. Each file that carries
at least one annotation appends exactly one fragment to the output.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator

import click
from pydantic import BaseModel

from swamd.config import Settings
from swamd.errors import FileReadError, OutputWriteError, SwamdError
from swamd.generator.assembler import assemble_spec
from swamd.generator.markdown import render_fragment
from swamd.parser.annotation import scan_comments
from swamd.parser.comments import Language, get_language

logger = logging.getLogger(__name__)


class FileResult(BaseModel):
    """Outcome of processing one source file."""

    path: Path
    annotations: int
    written: bool


class RunReport(BaseModel):
    processed: int = 0
    written: int = 0
    skipped: int = 0


class OutputSink:
    """Append-only markdown output file.

    The file is opened for each fragment and closed again before the next
    source file is read.
    """

    def __init__(self, path: Path):
        self.path = path

    def reset(self) -> None:
        """Remove any output left over from a previous run."""
        try:
            if self.path.exists():
                self.path.unlink()
                logger.debug("Removed existing output file %s", self.path)
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"cannot reset output file {self.path}: {e}") from e

    def append(self, text: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise OutputWriteError(f"cannot write to output file {self.path}: {e}") from e


def discover_files(root: Path, extensions: Iterable[str], exclude_dirs: Iterable[str] = ()) -> list[Path]:
    """List source files under root in lexical walk order.

    Directory entries are visited sorted by name, descending into each
    subdirectory where it sorts, so `a.go`, `b/x.go`, `c.go` come out in
    that order. Symlinked directories are not followed.
    """
    extensions = tuple(extensions)
    if root.is_file():
        return [root] if root.suffix in extensions else []
    if not root.is_dir():
        raise FileNotFoundError(f"no such file or directory: {root}")
    return list(_walk(root, extensions, set(exclude_dirs)))


def _walk(directory: Path, extensions: tuple[str, ...], exclude_dirs: set[str]) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", directory, e)
        return
    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            if entry.name not in exclude_dirs:
                yield from _walk(entry, extensions, exclude_dirs)
        elif entry.suffix in extensions:
            yield entry


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"cannot read {path}: {e}") from e


def process_file(path: Path, sink: OutputSink, language: Language) -> FileResult:
    """Scan one source file and append its fragment to sink.

    Files without annotations leave the sink untouched. Raises a SwamdError
    subclass when the file cannot be read, tokenized, assembled or written.
    """
    source = read_source(path)
    annotations = scan_comments(language.locate(source))
    logger.debug("Found %d annotations in %s", len(annotations), path)

    if not annotations:
        return FileResult(path=path, annotations=0, written=False)

    spec = assemble_spec(annotations)
    sink.append(render_fragment(spec))
    return FileResult(path=path, annotations=len(annotations), written=True)


def run(settings: Settings, echo: Callable[[str], None] = click.echo) -> RunReport:
    """Process every matching file under settings.path into settings.output.

    Per-file failures are logged and reported through echo; they never stop
    the run. Errors resetting the output or walking the root propagate.
    """
    language = get_language(settings.lang)
    sink = OutputSink(Path(settings.output))
    sink.reset()

    files = discover_files(Path(settings.path), language.extensions, settings.exclude_dirs)
    logger.info("Processing %d %s files under %s", len(files), language.name, settings.path)

    report = RunReport()
    for path in files:
        try:
            result = process_file(path, sink, language)
        except SwamdError as e:
            logger.info("Skipping %s: %s", path, e)
            echo(f"{path} - skipped: {e}")
            report.skipped += 1
            continue
        report.processed += 1
        if result.written:
            report.written += 1
        echo(f"{path} - successfully processed.")

    return report
