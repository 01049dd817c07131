import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import SourceReadError, make_source_error
from .kinds import KindSelection
from .parser import ProtobufScanner
from .sink import ListSink
from .tags import Tag

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Tags from a batch of files plus the files that could not be read."""

    tags: list[Tag] = field(default_factory=list)
    errors: list[SourceReadError] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def scan_text(
    text: str,
    kinds: KindSelection | None = None,
    file: Path | None = None,
) -> list[Tag]:
    """
    Scan schema text and return its tags in document order.

    Args:
        text: Contents of a .proto file
        kinds: Kinds to emit (defaults to each kind's default flag)
        file: Path recorded on each tag

    Returns:
        Tags in the order they appear in the text
    """
    sink = ListSink()
    ProtobufScanner(sink, kinds=kinds, file=file).scan(text)
    return sink.tags


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a schema file.

    Raises:
        SourceReadError: If the file is missing, unreadable or not valid text
    """
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError:
        raise make_source_error("No such file", path)
    except UnicodeDecodeError as e:
        raise make_source_error(f"Cannot decode as {encoding}: {e.reason}", path)
    except OSError as e:
        raise make_source_error(e.strerror or str(e), path)


def scan_file(
    path: Path,
    kinds: KindSelection | None = None,
    encoding: str = "utf-8",
) -> list[Tag]:
    """
    Scan a single .proto file.

    Raises:
        SourceReadError: If the file cannot be read
    """
    text = read_source(path, encoding=encoding)
    tags = scan_text(text, kinds=kinds, file=path)
    logger.debug("Scanned %s: %d tags", path, len(tags))
    return tags


def scan_paths(
    files: Iterable[Path],
    kinds: KindSelection | None = None,
    encoding: str = "utf-8",
) -> ScanResult:
    """
    Scan several files independently.

    A file that cannot be read is recorded in ``ScanResult.errors`` and the
    rest of the batch is still scanned.
    """
    result = ScanResult()
    for path in files:
        try:
            result.tags.extend(scan_file(path, kinds=kinds, encoding=encoding))
        except SourceReadError as e:
            logger.warning("Skipping %s", e)
            result.errors.append(e)
            continue
        result.files_scanned += 1
    return result
