"""
Document store for Helpdesk RAG.

Loads knowledge-base sources into Documents. A failed source is reported and
skipped; it never aborts the rest of the load.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from helpdesk_rag.core.contracts import Config, LoadError, LoadReport
from helpdesk_rag.ingestion.parsers import filter_sources, parse_source

logger = logging.getLogger(__name__)

ReadFn = Callable[[str], bytes]


class DirectorySource:
    """
    Corpus provider backed by a flat directory of files.

    Names are listed in sorted order so the load order is reproducible.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def list_names(self) -> List[str]:
        """
        List file names in the corpus directory.

        Raises:
            OSError: If the directory is missing or unreadable
        """
        return sorted(entry.name for entry in self.root.iterdir() if entry.is_file())

    def read_bytes(self, name: str) -> bytes:
        return (self.root / name).read_bytes()

    def __str__(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.root)!r})"


class DocumentStore:
    """Turns source names plus a read function into Documents."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize document store.

        Args:
            config: Configuration with source suffixes, encoding and segmentation
        """
        self.config = config or Config()

    def load(self, source_names: Iterable[str], read_fn: ReadFn) -> LoadReport:
        """
        Load every recognized source.

        A source whose read_fn call fails (any exception) or whose bytes do
        not decode is reported in the returned errors and skipped; the
        remaining sources still load.

        Args:
            source_names: Source names in load order
            read_fn: name -> raw bytes

        Returns:
            LoadReport with documents in load order and per-source errors
        """
        report = LoadReport()

        for name in filter_sources(source_names, self.config.source_suffixes):
            try:
                raw = read_fn(name)
            except Exception as e:
                logger.warning("Failed to read source %s: %s", name, e)
                report.errors.append(LoadError(name=name, message=str(e)))
                continue

            try:
                document = parse_source(name, raw, self.config)
            except UnicodeDecodeError as e:
                logger.warning("Failed to load source %s: %s", name, e)
                report.errors.append(LoadError(name=name, message=str(e)))
                continue

            if not document.passages:
                logger.debug("Source %s has no passages", name)
            report.documents.append(document)

        logger.info(
            "Loaded %d documents (%d errors)", len(report.documents), len(report.errors)
        )
        return report

    def load_from(self, source: DirectorySource) -> LoadReport:
        """
        Load from a corpus provider.

        A listing failure yields an empty report carrying one error; an
        empty corpus is valid.
        """
        try:
            names = source.list_names()
        except Exception as e:
            logger.warning("Failed to list sources in %r: %s", source, e)
            return LoadReport(errors=[LoadError(name=str(source), message=str(e))])

        return self.load(names, source.read_bytes)
