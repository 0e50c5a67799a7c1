from collections.abc import Callable, Iterator
from contextlib import contextmanager

from whoosh.analysis import Analyzer, StandardAnalyzer, StemmingAnalyzer
from whoosh.fields import TEXT, Schema
from whoosh.filedb.filestore import RamStorage
from whoosh.index import Index
from whoosh.searching import Searcher

from ediscovery.logging.logger import Log
from ediscovery.processor.metadata import TITLE

CONTENT = "content"
SEARCH_FIELDS = [TITLE, CONTENT]


def build_schema(stemming: bool = True) -> Schema:
    """Stored+analyzed title, analyzed-only content, both with the same analyzer."""
    analyzer: Analyzer = StemmingAnalyzer() if stemming else StandardAnalyzer()
    return Schema(
        title=TEXT(stored=True, analyzer=analyzer),
        content=TEXT(stored=False, analyzer=analyzer),
    )


def release(close: Callable[[], object], name: str) -> None:
    """Close a search resource; failures are logged, not raised."""
    try:
        close()
    except Exception as exc:
        Log.warning(f"Failed to release transient {name}: {exc}")


@contextmanager
def transient_index(schema: Schema, title: str, content: str | None) -> Iterator[Index]:
    """Build a single-document in-memory index and release it on exit."""
    storage = RamStorage()
    index = storage.create_index(schema)
    try:
        writer = index.writer()
        try:
            if content is None:
                writer.add_document(title=title)
            else:
                writer.add_document(title=title, content=content)
        except BaseException:
            writer.cancel()
            raise
        writer.commit()
        yield index
    finally:
        release(index.close, "index")
        release(storage.close, "storage")


@contextmanager
def open_searcher(index: Index) -> Iterator[Searcher]:
    searcher = index.searcher()
    try:
        yield searcher
    finally:
        release(searcher.close, "searcher")
