from collections.abc import Mapping

from whoosh.qparser import MultifieldParser, OrGroup

from ediscovery.culling.exceptions import CullingError
from ediscovery.culling.index import SEARCH_FIELDS, build_schema, open_searcher, transient_index
from ediscovery.culling.query import CullingQuery
from ediscovery.logging.logger import Log
from ediscovery.processor.metadata import DOCUMENT_TEXT, ORIGINAL_PATH, TITLE


class ResponsivenessEvaluator:
    """Decides whether a document matches the culling query.

    Each call builds a throwaway index over the document's title and text.
    """

    def __init__(self, stemming: bool = True) -> None:
        self._stemming = stemming

    def evaluate(self, metadata: Mapping[str, str], culling: str | None) -> bool:
        """Return True when the document is responsive.

        No query means everything is responsive. Any failure while indexing,
        parsing or searching is logged and counts as not responsive.
        """
        try:
            return self.evaluate_strict(metadata, culling)
        except CullingError as exc:
            Log.warning(f"Culling failed for {metadata.get(ORIGINAL_PATH, '?')}: {exc}")
            return False

    def evaluate_strict(self, metadata: Mapping[str, str], culling: str | None) -> bool:
        """Like evaluate(), but raises CullingError instead of returning False."""
        culling_query = CullingQuery.parse(culling)
        if culling_query.is_empty:
            return True

        try:
            title = (metadata.get(TITLE) or "").lower()
            text = metadata.get(DOCUMENT_TEXT)
            content = text.lower() if text is not None else None
            schema = build_schema(self._stemming)
            with transient_index(schema, title, content) as index:
                # Words on one line are ORed too; quoted phrases stay phrases.
                parser = MultifieldParser(SEARCH_FIELDS, schema=index.schema, group=OrGroup)
                query = parser.parse(culling_query.to_query_string())
                with open_searcher(index) as searcher:
                    results = searcher.search(query, limit=1)
                    return not results.is_empty()
        except Exception as exc:
            raise CullingError(f"{type(exc).__name__}: {exc}") from exc
