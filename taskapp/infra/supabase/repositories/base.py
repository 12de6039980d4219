"""Base repository for collection-scoped tables"""
import logging
from typing import Generic, TypeVar, Type, List, Dict, Any, Optional

from pydantic import BaseModel
from supabase import Client  # type: ignore

T = TypeVar('T', bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Base repository over a Supabase table shared by many collections.

    Every row carries a ``collection`` column holding its collection path.
    All queries built through ``_scoped`` are restricted to one path, so a
    repository never sees rows from another collection. The row ``id`` is
    assigned by the database and is not part of the document body.
    """

    def __init__(self, client: Client, table_name: str, collection: str, model_class: Type[T]):
        self._client: Optional[Client] = client
        self._table_name = table_name
        self._collection = collection
        self._model_class = model_class

    @property
    def collection(self) -> str:
        return self._collection

    @property
    def closed(self) -> bool:
        return self._client is None

    def _table(self):
        if self._client is None:
            raise RuntimeError(f"{type(self).__name__} is closed")
        return self._client.table(self._table_name)

    def _scoped(self, query):
        """Restrict a filter builder to this repository's collection"""
        return query.eq("collection", self._collection)

    def _document(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Build a row payload from a document body"""
        return {"collection": self._collection, **data}

    def _to_model(self, row: Dict[str, Any]) -> T:
        """Convert a stored row to a domain model, attaching the row id"""
        body = dict(row)
        doc_id = body.pop("id", None)
        body.pop("collection", None)
        return self._model_class(id=str(doc_id) if doc_id is not None else None, **body)

    def _to_models(self, rows: List[Dict[str, Any]]) -> List[T]:
        return [self._to_model(row) for row in rows]
