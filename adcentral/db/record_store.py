"""
Record store - generic insert/select/update/delete over named collections
Backed by SQLAlchemy sync sessions, one session per operation
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type

from sqlalchemy import select, or_
from sqlalchemy.exc import SQLAlchemyError

from adcentral.models import Base
from adcentral.models.client import Client, utc_now
from adcentral.models.campaign import Campaign
from adcentral.models.roi_calculation import RoiCalculation

logger = logging.getLogger(__name__)

COLLECTIONS: Dict[str, Type[Base]] = {
    "clients": Client,
    "campaigns": Campaign,
    "roi_calculations": RoiCalculation,
}

class StoreError(Exception):
    """Failure reported by the record store, passed through uninterpreted"""
    pass

class RecordStore:
    """Named-collection CRUD on top of a SQLAlchemy session factory"""

    def __init__(self, session_factory):
        """
        Args:
            session_factory: Callable returning a new sync Session
        """
        self._session_factory = session_factory

    def _model(self, collection: str) -> Type[Base]:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise StoreError(f"Unknown collection: {collection}")

    def _column(self, model: Type[Base], name: str):
        column = model.__table__.columns.get(name)
        if column is None:
            raise StoreError(f"Unknown column '{name}' in collection {model.__tablename__}")
        return getattr(model, name)

    def insert(self, collection: str, record: Mapping[str, Any]) -> str:
        """
        Insert a record and return its identifier

        Raises:
            StoreError: If the collection is unknown or the database rejects the row
        """
        model = self._model(collection)
        for name in record:
            self._column(model, name)

        session = self._session_factory()
        try:
            instance = model(**record)
            session.add(instance)
            session.commit()
            logger.debug("Inserted %s into %s", instance.id, collection)
            return instance.id
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Failed to insert into {collection}: {str(e)}")
        finally:
            session.close()

    def select(
        self,
        collection: str,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        search: Optional[Mapping[str, str]] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Select records from a collection

        Args:
            collection: Collection name
            filters: Column -> value for equality, or list/tuple of values for membership
            order_by: Column to sort by
            descending: Sort direction
            limit: Maximum number of records
            search: Column -> term; a record matches when any column contains its term (case-insensitive)
            columns: Subset of fields to return; all fields when omitted

        Returns:
            List of records as dictionaries
        """
        model = self._model(collection)
        query = select(model)

        for name, value in (filters or {}).items():
            column = self._column(model, name)
            if isinstance(value, (list, tuple, set)):
                query = query.where(column.in_(list(value)))
            else:
                query = query.where(column == value)

        terms = [
            self._column(model, name).ilike(f"%{term}%")
            for name, term in (search or {}).items()
            if term
        ]
        if terms:
            query = query.where(or_(*terms))

        if order_by is not None:
            column = self._column(model, order_by)
            query = query.order_by(column.desc() if descending else column.asc())

        if limit is not None:
            query = query.limit(limit)

        if columns is not None:
            for name in columns:
                self._column(model, name)

        session = self._session_factory()
        try:
            rows = session.execute(query).scalars().all()
            records = [row.to_dict() for row in rows]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to select from {collection}: {str(e)}")
        finally:
            session.close()

        if columns is not None:
            records = [{name: record[name] for name in columns} for record in records]
        return records

    def get(self, collection: str, record_id: str) -> Optional[Dict[str, Any]]:
        """Get a single record by identifier, None when absent"""
        model = self._model(collection)
        session = self._session_factory()
        try:
            instance = session.get(model, record_id)
            return instance.to_dict() if instance is not None else None
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read {record_id} from {collection}: {str(e)}")
        finally:
            session.close()

    def update(self, collection: str, record_id: str, patch: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update

        Returns:
            The updated record, or None when no record has this identifier
        """
        model = self._model(collection)
        for name in patch:
            if name == "id":
                raise StoreError("Record identifiers cannot be updated")
            self._column(model, name)

        session = self._session_factory()
        try:
            instance = session.get(model, record_id)
            if instance is None:
                return None
            for name, value in patch.items():
                setattr(instance, name, value)
            if "updated_at" in model.__table__.columns:
                instance.updated_at = utc_now()
            session.commit()
            return instance.to_dict()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Failed to update {record_id} in {collection}: {str(e)}")
        finally:
            session.close()

    def delete(self, collection: str, record_id: str) -> bool:
        """
        Delete a record and, through ORM cascades, its dependents

        Returns:
            True if a record was deleted, False when none had this identifier
        """
        model = self._model(collection)
        session = self._session_factory()
        try:
            instance = session.get(model, record_id)
            if instance is None:
                return False
            session.delete(instance)
            session.commit()
            logger.debug("Deleted %s from %s", record_id, collection)
            return True
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Failed to delete {record_id} from {collection}: {str(e)}")
        finally:
            session.close()
