"""
Client service with business logic
"""
import logging
from typing import List, Optional
from adcentral.db.record_store import RecordStore
from adcentral.enums.status import ClientStatus
from adcentral.models.client_schema import ClientCreate, ClientUpdate, ClientResponse, ClientOption

logger = logging.getLogger(__name__)

COLLECTION = "clients"

class ClientService:
    """Client service for handling client operations"""

    def __init__(self, store: RecordStore):
        self._store = store

    def get_clients(self, search: Optional[str] = None, status: Optional[str] = None) -> List[ClientResponse]:
        """Get clients newest first, optionally filtered by name and status"""
        filters = {"status": status} if status else None
        records = self._store.select(
            COLLECTION,
            filters=filters,
            search={"name": search} if search else None,
            order_by="created_at",
            descending=True,
        )
        return [ClientResponse(**record) for record in records]

    def get_selectable_clients(self) -> List[ClientOption]:
        """Active clients ordered by name, for campaign forms"""
        records = self._store.select(
            COLLECTION,
            filters={"status": ClientStatus.ACTIVE.value},
            order_by="name",
            columns=["id", "name"],
        )
        return [ClientOption(**record) for record in records]

    def get_client(self, client_id: str) -> Optional[ClientResponse]:
        """Get client by ID"""
        record = self._store.get(COLLECTION, client_id)
        return ClientResponse(**record) if record else None

    def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client"""
        client_id = self._store.insert(COLLECTION, client_data.model_dump())
        logger.info("Client %s created", client_id)
        return self.get_client(client_id)

    def update_client(self, client_id: str, client_data: ClientUpdate) -> Optional[ClientResponse]:
        """Update client by ID"""
        update_data = client_data.model_dump(exclude_unset=True)
        record = self._store.update(COLLECTION, client_id, update_data)
        return ClientResponse(**record) if record else None

    def delete_client(self, client_id: str) -> bool:
        """Delete client by ID together with its campaigns"""
        deleted = self._store.delete(COLLECTION, client_id)
        if deleted:
            logger.info("Client %s deleted", client_id)
        return deleted

def create_client_service(store: RecordStore) -> ClientService:
    """
    Create and return a ClientService instance

    Args:
        store: Record store backing the service

    Returns:
        ClientService: Configured client service instance
    """
    return ClientService(store)
