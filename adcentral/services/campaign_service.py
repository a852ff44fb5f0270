"""
Campaign service with business logic
Listing, filtering, duplication, export and cascade deletion of campaigns
"""
import logging
import re
from typing import Any, Dict, List, Optional, Tuple
from adcentral.db.record_store import RecordStore
from adcentral.enums.status import CampaignStatus
from adcentral.models.campaign_schema import CampaignCreate, CampaignUpdate, CampaignResponse, CampaignOption
from adcentral.utils.formatting import format_campaign_export

logger = logging.getLogger(__name__)

COLLECTION = "campaigns"

# Statuses a campaign must have to be picked in the ROI calculator
SELECTABLE_STATUSES = (CampaignStatus.ACTIVE.value, CampaignStatus.COMPLETED.value)

COPY_SUFFIX = " (Copy)"

EXPORT_PREFIX = "campanha-"
_WHITESPACE = re.compile(r"\s+")

class CampaignServiceError(Exception):
    """Custom exception for campaign service errors"""
    pass

class CampaignService:
    """Service for campaign CRUD backed by the record store"""

    def __init__(self, store: RecordStore):
        self._store = store

    def _client_names(self) -> Dict[str, str]:
        records = self._store.select("clients", columns=["id", "name"])
        return {record["id"]: record["name"] for record in records}

    def _to_response(self, record: Dict[str, Any], client_names: Optional[Dict[str, str]] = None) -> CampaignResponse:
        if client_names is None:
            client = self._store.get("clients", record["client_id"])
            client_name = client["name"] if client else None
        else:
            client_name = client_names.get(record["client_id"])
        return CampaignResponse(**record, client_name=client_name)

    def _ensure_client(self, client_id: str) -> None:
        if self._store.get("clients", client_id) is None:
            raise CampaignServiceError(f"Client {client_id} does not exist")

    def get_campaigns(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        client_id: Optional[str] = None
    ) -> List[CampaignResponse]:
        """
        Get campaigns newest first

        Args:
            search: Case-insensitive term matched against name or objective
            status: Only campaigns with this status
            client_id: Only campaigns of this client

        Returns:
            List of campaigns with their client name
        """
        filters = {}
        if status:
            filters["status"] = status
        if client_id:
            filters["client_id"] = client_id

        records = self._store.select(
            COLLECTION,
            filters=filters,
            search={"name": search, "objective": search} if search else None,
            order_by="created_at",
            descending=True,
        )
        client_names = self._client_names()
        return [self._to_response(record, client_names) for record in records]

    def get_selectable_campaigns(self) -> List[CampaignOption]:
        """Active or completed campaigns ordered by name"""
        records = self._store.select(
            COLLECTION,
            filters={"status": SELECTABLE_STATUSES},
            order_by="name",
            columns=["id", "name"],
        )
        return [CampaignOption(**record) for record in records]

    def get_campaign(self, campaign_id: str) -> Optional[CampaignResponse]:
        """Get campaign by ID"""
        record = self._store.get(COLLECTION, campaign_id)
        return self._to_response(record) if record else None

    def create_campaign(self, campaign_data: CampaignCreate) -> CampaignResponse:
        """
        Create a new campaign

        Raises:
            CampaignServiceError: If the client does not exist
        """
        self._ensure_client(campaign_data.client_id)
        campaign_id = self._store.insert(COLLECTION, campaign_data.model_dump())
        logger.info("Campaign %s created for client %s", campaign_id, campaign_data.client_id)
        return self.get_campaign(campaign_id)

    def update_campaign(self, campaign_id: str, campaign_data: CampaignUpdate) -> Optional[CampaignResponse]:
        """
        Update campaign by ID

        Raises:
            CampaignServiceError: If the new client does not exist or the dates are inverted
        """
        current = self._store.get(COLLECTION, campaign_id)
        if current is None:
            return None

        update_data = campaign_data.model_dump(exclude_unset=True)
        if update_data.get("client_id"):
            self._ensure_client(update_data["client_id"])

        start_date = update_data.get("start_date", current["start_date"])
        end_date = update_data.get("end_date", current["end_date"])
        if start_date and end_date and end_date < start_date:
            raise CampaignServiceError("end_date must not be earlier than start_date")

        record = self._store.update(COLLECTION, campaign_id, update_data)
        return self._to_response(record) if record else None

    def duplicate_campaign(self, campaign_id: str) -> Optional[CampaignResponse]:
        """Copy a campaign as a new draft named '<name> (Copy)'"""
        record = self._store.get(COLLECTION, campaign_id)
        if record is None:
            return None

        copy = {
            key: value for key, value in record.items()
            if key not in ("id", "created_at", "updated_at")
        }
        copy["name"] = f"{record['name']}{COPY_SUFFIX}"
        copy["status"] = CampaignStatus.DRAFT.value

        new_id = self._store.insert(COLLECTION, copy)
        logger.info("Campaign %s duplicated as %s", campaign_id, new_id)
        return self.get_campaign(new_id)

    def export_campaign(self, campaign_id: str) -> Optional[Tuple[str, str]]:
        """
        Render a campaign as a plain-text sheet

        Returns:
            (filename, content) such as ("campanha-summer-launch.txt", "Campanha: ..."),
            or None when the campaign does not exist
        """
        campaign = self.get_campaign(campaign_id)
        if campaign is None:
            return None

        content = format_campaign_export(
            name=campaign.name,
            client_name=campaign.client_name,
            objective=campaign.objective,
            budget=campaign.budget,
            audience=campaign.audience,
            platforms=campaign.platforms,
            start_date=campaign.start_date,
            end_date=campaign.end_date,
            status=campaign.status,
            notes=campaign.notes,
        )
        slug = _WHITESPACE.sub("-", campaign.name.lower())
        filename = f"{EXPORT_PREFIX}{slug}.txt"
        logger.info("Campaign %s exported as %s", campaign_id, filename)
        return filename, content

    def delete_campaign(self, campaign_id: str) -> bool:
        """Delete campaign by ID together with its ROI history"""
        deleted = self._store.delete(COLLECTION, campaign_id)
        if deleted:
            logger.info("Campaign %s deleted", campaign_id)
        return deleted

def create_campaign_service(store: RecordStore) -> CampaignService:
    """
    Create and return a CampaignService instance

    Args:
        store: Record store backing the service

    Returns:
        CampaignService: Configured campaign service instance
    """
    return CampaignService(store)
