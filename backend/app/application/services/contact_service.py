"""Application service for the contact-details singleton."""

import logging

from app.application.interfaces import SingletonRepository
from app.application.schemas import ContactInfoRecord, ContactInfoUpdate
from app.application.schemas.payload import IncomingPayload
from app.application.validation import validate_changes, validate_record
from app.domain.entities import DEFAULT_CONTACT_KEY, ContactInfo

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, repository: SingletonRepository[ContactInfo]):
        self._repository = repository

    async def load(self) -> ContactInfo:
        """Return the stored record, or an unsaved empty one when nothing is stored."""
        contact = await self._repository.get(DEFAULT_CONTACT_KEY)
        return contact if contact is not None else ContactInfo()

    async def exists(self) -> bool:
        return await self._repository.get(DEFAULT_CONTACT_KEY) is not None

    async def save(self, payload: IncomingPayload) -> ContactInfo:
        contact = await self.load()
        changes = validate_changes(ContactInfoUpdate, payload.fields)
        current = {name: getattr(contact, name) for name in ContactInfoRecord.model_fields}
        contact.update(**validate_record(ContactInfoRecord, {**current, **changes}))
        saved = await self._repository.save(contact)
        logger.info("Contact information saved (%d field(s) changed)", len(changes))
        return saved
