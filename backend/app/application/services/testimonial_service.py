"""Application service (use case) for Testimonial operations."""

from app.application.interfaces import DocumentRepository
from app.application.schemas import TestimonialCreate, TestimonialUpdate
from app.application.schemas.payload import UploadedAsset
from app.application.services.asset_manager import AssetManager
from app.application.services.resource_service import ResourceService
from app.domain.entities import Testimonial
from app.domain.exceptions import ValidationError


class TestimonialService(ResourceService[Testimonial]):
    """Testimonials with an optional avatar upload (image MIME types only)."""

    entity_name = "Testimonial"
    entity_cls = Testimonial
    create_schema = TestimonialCreate
    update_schema = TestimonialUpdate
    asset_fields = ("avatar",)

    def __init__(
        self,
        repository: DocumentRepository[Testimonial],
        assets: AssetManager | None = None,
        max_avatar_bytes: int = 5 * 1024 * 1024,
        **kwargs,
    ):
        super().__init__(repository, assets, **kwargs)
        self._max_avatar_bytes = max_avatar_bytes

    def _validate_upload(self, field_name: str, upload: UploadedAsset) -> None:
        super()._validate_upload(field_name, upload)
        if upload.size > self._max_avatar_bytes:
            limit_mb = self._max_avatar_bytes // (1024 * 1024)
            raise ValidationError.single(field_name, f"must be smaller than {limit_mb}MB")

    def _asset_stem(self, fields) -> str:
        return "testimonial"
