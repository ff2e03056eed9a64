"""
Content managers, one per collection.

A manager reads its collection (coercing loose documents into records with
defaults), writes validated forms back, and applies the failure policy:

- read failures are logged and give an empty list
- write failures are logged and surface as StoreUnavailableError, no retry
- deletes are refused unless confirmed
"""
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel

from database import DocumentStore
from exceptions import ContentNotFoundError, DeleteNotConfirmedError, StoreUnavailableError
from logging_config import logger
from platforms import Platform, get_platform_config
from schemas import (
    COLLECTION_CONTACTS,
    COLLECTION_PARALLAX,
    COLLECTION_PRICING_PLANS,
    COLLECTION_PROJECTS,
    COLLECTION_SOCIAL_LINKS,
    CONTACT_ICONS,
    PLATFORM_ICONS,
    ContactInfo,
    ContactInfoForm,
    ParallaxSection,
    ParallaxSectionForm,
    PricingPlan,
    PricingPlanForm,
    Project,
    ProjectForm,
    SocialLink,
    SocialLinkForm,
)
from seed_data import (
    DEFAULT_CONTACTS,
    DEFAULT_PARALLAX_SECTIONS,
    DEFAULT_PRICING_PLANS,
    DEFAULT_SOCIAL_LINKS,
)
from video_formatter import get_embed_url, get_thumbnail_url

# ------------------------------
# Document -> record coercion
# ------------------------------


def _doc_id(doc: Dict[str, Any]) -> str:
    return str(doc.get("_id"))


def _text(value: Any, default: str = "") -> str:
    if value is None or value == "":
        return default
    return str(value)


def _flag(value: Any) -> bool:
    # Only a stored boolean counts; "false", 1 and friends read as False
    return value is True


def serialize_social_link(doc: Dict[str, Any]) -> SocialLink:
    platform = _text(doc.get("platform"))
    return SocialLink(
        id=_doc_id(doc),
        platform=platform,
        url=_text(doc.get("url")),
        icon=_text(doc.get("icon"), PLATFORM_ICONS.get(platform, "")),
    )


def serialize_project(doc: Dict[str, Any]) -> Project:
    platform = doc.get("platform") or Platform.YOUTUBE
    if get_platform_config(platform) is None:
        logger.warning(f"Project {_doc_id(doc)} has unknown platform {platform!r}, using youtube")
        platform = Platform.YOUTUBE
    video_url = _text(doc.get("videoUrl"))
    return Project(
        id=_doc_id(doc),
        title=_text(doc.get("title")),
        description=_text(doc.get("description")),
        category=_text(doc.get("category"), "Video"),
        platform=platform,
        video_url=video_url,
        embed_url=get_embed_url(video_url, platform) or None,
        thumbnail_url=get_thumbnail_url(video_url, platform),
    )


def _coerce_price(value: Any) -> float:
    try:
        price = float(value or 0)
    except (TypeError, ValueError):
        return 0
    return price if price >= 0 else 0


def _coerce_features(value: Any) -> List[str]:
    if isinstance(value, str):
        value = value.split("\n")
    if not isinstance(value, (list, tuple)):
        return []
    return [str(feature).strip() for feature in value if str(feature).strip()]


def serialize_pricing_plan(doc: Dict[str, Any]) -> PricingPlan:
    return PricingPlan(
        id=_doc_id(doc),
        title=_text(doc.get("title")),
        price=_coerce_price(doc.get("price")),
        currency=_text(doc.get("currency"), "$"),
        period=_text(doc.get("period")),
        features=_coerce_features(doc.get("features")),
        is_popular=_flag(doc.get("isPopular")),
        background_color=_text(doc.get("backgroundColor"), "#f9eadb"),
    )


def serialize_parallax_section(doc: Dict[str, Any]) -> ParallaxSection:
    return ParallaxSection(
        id=_doc_id(doc),
        title=_text(doc.get("title")),
        subtitle=_text(doc.get("subtitle")),
        description=_text(doc.get("description")),
        background_url=_text(doc.get("backgroundUrl") or doc.get("imageUrl")),
        button_text=_text(doc.get("buttonText")),
        button_url=_text(doc.get("buttonUrl")),
    )


def serialize_contact(doc: Dict[str, Any]) -> ContactInfo:
    contact_type = _text(doc.get("contactType"))
    if contact_type not in CONTACT_ICONS:
        contact_type = "address"
    return ContactInfo(
        id=_doc_id(doc),
        contact_type=contact_type,
        label=_text(doc.get("label")),
        content=_text(doc.get("content")),
        is_main=_flag(doc.get("isMain")),
        icon=CONTACT_ICONS[contact_type],
    )


# ------------------------------
# Managers
# ------------------------------


class ContentManager:
    """CRUD for one collection"""

    collection: str = ""
    label: str = "item"
    form_model: Type[BaseModel] = BaseModel
    record_model: Type[BaseModel] = BaseModel
    serialize: Callable[[Dict[str, Any]], BaseModel]
    defaults: List[Dict[str, Any]] = []
    # Stored key that identifies a default item
    seed_key: str = "title"

    def __init__(self, store: DocumentStore):
        self.store = store

    def list_all(self) -> List[BaseModel]:
        try:
            docs = self.store.list_documents(self.collection)
        except StoreUnavailableError as e:
            logger.error(f"Error fetching {self.collection}: {e}", exc_info=True)
            return []
        return [type(self).serialize(doc) for doc in docs]

    def to_document(self, form: BaseModel) -> Dict[str, Any]:
        return form.model_dump(by_alias=True, mode="json")

    def create(self, form: BaseModel):
        doc = self.to_document(form)
        try:
            doc_id = self.store.add_document(self.collection, doc)
        except StoreUnavailableError as e:
            raise self._write_failed("saving", e) from e
        logger.info(f"Created {self.label} {doc_id} in {self.collection}")
        return type(self).serialize({**doc, "_id": doc_id})

    def update(self, document_id: str, form: BaseModel):
        doc = self.to_document(form)
        try:
            matched = self.store.update_document(self.collection, document_id, doc)
        except StoreUnavailableError as e:
            raise self._write_failed("saving", e) from e
        if not matched:
            raise ContentNotFoundError(self.collection, document_id)
        logger.info(f"Updated {self.label} {document_id} in {self.collection}")
        return type(self).serialize({**doc, "_id": document_id})

    def delete(self, document_id: str, confirmed: bool = False) -> None:
        if not confirmed:
            raise DeleteNotConfirmedError(self.collection, document_id)
        try:
            deleted = self.store.delete_document(self.collection, document_id)
        except StoreUnavailableError as e:
            raise self._write_failed("deleting", e) from e
        if not deleted:
            raise ContentNotFoundError(self.collection, document_id)
        logger.info(f"Deleted {self.label} {document_id} from {self.collection}")

    def seed(self) -> Dict[str, int]:
        """
        Insert the default content into a collection that holds nothing else.

        Defaults already present (matched on `seed_key`) are skipped, so a seed
        interrupted by a store failure can be run again to finish. Once an
        editor has added content of their own the collection is left alone.
        """
        try:
            docs = self.store.list_documents(self.collection)
        except StoreUnavailableError as e:
            raise self._write_failed("seeding", e) from e

        default_keys = {data[self.seed_key] for data in self.defaults}
        present = {_text(doc.get(self.seed_key)) for doc in docs}
        if not present <= default_keys:
            return {"created": 0, "skipped": len(self.defaults)}

        created = 0
        for data in self.defaults:
            if data[self.seed_key] in present:
                continue
            self.create(self.form_model.model_validate(data))
            created += 1
        return {"created": created, "skipped": len(self.defaults) - created}

    def _write_failed(self, action: str, error: StoreUnavailableError) -> StoreUnavailableError:
        logger.error(f"Error {action} {self.label} in {self.collection}: {error}", exc_info=True)
        return StoreUnavailableError(
            f"Error {action} {self.label}. Please try again.",
            operation=f"{action} {self.collection}",
        )


class SocialLinksManager(ContentManager):
    collection = COLLECTION_SOCIAL_LINKS
    label = "social link"
    form_model = SocialLinkForm
    record_model = SocialLink
    serialize = staticmethod(serialize_social_link)
    defaults = DEFAULT_SOCIAL_LINKS
    seed_key = "platform"


class ProjectsManager(ContentManager):
    collection = COLLECTION_PROJECTS
    label = "project"
    form_model = ProjectForm
    record_model = Project
    serialize = staticmethod(serialize_project)


class PricingPlansManager(ContentManager):
    collection = COLLECTION_PRICING_PLANS
    label = "pricing plan"
    form_model = PricingPlanForm
    record_model = PricingPlan
    serialize = staticmethod(serialize_pricing_plan)
    defaults = DEFAULT_PRICING_PLANS


class ParallaxManager(ContentManager):
    collection = COLLECTION_PARALLAX
    label = "parallax section"
    form_model = ParallaxSectionForm
    record_model = ParallaxSection
    serialize = staticmethod(serialize_parallax_section)
    defaults = DEFAULT_PARALLAX_SECTIONS


class ContactsManager(ContentManager):
    collection = COLLECTION_CONTACTS
    label = "contact"
    form_model = ContactInfoForm
    record_model = ContactInfo
    serialize = staticmethod(serialize_contact)
    defaults = DEFAULT_CONTACTS
    seed_key = "label"


# Route slug -> manager
MANAGERS: Dict[str, Type[ContentManager]] = {
    "social-links": SocialLinksManager,
    "projects": ProjectsManager,
    "pricing-plans": PricingPlansManager,
    "parallax-sections": ParallaxManager,
    "contacts": ContactsManager,
}
