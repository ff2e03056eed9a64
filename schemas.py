"""
Database Schemas for the Site Content Admin

Each record model maps to one document store collection. Stored documents
use camelCase keys (videoUrl, isPopular, ...); models expose snake_case
attributes and dump by alias.

- SocialLink      -> "socialLinks"
- Project         -> "Projects"
- PricingPlan     -> "pricingPlans"
- ParallaxSection -> "parallax"
- ContactInfo     -> "contactUs"

The *Form models are the save gate: a payload that does not validate is
never written.
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal, Union

from platforms import Platform
from video_formatter import get_platform_from_url, invalid_url_message, validate_url

COLLECTION_SOCIAL_LINKS = "socialLinks"
COLLECTION_PROJECTS = "Projects"
COLLECTION_PRICING_PLANS = "pricingPlans"
COLLECTION_PARALLAX = "parallax"
COLLECTION_CONTACTS = "contactUs"

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"

PLATFORM_ICONS = {
    "Instagram": "logos:instagram-icon",
    "Facebook": "logos:facebook",
    "Twitter": "logos:twitter",
    "YouTube": "logos:youtube-icon",
    "LinkedIn": "logos:linkedin-icon",
    "Pinterest": "logos:pinterest",
    "TikTok": "logos:tiktok-icon",
    "Behance": "logos:behance",
    "Dribbble": "logos:dribbble-icon",
}

CONTACT_ICONS = {
    "address": "lucide:map-pin",
    "phone": "lucide:phone",
    "email": "lucide:mail",
}


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# ------------------------------
# Social links
# ------------------------------

class SocialLinkBase(CamelModel):
    platform: str = Field("", description="Free text label, e.g. Instagram")
    url: str = Field("", description="Profile URL")
    icon: str = Field("", description="Iconify icon name")


class SocialLink(SocialLinkBase):
    id: str


class SocialLinkForm(SocialLinkBase):
    @model_validator(mode="after")
    def check_required(self):
        if _blank(self.platform) or _blank(self.url):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        if _blank(self.icon):
            self.icon = PLATFORM_ICONS.get(self.platform.strip(), "lucide:link")
        return self


# ------------------------------
# Projects (video showcase)
# ------------------------------

class ProjectBase(CamelModel):
    title: str = ""
    description: str = ""
    category: Literal["Video", "Real"] = "Video"
    platform: Platform = Platform.YOUTUBE
    video_url: str = Field("", description="Share URL as pasted by the editor")


class Project(ProjectBase):
    id: str
    # Stored documents may carry legacy categories
    category: str = "Video"
    embed_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class ProjectForm(ProjectBase):
    @model_validator(mode="before")
    @classmethod
    def detect_platform(cls, data):
        # A missing platform follows the pasted URL
        if not isinstance(data, dict) or data.get("platform"):
            return data
        url = data.get("videoUrl") or data.get("video_url")
        detected = get_platform_from_url(url) if isinstance(url, str) else None
        if detected is None:
            return data
        return {**data, "platform": detected}

    @model_validator(mode="after")
    def check_video(self):
        if _blank(self.title) or _blank(self.description) or _blank(self.video_url):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        if not validate_url(self.video_url, self.platform):
            raise ValueError(invalid_url_message(self.platform))
        return self


# ------------------------------
# Pricing plans
# ------------------------------

class PricingPlanBase(CamelModel):
    title: str = ""
    price: float = Field(0, ge=0)
    currency: str = "$"
    period: str = "per project"
    features: List[str] = Field(default_factory=list)
    is_popular: bool = False
    background_color: str = "#f9eadb"


class PricingPlan(PricingPlanBase):
    id: str


class PricingPlanForm(PricingPlanBase):
    features: Union[List[str], str] = Field(default_factory=list, description="List or one feature per line")

    @field_validator("features", mode="before")
    @classmethod
    def split_features(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split("\n")
        return [str(feature).strip() for feature in v if str(feature).strip()]

    @model_validator(mode="after")
    def check_savable(self):
        if _blank(self.title) or not self.price > 0:
            raise ValueError("A plan needs a title and a price greater than 0")
        return self


# ------------------------------
# Parallax hero section
# ------------------------------

class ParallaxSectionBase(CamelModel):
    title: str = ""
    subtitle: str = ""
    description: str = ""
    background_url: str = Field(
        "",
        validation_alias=AliasChoices("backgroundUrl", "imageUrl", "background_url"),
        serialization_alias="backgroundUrl",
    )
    button_text: str = ""
    button_url: str = ""


class ParallaxSection(ParallaxSectionBase):
    id: str


class ParallaxSectionForm(ParallaxSectionBase):
    @model_validator(mode="after")
    def check_required(self):
        if _blank(self.title) or _blank(self.background_url):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return self


# ------------------------------
# Contact details
# ------------------------------

class ContactInfoBase(CamelModel):
    contact_type: Literal["address", "phone", "email"] = "address"
    label: str = ""
    content: str = ""
    # Advisory only; several records may be main
    is_main: bool = False


class ContactInfo(ContactInfoBase):
    id: str
    icon: str = ""


class ContactInfoForm(ContactInfoBase):
    @model_validator(mode="after")
    def check_required(self):
        if _blank(self.label) or _blank(self.content):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return self


# ------------------------------
# Video helpers
# ------------------------------

class VideoResolveRequest(CamelModel):
    url: str
    platform: Optional[Platform] = None


class VideoValidateRequest(CamelModel):
    url: str
    platform: Platform
