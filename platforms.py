"""
Video platform registry.

Each supported platform maps to one PlatformConfig record holding its URL
patterns and the two builders used by video_formatter. Adding a platform
means adding an entry to PLATFORM_CONFIG (and to DETECTION_ORDER).

Two orderings are part of the contract:

- ``PlatformConfig.extractors`` is tried first to last and the first match
  wins (YouTube shorts before regular videos, Facebook reel -> watch ->
  user video -> share video -> share reel, Instagram reel before post).
- ``DETECTION_ORDER`` decides which platform claims a URL when the platform
  is not known yet.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Pattern, Tuple


class Platform(str, Enum):
    YOUTUBE = "youtube"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"


class ContentKind(str, Enum):
    VIDEO = "video"
    SHORT = "short"
    REEL = "reel"
    POST = "post"
    STORY = "story"


@dataclass(frozen=True)
class ContentReference:
    """Normalized content id extracted from a share URL"""
    id: str
    type: ContentKind
    channel_id: Optional[str] = None


@dataclass(frozen=True)
class Extractor:
    pattern: Pattern[str]
    kind: ContentKind
    id_group: int = 1
    channel_group: Optional[int] = None

    def match(self, url: str) -> Optional[ContentReference]:
        m = self.pattern.search(url)
        if not m or not m.group(self.id_group):
            return None
        channel_id = m.group(self.channel_group) if self.channel_group else None
        return ContentReference(id=m.group(self.id_group), type=self.kind, channel_id=channel_id)


@dataclass(frozen=True)
class PlatformConfig:
    name: str
    icon: str
    brand_color: str
    patterns: Tuple[Pattern[str], ...]
    extractors: Tuple[Extractor, ...]
    embed_url: Callable[[ContentReference], str]
    thumbnail_url: Callable[[ContentReference], Optional[str]]

    def matches(self, url: str) -> bool:
        return any(pattern.search(url) for pattern in self.patterns)

    def extract(self, url: str) -> Optional[ContentReference]:
        for extractor in self.extractors:
            ref = extractor.match(url)
            if ref is not None:
                return ref
        return None


def _no_thumbnail(ref: ContentReference) -> Optional[str]:
    return None


# ------------------------------
# YouTube
# ------------------------------

def _youtube_embed(ref: ContentReference) -> str:
    if ref.type == ContentKind.SHORT:
        return f"https://www.youtube.com/embed/{ref.id}?loop=1&playlist={ref.id}"
    return f"https://www.youtube.com/embed/{ref.id}"


def _youtube_thumbnail(ref: ContentReference) -> Optional[str]:
    return f"https://img.youtube.com/vi/{ref.id}/hqdefault.jpg"


YOUTUBE = PlatformConfig(
    name="YouTube",
    icon="logos:youtube-icon",
    brand_color="#FF0000",
    patterns=(
        # watch / embed / v / youtu.be
        re.compile(r"^(?:https?://)?(?:www\.)?(?:youtube\.com/(?:watch\?v=|embed/|v/)|youtu\.be/)([a-zA-Z0-9_-]{11})"),
        # shorts
        re.compile(r"^(?:https?://)?(?:www\.)?youtube\.com/shorts/([a-zA-Z0-9_-]{11})"),
    ),
    extractors=(
        Extractor(re.compile(r"youtube\.com/shorts/([a-zA-Z0-9_-]{11})"), ContentKind.SHORT),
        Extractor(re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/|v/)|youtu\.be/)([a-zA-Z0-9_-]{11})"), ContentKind.VIDEO),
    ),
    embed_url=_youtube_embed,
    thumbnail_url=_youtube_thumbnail,
)


# ------------------------------
# Facebook
# ------------------------------

def _facebook_embed(ref: ContentReference) -> str:
    if ref.type == ContentKind.REEL:
        return f"https://www.facebook.com/plugins/video.php?href=https://www.facebook.com/reel/{ref.id}"
    return f"https://www.facebook.com/plugins/video.php?href=https://www.facebook.com/watch/?v={ref.id}"


FACEBOOK = PlatformConfig(
    name="Facebook",
    icon="logos:facebook",
    brand_color="#1877F2",
    patterns=(
        re.compile(r"(?:web\.|m\.)?facebook\.com/reel/(\d+)"),
        re.compile(r"(?:web\.|m\.)?facebook\.com/watch/?\?v=(\d+)"),
        re.compile(r"(?:web\.|m\.)?facebook\.com/([^/]+)/videos/(\d+)"),
        re.compile(r"(?:web\.|m\.)?facebook\.com/share/v/([a-zA-Z0-9]+)"),
        re.compile(r"(?:web\.|m\.)?facebook\.com/share/r/([a-zA-Z0-9]+)"),
    ),
    extractors=(
        Extractor(re.compile(r"facebook\.com/reel/(\d+)"), ContentKind.REEL),
        Extractor(re.compile(r"facebook\.com/watch/?\?v=(\d+)"), ContentKind.VIDEO),
        Extractor(re.compile(r"facebook\.com/([^/]+)/videos/(\d+)"), ContentKind.VIDEO, id_group=2, channel_group=1),
        Extractor(re.compile(r"facebook\.com/share/v/([a-zA-Z0-9]+)"), ContentKind.VIDEO),
        Extractor(re.compile(r"facebook\.com/share/r/([a-zA-Z0-9]+)"), ContentKind.REEL),
    ),
    embed_url=_facebook_embed,
    thumbnail_url=_no_thumbnail,
)


# ------------------------------
# Instagram
# ------------------------------

def _instagram_embed(ref: ContentReference) -> str:
    if ref.type == ContentKind.REEL:
        return f"https://www.instagram.com/reel/{ref.id}/embed/"
    return f"https://www.instagram.com/p/{ref.id}/embed/"


INSTAGRAM = PlatformConfig(
    name="Instagram",
    icon="skill-icons:instagram",
    brand_color="#E4405F",
    patterns=(
        re.compile(r"instagram\.com/p/([a-zA-Z0-9_-]+)"),
        re.compile(r"instagram\.com/reels?/([a-zA-Z0-9_-]+)"),
    ),
    extractors=(
        Extractor(re.compile(r"instagram\.com/reels?/([a-zA-Z0-9_-]+)"), ContentKind.REEL),
        Extractor(re.compile(r"instagram\.com/p/([a-zA-Z0-9_-]+)"), ContentKind.POST),
    ),
    embed_url=_instagram_embed,
    thumbnail_url=_no_thumbnail,
)


# ------------------------------
# TikTok
# ------------------------------

def _tiktok_embed(ref: ContentReference) -> str:
    return f"https://www.tiktok.com/embed/v2/{ref.id}"


TIKTOK = PlatformConfig(
    name="TikTok",
    icon="logos:tiktok-icon",
    brand_color="#000000",
    patterns=(
        re.compile(r"tiktok\.com/@([^/]+)/video/(\d+)"),
        # vm.tiktok.com short links validate but carry no video id
        re.compile(r"vm\.tiktok\.com/([a-zA-Z0-9]+)"),
    ),
    extractors=(
        Extractor(re.compile(r"tiktok\.com/@([^/]+)/video/(\d+)"), ContentKind.VIDEO, id_group=2, channel_group=1),
    ),
    embed_url=_tiktok_embed,
    thumbnail_url=_no_thumbnail,
)


PLATFORM_CONFIG: Dict[Platform, PlatformConfig] = {
    Platform.YOUTUBE: YOUTUBE,
    Platform.FACEBOOK: FACEBOOK,
    Platform.INSTAGRAM: INSTAGRAM,
    Platform.TIKTOK: TIKTOK,
}

# URL shapes do not overlap in practice; if one ever matches two platforms,
# the first platform here wins.
DETECTION_ORDER: Tuple[Platform, ...] = (
    Platform.FACEBOOK,
    Platform.INSTAGRAM,
    Platform.TIKTOK,
    Platform.YOUTUBE,
)


def get_platform_config(platform) -> Optional[PlatformConfig]:
    """Look up a platform by enum member or stored string value"""
    try:
        return PLATFORM_CONFIG[Platform(platform)]
    except (ValueError, TypeError):
        return None


def platform_summary() -> list:
    """Registry metadata for platform pickers"""
    return [
        {
            "platform": platform.value,
            "name": config.name,
            "icon": config.icon,
            "brandColor": config.brand_color,
            "hasThumbnails": config.thumbnail_url is not _no_thumbnail,
        }
        for platform, config in PLATFORM_CONFIG.items()
    ]
