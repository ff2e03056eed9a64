"""
Video URL resolution for project showcase entries.

Every function here is best effort: a URL that cannot be resolved falls back
to the original URL (embed) or None (thumbnail) and is logged, never raised.
Platform arguments may be Platform members or their stored string values.
"""

from typing import Any, Dict, Optional

from logging_config import logger
from platforms import (
    ContentReference,
    DETECTION_ORDER,
    PLATFORM_CONFIG,
    Platform,
    get_platform_config,
)

# Facebook player URLs carry no "embed" substring but are already playable
EMBED_MARKERS = ("embed", "facebook.com/plugins/video.php")


def extract_content_info(url: str, platform) -> Optional[ContentReference]:
    """Return the first content reference the platform's extractors find, or None."""
    if not url:
        return None
    config = get_platform_config(platform)
    if config is None:
        logger.error(f"Platform {platform} not supported")
        return None
    return config.extract(url)


def get_embed_url(url: str, platform) -> str:
    if not url:
        return ""

    if any(marker in url for marker in EMBED_MARKERS):
        return url

    config = get_platform_config(platform)
    if config is None:
        logger.error(f"Platform {platform} not supported")
        return url

    content_info = config.extract(url)
    if content_info is None:
        logger.warning(f"Could not extract content info from URL: {url}")
        return url

    return config.embed_url(content_info)


def get_thumbnail_url(url: str, platform) -> Optional[str]:
    if not url:
        return None

    config = get_platform_config(platform)
    if config is None:
        logger.error(f"Platform {platform} not supported")
        return None

    content_info = config.extract(url)
    if content_info is None:
        logger.warning(f"Could not extract content info from URL: {url}")
        return None

    return config.thumbnail_url(content_info)


def validate_url(url: str, platform) -> bool:
    if not url:
        return False
    config = get_platform_config(platform)
    if config is None:
        return False
    return config.matches(url)


def get_platform_from_url(url: str) -> Optional[Platform]:
    if not url:
        return None
    for platform in DETECTION_ORDER:
        if PLATFORM_CONFIG[platform].matches(url):
            return platform
    return None


def invalid_url_message(platform) -> str:
    """Inline error text shown under the video URL field"""
    config = get_platform_config(platform)
    name = config.name if config else str(platform)
    return f"This URL doesn't appear to be a valid {name} URL"


def resolve_video(url: str, platform) -> Dict[str, Any]:
    """Bundle everything the project form preview needs for one URL."""
    content_info = extract_content_info(url, platform)
    return {
        "platform": Platform(platform).value if get_platform_config(platform) else platform,
        "valid": validate_url(url, platform),
        "contentId": content_info.id if content_info else None,
        "contentType": content_info.type.value if content_info else None,
        "channelId": content_info.channel_id if content_info else None,
        "embedUrl": get_embed_url(url, platform),
        "thumbnailUrl": get_thumbnail_url(url, platform),
    }
