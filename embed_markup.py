"""
Markup builder for the video embed widget

Turns widget properties into the HTML fragment for the chosen video service.
Every failure comes back as a localized message instead of an exception,
since the result is rendered straight into the page builder preview.
"""
import logging
from typing import Optional
from urllib.parse import urlsplit, parse_qs

from markupsafe import escape

from localization import LocalizationService, MessageKey
from widget_properties import VideoService, WidgetProperties

logger = logging.getLogger(__name__)

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/"
VIMEO_EMBED_URL = "https://player.vimeo.com/video/"
VIMEO_PLAYER_API_URL = "https://player.vimeo.com/api/player.js"
DAILYMOTION_EMBED_URL = "https://www.dailymotion.com/embed/video/"

# "https:", "", host, then at least one path segment
MIN_URL_COMPONENTS = 4


def get_query_parameter(url: str, name: str) -> str:
    """
    Get the first non-empty value of a query string parameter

    Returns an empty string if the URL has no such parameter or can't be parsed.
    """
    if not url or not name:
        return ""

    try:
        query = urlsplit(url).query
    except ValueError as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return ""

    values = parse_qs(query).get(name, [])
    return values[0] if values else ""


def get_final_path_component(url: str) -> str:
    """
    Get the last "/"-delimited segment of a URL, ignoring its query string

    Returns an empty string for URLs without a path segment (e.g. a bare domain).

    Examples:
    - https://vimeo.com/76979871 -> 76979871
    - https://youtu.be/dQw4w9WgXcQ?t=5 -> dQw4w9WgXcQ
    - https://vimeo.com -> ""
    """
    if not url:
        return ""

    base_url = url.split("?")[0]
    components = base_url.split("/")
    if len(components) < MIN_URL_COMPONENTS:
        return ""
    return components[-1]


def get_youtube_id(url: str) -> str:
    """Get a YouTube video ID from the `v` parameter, falling back to the final path segment"""
    return get_query_parameter(url, "v") or get_final_path_component(url)


def get_file_extension(url: str) -> str:
    """Get the extension of the file a URL points to, or an empty string"""
    parts = get_final_path_component(url).split(".")
    if len(parts) > 1:
        return parts[-1]
    return ""


class EmbedMarkupBuilder:
    """Builds embed HTML for YouTube, Vimeo, Dailymotion and file URLs"""

    def __init__(self, localization: LocalizationService):
        """
        Initialize markup builder

        Args:
            localization: Resolves the messages returned instead of markup
        """
        self.localization = localization
        self.builders = {
            VideoService.YOUTUBE: self._build_youtube_markup,
            VideoService.VIMEO: self._build_vimeo_markup,
            VideoService.DAILYMOTION: self._build_dailymotion_markup,
            VideoService.FILE: self._build_file_markup,
        }

    def generate_markup(self, properties: Optional[WidgetProperties]) -> str:
        """
        Generate the widget markup

        Args:
            properties: Widget properties supplied by the host

        Returns:
            HTML fragment, or a localized message describing what's missing
        """
        url = (properties.url or "").strip() if properties else ""
        if not url:
            logger.debug("No video URL set")
            return self.localization.resolve(MessageKey.NO_URL)

        try:
            service = VideoService(properties.service)
        except ValueError:
            logger.debug(f"Unknown video service {properties.service!r}")
            return self.localization.resolve(MessageKey.SERVICE_NOT_FOUND)

        return self.builders[service](properties, url)

    def _build_youtube_markup(self, properties: WidgetProperties, url: str) -> str:
        """Build a fixed size YouTube iframe"""
        video_id = get_youtube_id(url)
        if not video_id:
            logger.debug(f"No YouTube video ID in {url!r}")
            return self.localization.resolve(MessageKey.NO_YOUTUBE_ID)

        query = "" if properties.play_from_beginning else f"?start={properties.starting_time}"
        src = escape(f"{YOUTUBE_EMBED_URL}{video_id}{query}")

        return (
            f'<iframe width="{properties.width}" height="{properties.height}" src="{src}" '
            'title="YouTube video player" frameborder="0" '
            'allow="accelerometer;autoplay;clipboard-write;encrypted-media;gyroscope;picture-in-picture;web-share" '
            'allowfullscreen></iframe>'
        )

    def _build_vimeo_markup(self, properties: WidgetProperties, url: str) -> str:
        """Build a Vimeo iframe, wrapped for responsive sizing when dynamic_size is set"""
        video_id = get_final_path_component(url)
        if not video_id:
            logger.debug(f"No Vimeo video ID in {url!r}")
            return self.localization.resolve(MessageKey.NO_VIMEO_ID)

        anchor = "" if properties.play_from_beginning else f"#t={properties.starting_time}s"
        src = escape(f"{VIMEO_EMBED_URL}{video_id}{anchor}")

        if properties.dynamic_size:
            # The player API script keeps the iframe sized to the wrapper
            return (
                '<div style="padding:56.25% 0 0 0;position:relative;">'
                f'<iframe src="{src}" style="position:absolute;top:0;left:0;width:100%;height:100%;" '
                'frameborder="0" allow="autoplay; fullscreen; picture-in-picture" allowfullscreen></iframe>'
                '</div>'
                f'<script src="{VIMEO_PLAYER_API_URL}"></script>'
            )

        return (
            f'<iframe src="{src}" width="{properties.width}" height="{properties.height}" '
            'frameborder="0" allow="autoplay; fullscreen; picture-in-picture" allowfullscreen></iframe>'
        )

    def _build_dailymotion_markup(self, properties: WidgetProperties, url: str) -> str:
        """Build a Dailymotion iframe (start time is not supported)"""
        video_id = get_final_path_component(url)
        if not video_id:
            logger.debug(f"No Dailymotion video ID in {url!r}")
            return self.localization.resolve(MessageKey.NO_DAILYMOTION_ID)

        src = escape(f"{DAILYMOTION_EMBED_URL}{video_id}")

        if properties.dynamic_size:
            return (
                '<div style="position:relative;padding-bottom:56.25%;height:0;overflow:hidden;">'
                '<iframe style="width:100%;height:100%;position:absolute;left:0px;top:0px;overflow:hidden" '
                f'frameborder="0" type="text/html" src="{src}" width="100%" height="100%" '
                'allowfullscreen title="Dailymotion Video Player" allow="autoplay"></iframe>'
                '</div>'
            )

        return (
            f'<iframe src="{src}" width="{properties.width}" height="{properties.height}" '
            'frameborder="0" type="text/html" allowfullscreen title="Dailymotion Video Player"></iframe>'
        )

    def _build_file_markup(self, properties: WidgetProperties, url: str) -> str:
        """Build an HTML5 video element for a direct file URL"""
        extension = get_file_extension(url)
        if not extension:
            logger.debug(f"No file extension in {url!r}")
            return self.localization.resolve(MessageKey.NO_FILE_EXTENSION)

        anchor = "" if properties.play_from_beginning else f"#t={properties.starting_time}"
        source = f'<source src="{escape(url + anchor)}" type="video/{escape(extension)}">'

        if properties.dynamic_size:
            return f'<video style="width:100%;" controls>{source}</video>'

        return f'<video width="{properties.width}" height="{properties.height}" controls>{source}</video>'


def generate_markup(properties: Optional[WidgetProperties],
                    localization: Optional[LocalizationService] = None) -> str:
    """Generate widget markup with a one-off builder (English messages by default)"""
    builder = EmbedMarkupBuilder(localization or LocalizationService())
    return builder.generate_markup(properties)
