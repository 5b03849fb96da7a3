"""
Localized message strings for the video embed widget
"""
from typing import Dict, Optional


class MessageKey:
    """Resource keys for every message the widget can show"""
    WIDGET_NAME = "videoembedwidget.name"
    WIDGET_DESCRIPTION = "videoembedwidget.description"
    SERVICE_NOT_FOUND = "videoembedwidget.message.servicenotfound"
    NO_URL = "videoembedwidget.message.nourl"
    NO_FILE_EXTENSION = "videoembedwidget.message.nofileextension"
    NO_YOUTUBE_ID = "videoembedwidget.message.noyoutubeid"
    NO_VIMEO_ID = "videoembedwidget.message.novimeoid"
    NO_DAILYMOTION_ID = "videoembedwidget.message.nodailymotionid"


# English strings, used for any key the caller does not override
DEFAULT_MESSAGES = {
    MessageKey.WIDGET_NAME: "Video embed",
    MessageKey.WIDGET_DESCRIPTION: "Embeds a video from YouTube, Vimeo, Dailymotion or a file URL.",
    MessageKey.SERVICE_NOT_FOUND: "The selected video service is not recognized.",
    MessageKey.NO_URL: "Please enter the URL of the video in the widget properties.",
    MessageKey.NO_FILE_EXTENSION: "The file extension could not be found in the video URL.",
    MessageKey.NO_YOUTUBE_ID: "No YouTube video ID could be found in the URL.",
    MessageKey.NO_VIMEO_ID: "No Vimeo video ID could be found in the URL.",
    MessageKey.NO_DAILYMOTION_ID: "No Dailymotion video ID could be found in the URL.",
}


class LocalizationService:
    def __init__(self, messages: Optional[Dict[str, str]] = None):
        """
        Initialize localization service

        Args:
            messages: Translated strings keyed by MessageKey, overriding the defaults
        """
        self.messages = dict(DEFAULT_MESSAGES)
        if messages:
            self.messages.update(messages)

    def resolve(self, key: str) -> str:
        """
        Look up the text for a message key

        Unknown keys resolve to the key itself so a missing
        translation still shows something an editor can act on.
        """
        return self.messages.get(key) or key
