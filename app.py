"""
A preview host for the video embed widget

Page builders hand the widget its properties and render whatever markup comes back.
This app plays that role over HTTP so the embeds can be checked in a browser.
"""
import os
import logging

from flask import Flask, request, jsonify

from embed_markup import EmbedMarkupBuilder
from localization import LocalizationService, MessageKey
from player_template import render_widget_preview
from widget_properties import (
    WidgetProperties,
    InvalidPropertiesException,
    show_dimensions,
    visible_fields,
)

logger = logging.getLogger(__name__)


class VideoEmbedApp:
    def __init__(self, localization: LocalizationService = None):
        # Init the Flask app
        self.app = Flask(__name__)

        # Init the markup builder with English messages unless told otherwise
        self.localization = localization or LocalizationService()
        self.markup_builder = EmbedMarkupBuilder(self.localization)

        # Register HTTP routes for rendering the widget
        self.register_routes()

    def register_routes(self):
        """Register HTTP routes for rendering the widget"""

        @self.app.errorhandler(InvalidPropertiesException)
        def handle_invalid_properties(error):
            """Reject properties the widget form would never produce"""
            logger.warning(f"Rejected widget properties: {error}")
            return str(error), 400

        @self.app.route("/embed")
        def serve_embed():
            """Serve the bare embed markup"""
            properties = WidgetProperties.from_form(request.args)
            markup = self.markup_builder.generate_markup(properties)
            return markup, 200, {"Content-Type": "text/html; charset=utf-8"}

        @self.app.route("/preview")
        def serve_preview():
            """Serve the embed inside a standalone HTML page"""
            properties = WidgetProperties.from_form(request.args)
            markup = self.markup_builder.generate_markup(properties)
            title = self.localization.resolve(MessageKey.WIDGET_NAME)
            return render_widget_preview(markup, title)

        @self.app.route("/properties")
        def serve_properties():
            """Serve the editing form state for the given properties"""
            properties = WidgetProperties.from_form(request.args)
            return jsonify({
                "properties": properties.to_dict(),
                "show_dimensions": show_dimensions(properties.service, properties.dynamic_size),
                "visible_fields": visible_fields(properties),
            })

    def start(self):
        """Start the preview server"""
        port = int(os.environ.get("PORT", 3000))
        logger.info(f"⚡️ Video embed preview is running on port {port}!")
        self.app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = VideoEmbedApp()
    app.start()
