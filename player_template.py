"""
HTML template rendering for the widget preview page
"""
from markupsafe import escape


def render_widget_preview(markup: str, title: str) -> str:
    """
    Render a standalone page around generated widget markup

    Args:
        markup: Embed HTML (or message) from EmbedMarkupBuilder, inserted as-is
        title: Page title, escaped

    Returns:
        HTML string for the preview page
    """
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{escape(title)}</title>
        <style>
            body {{
                margin: 0;
                padding: 24px;
                font-family: sans-serif;
            }}
            .video-embed-widget {{
                max-width: 960px;
                margin: 0 auto;
            }}
        </style>
    </head>
    <body>
        <div class="video-embed-widget">
            {markup}
        </div>
    </body>
    </html>
    """
