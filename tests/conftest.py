import pytest

from app import VideoEmbedApp
from embed_markup import EmbedMarkupBuilder
from localization import LocalizationService


@pytest.fixture
def localization():
    return LocalizationService()


@pytest.fixture
def builder(localization):
    return EmbedMarkupBuilder(localization)


@pytest.fixture
def client():
    video_embed_app = VideoEmbedApp()
    video_embed_app.app.config["TESTING"] = True
    return video_embed_app.app.test_client()
