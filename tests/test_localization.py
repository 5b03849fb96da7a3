"""Unit tests for LocalizationService."""

from localization import DEFAULT_MESSAGES, LocalizationService, MessageKey


def test_resolves_default_messages():
    localization = LocalizationService()
    assert localization.resolve(MessageKey.NO_URL) == DEFAULT_MESSAGES[MessageKey.NO_URL]


def test_every_key_has_a_default():
    keys = [value for name, value in vars(MessageKey).items() if name.isupper()]
    assert len(keys) == 8
    assert all(DEFAULT_MESSAGES.get(key) for key in keys)


def test_overrides_take_precedence():
    localization = LocalizationService({MessageKey.NO_VIMEO_ID: "Keine Vimeo-ID gefunden."})
    assert localization.resolve(MessageKey.NO_VIMEO_ID) == "Keine Vimeo-ID gefunden."
    assert localization.resolve(MessageKey.NO_URL) == DEFAULT_MESSAGES[MessageKey.NO_URL]


def test_overrides_do_not_leak_into_defaults():
    LocalizationService({MessageKey.NO_URL: "changed"})
    assert LocalizationService().resolve(MessageKey.NO_URL) != "changed"


def test_unknown_key_resolves_to_itself():
    assert LocalizationService().resolve("videoembedwidget.message.other") == "videoembedwidget.message.other"
