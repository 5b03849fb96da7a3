"""
Properties of the video embed widget, as edited in the page builder
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, List, Mapping, Union


class VideoService(str, Enum):
    """Video sources the widget can embed"""
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    DAILYMOTION = "dailymotion"
    FILE = "file"


class InvalidPropertiesException(ValueError):
    """Raised when form values cannot be converted to widget properties"""
    pass


TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class WidgetProperties:
    """
    Configuration for a single render of the widget.

    `service` is kept as the raw token the host supplied so an
    unknown value can still reach the markup builder and be reported.
    """
    service: Union[VideoService, str] = VideoService.YOUTUBE
    url: str = ""
    dynamic_size: bool = True
    width: int = 560
    height: int = 315
    play_from_beginning: bool = True
    starting_time: int = 0

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "WidgetProperties":
        """
        Build properties from host form values

        Args:
            form: Field name to string value (e.g. Flask request.args).
                Missing fields take the widget defaults.

        Returns:
            WidgetProperties instance

        Raises:
            InvalidPropertiesException: if a boolean or integer field can't be parsed
        """
        defaults = cls()
        return cls(
            service=form.get("service", defaults.service),
            url=form.get("url", defaults.url),
            dynamic_size=_parse_bool(form, "dynamic_size", defaults.dynamic_size),
            width=_parse_int(form, "width", defaults.width, minimum=1),
            height=_parse_int(form, "height", defaults.height, minimum=1),
            play_from_beginning=_parse_bool(form, "play_from_beginning", defaults.play_from_beginning),
            starting_time=_parse_int(form, "starting_time", defaults.starting_time, minimum=0),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["service"] = _service_token(self.service)
        return data


def _parse_bool(form: Mapping[str, str], name: str, default: bool) -> bool:
    raw = form.get(name)
    if raw is None or raw == "":
        return default

    value = str(raw).strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InvalidPropertiesException(f"'{name}' must be true or false, got '{raw}'")


def _parse_int(form: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = form.get(name)
    if raw is None or raw == "":
        return default

    try:
        value = int(str(raw).strip())
    except ValueError:
        raise InvalidPropertiesException(f"'{name}' must be a whole number, got '{raw}'")

    if value < minimum:
        raise InvalidPropertiesException(f"'{name}' must be at least {minimum}, got {value}")
    return value


def _service_token(service: Union[VideoService, str]) -> str:
    return service.value if isinstance(service, VideoService) else service


def show_dimensions(service: Union[VideoService, str], dynamic_size: bool) -> bool:
    """Whether the width and height fields apply (YouTube is always fixed size)"""
    return _service_token(service) == VideoService.YOUTUBE.value or not dynamic_size


def visible_fields(properties: WidgetProperties) -> List[str]:
    """
    Names of the editing form fields the host should show

    Recompute whenever service, dynamic_size or play_from_beginning change.
    """
    service = _service_token(properties.service)
    fields = ["service", "url"]

    if service != VideoService.YOUTUBE.value:
        fields.append("dynamic_size")

    if show_dimensions(service, properties.dynamic_size):
        fields.extend(["width", "height"])

    # Dailymotion embeds don't support a start time
    if service != VideoService.DAILYMOTION.value:
        fields.append("play_from_beginning")
        if not properties.play_from_beginning:
            fields.append("starting_time")

    return fields
