# compare/layout.py
import re
from dataclasses import dataclass

from django.conf import settings

NARROW = "narrow"
WIDE = "wide"
LAYOUT_CHOICES = [NARROW, WIDE]
SESSION_KEY = "compare_layout"

DEFAULT_LAYOUTS = {
    NARROW: {"window_size": 1, "max_selected": 3},
    WIDE: {"window_size": 3, "max_selected": 4},
}

_MOBILE_UA = re.compile(r"Mobi|Android|iPhone|iPod", re.IGNORECASE)


@dataclass(frozen=True)
class Layout:
    name: str
    window_size: int
    max_selected: int


def get_layout(name: str) -> Layout:
    layouts = getattr(settings, "COMPARE_LAYOUTS", DEFAULT_LAYOUTS)
    if name not in layouts:
        name = WIDE
    conf = {**DEFAULT_LAYOUTS.get(name, DEFAULT_LAYOUTS[WIDE]), **layouts.get(name, {})}
    return Layout(name, int(conf["window_size"]), int(conf["max_selected"]))


def layout_for_request(request) -> Layout:
    """
    ?layout=narrow|wide wins (and is remembered in the session),
    then the remembered choice, then a user-agent guess.
    """
    explicit = (request.GET.get("layout") or "").strip().lower()
    if explicit in LAYOUT_CHOICES:
        request.session[SESSION_KEY] = explicit
        return get_layout(explicit)

    remembered = request.session.get(SESSION_KEY)
    if remembered in LAYOUT_CHOICES:
        return get_layout(remembered)

    ua = request.headers.get("user-agent", "")
    return get_layout(NARROW if _MOBILE_UA.search(ua) else WIDE)
