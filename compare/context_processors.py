# compare/context_processors.py
from catalog.schemas import VEHICLE

from .compare_session import get_ids, surface_key
from .layout import layout_for_request


def compare_meta(request):
    # navbar badge for the vehicle comparison tray
    ids = get_ids(request, surface_key(VEHICLE))
    return {
        "compare_ids": ids,
        "compare_count": len(ids),
        "compare_max": layout_for_request(request).max_selected,
    }
