# compare/views.py
import logging

from django.conf import settings
from django.contrib import messages
from django.http import Http404, HttpResponseRedirect, JsonResponse
from django.shortcuts import render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext as _
from django.views.decorators.http import require_GET, require_POST

from catalog.providers import catalog_for, grade_models
from catalog.schemas import GRADE

from . import compare_session
from . import selection as sel
from .diff import differing_labels, has_difference
from .filters import MODE_CHOICES
from .formatting import format_value, money
from .layout import layout_for_request
from .schema import registry
from .signals import notifier_for
from .sorting import SORT_CHOICES
from .state import ComparisonEngine

logger = logging.getLogger(__name__)

DEFAULT_SURFACE = {"min_selected": 0, "seed_from_catalog": False}


# ---- helpers ----
def _surface_conf(schema_name):
    surfaces = getattr(settings, "COMPARE_SURFACES", {})
    return {**DEFAULT_SURFACE, **surfaces.get(schema_name, {})}


def _open_surface(request, schema_name, model=None):
    """Build the engine for a surface and load its state from the session."""
    if schema_name not in registry:
        raise Http404(_("Unknown comparison"))
    catalog = catalog_for(schema_name, model)
    if catalog is None:
        raise Http404(_("Nothing to compare here"))

    key = compare_session.surface_key(schema_name, model)
    layout = layout_for_request(request)
    conf = _surface_conf(schema_name)
    engine = ComparisonEngine(
        catalog,
        registry.get(schema_name),
        max_selected=layout.max_selected,
        min_selected=int(conf["min_selected"]),
        window_size=layout.window_size,
        on_selection_changed=notifier_for(key),
    )

    state = compare_session.load_state(request, key, engine)
    if key not in request.session and conf["seed_from_catalog"]:
        state = engine.set_from_external(state, catalog.ids())
    return engine, key, state


def _url_kwargs(schema_name, model):
    kwargs = {"schema_name": schema_name}
    if model:
        kwargs["model"] = model
    return kwargs


def _section_filter(request, schema):
    # ?section=Performance jumps the table to the named sections
    titles = request.GET.getlist("section")
    return schema.only_sections(titles) if titles else schema


def _payload(request, engine, state, key, outcome=None):
    visible = engine.visible_entities(state)
    schema = _section_filter(request, engine.filtered_schema(state))
    sections = []
    for section in schema.sections:
        rows = []
        for field in section.fields:
            rows.append({
                "label": field.label,
                "highlight": field.highlight,
                "differs": has_difference(field, visible),
                "values": [format_value(field, field.value_for(e)) for e in visible],
            })
        sections.append({"title": section.title, "rows": rows})

    return {
        "ok": True,
        "surface": key,
        "outcome": outcome,
        "selection": list(engine.current_selection(state)),
        "count": len(state.selection),
        "max": state.selection.max_selected,
        "mode": state.view.mode,
        "sort": state.view.sort_by,
        "offset": state.view.window_offset,
        "window_size": state.view.window_size,
        "can_prev": engine.can_go_prev(state),
        "can_next": engine.can_go_next(state),
        "position": engine.position(state),
        "visible": [
            {"id": e.id, "name": e.name, "price": float(e.price), "price_display": money(e.price)}
            for e in visible
        ],
        "sections": sections,
        "differing": differing_labels(engine.schema, visible),
    }


def _is_ajax(request):
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def _back(request, schema_name, model):
    next_url = (
        request.GET.get("next")
        or request.POST.get("next")
        or request.META.get("HTTP_REFERER")
    )
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return HttpResponseRedirect(next_url)
    return HttpResponseRedirect(reverse("compare:page", kwargs=_url_kwargs(schema_name, model)))


def _commit(request, engine, key, state, schema_name, model, outcome=None):
    compare_session.save_state(request, key, state)
    if _is_ajax(request):
        return JsonResponse(_payload(request, engine, state, key, outcome))
    return _back(request, schema_name, model)


# ---- pages ----
@require_GET
def compare_page(request, schema_name, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    compare_session.save_state(request, key, state)
    kwargs = _url_kwargs(schema_name, model)
    ctx = {
        "surface": key,
        "schema_name": schema_name,
        "model": model,
        "items": [
            {
                "entity": e,
                "selected": e.id in state.selection,
                "toggle_url": reverse("compare:toggle", kwargs={**kwargs, "entity_id": e.id}),
            }
            for e in engine.catalog.all()
        ],
        "urls": {
            "clear": reverse("compare:clear", kwargs=kwargs),
            "next": reverse("compare:next", kwargs=kwargs),
            "prev": reverse("compare:prev", kwargs=kwargs),
            "modes": [(m, reverse("compare:mode", kwargs={**kwargs, "mode": m})) for m in MODE_CHOICES],
            "sorts": [(s, reverse("compare:sort", kwargs={**kwargs, "sort_by": s})) for s in SORT_CHOICES],
        },
        "state": state,
        "visible": engine.visible_entities(state),
        "schema": _section_filter(request, engine.filtered_schema(state)),
        "grade_models": grade_models() if schema_name == GRADE else [],
        "can_prev": engine.can_go_prev(state),
        "can_next": engine.can_go_next(state),
        "position": engine.position(state),
    }
    return render(request, "compare/compare_page.html", ctx)


@require_GET
def compare_data(request, schema_name, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return JsonResponse(_payload(request, engine, state, key))


# ---- selection ----
@require_POST
def toggle(request, schema_name, entity_id, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    state, outcome = engine.toggle(state, entity_id)

    if outcome == sel.LIMIT_REACHED:
        limit = state.selection.max_selected
        if _is_ajax(request):
            return JsonResponse({"ok": False, "error": f"max_{limit}", "outcome": outcome}, status=400)
        messages.warning(request, _("You can compare up to %(n)d at a time.") % {"n": limit})
        return _back(request, schema_name, model)

    if outcome == sel.MINIMUM_REACHED:
        return _minimum_reached(request, state, schema_name, model)

    if outcome == sel.UNKNOWN_ID:
        logger.info("ignored toggle of unknown id %r on %s", entity_id, key)

    return _commit(request, engine, key, state, schema_name, model, outcome)


def _minimum_reached(request, state, schema_name, model):
    floor = state.selection.min_selected
    if _is_ajax(request):
        return JsonResponse(
            {"ok": False, "error": f"min_{floor}", "outcome": sel.MINIMUM_REACHED}, status=400
        )
    messages.info(request, _("Keep at least %(n)d selected.") % {"n": floor})
    return _back(request, schema_name, model)


@require_POST
def clear(request, schema_name, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    if _surface_conf(schema_name)["seed_from_catalog"]:
        # back to the opening selection rather than an empty table
        state = engine.set_from_external(engine.clear_all(state), engine.catalog.ids())
    elif state.selection.min_selected:
        return _minimum_reached(request, state, schema_name, model)
    else:
        state = engine.clear_all(state)
    return _commit(request, engine, key, state, schema_name, model)


# ---- window ----
@require_POST
def next_window(request, schema_name, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return _commit(request, engine, key, engine.next(state), schema_name, model)


@require_POST
def prev_window(request, schema_name, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return _commit(request, engine, key, engine.prev(state), schema_name, model)


@require_POST
def go_to(request, schema_name, index, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return _commit(request, engine, key, engine.go_to(state, index), schema_name, model)


@require_POST
def show_entity(request, schema_name, entity_id, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return _commit(request, engine, key, engine.go_to_entity(state, entity_id), schema_name, model)


# ---- view mode / sort ----
@require_POST
def set_mode(request, schema_name, mode, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return _commit(request, engine, key, engine.set_mode(state, mode), schema_name, model)


@require_POST
def set_sort(request, schema_name, sort_by, model=None):
    engine, key, state = _open_surface(request, schema_name, model)
    return _commit(request, engine, key, engine.set_sort(state, sort_by), schema_name, model)
