# compare/urls.py
from django.urls import include, path

from . import views

app_name = "compare"

surface_patterns = [
    path("", views.compare_page, name="page"),
    path("data.json", views.compare_data, name="data"),

    # Selection
    path("toggle/<str:entity_id>/", views.toggle, name="toggle"),
    path("clear/", views.clear, name="clear"),

    # Window
    path("next/", views.next_window, name="next"),
    path("prev/", views.prev_window, name="prev"),
    path("goto/<int:index>/", views.go_to, name="goto"),
    path("show/<str:entity_id>/", views.show_entity, name="show"),

    # View mode / sort
    path("mode/<str:mode>/", views.set_mode, name="mode"),
    path("sort/<str:sort_by>/", views.set_sort, name="sort"),
]

urlpatterns = [
    # /compare/vehicle/...
    path("<slug:schema_name>/", include(surface_patterns)),
    # /compare/grade/<model>/...
    path("<slug:schema_name>/<slug:model>/", include(surface_patterns)),
]
