# showroom/urls.py
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="compare:page", permanent=False),
         {"schema_name": "vehicle"}, name="home"),

    # Compare surfaces
    path("compare/", include("compare.urls")),
]
