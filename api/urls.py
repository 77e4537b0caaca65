from django.urls import path

from . import views

urlpatterns = [
    path("properties", views.list_properties, name="properties"),
    path("dashboard", views.dashboard, name="dashboard"),
]
