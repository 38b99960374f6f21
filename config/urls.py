"""URL configuration for the DeskMate project.

Routes the Django admin, the versioned REST API of each domain app and
the generated OpenAPI schema.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/desks/', include('apps.desks.urls')),
    path('api/v1/meeting-rooms/', include('apps.rooms.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
