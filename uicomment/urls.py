"""
URL configuration for uicomment project.

Comment API under /api/, health check at /api/health, Django admin at /admin/.
"""
from django.contrib import admin
from django.urls import path, include
from api.views import health_check

urlpatterns = [
    path('admin/', admin.site.urls),

    # API Routes
    path('api/', include('api.routers')),

    # Health check
    path('api/health', health_check, name='health'),
]
