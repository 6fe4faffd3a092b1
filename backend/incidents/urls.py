"""
Incidents app URL configuration.

  GET    /api/incidents              → list
  POST   /api/incidents              → create
  GET    /api/incidents/statistics   → counts
  GET    /api/incidents/{id}         → retrieve
  PATCH  /api/incidents/{id}         → partial update
  DELETE /api/incidents/{id}         → destroy (admin)
"""

from rest_framework.routers import DefaultRouter

from .views import IncidentViewSet

router = DefaultRouter()
router.trailing_slash = "/?"
router.include_root_view = False
router.register(
    prefix=r"incidents",
    viewset=IncidentViewSet,
    basename="incident",
)

urlpatterns = router.urls
