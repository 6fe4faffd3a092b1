"""
Cases app URL configuration.

All routes are registered under the ``/api/cases`` prefix.

Route Hierarchy
---------------
  GET    /api/cases              → list (filters + page/limit)
  POST   /api/cases              → create
  GET    /api/cases/statistics   → status / priority counts
  GET    /api/cases/{id}         → retrieve   ({id} = pk or case_id)
  PATCH  /api/cases/{id}         → partial update
  DELETE /api/cases/{id}         → destroy (admin)
"""

from rest_framework.routers import DefaultRouter

from .views import CaseViewSet

router = DefaultRouter()
router.trailing_slash = "/?"
router.include_root_view = False
router.register(
    prefix=r"cases",
    viewset=CaseViewSet,
    basename="case",
)

urlpatterns = router.urls
