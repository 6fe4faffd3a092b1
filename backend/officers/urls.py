"""
Officers app URL configuration.

  GET    /api/officers              → list
  POST   /api/officers              → create (admin)
  GET    /api/officers/statistics   → counts by status
  GET    /api/officers/{badge}      → retrieve
  PATCH  /api/officers/{badge}      → partial update (admin)
  DELETE /api/officers/{badge}      → destroy (admin)
"""

from rest_framework.routers import DefaultRouter

from .views import OfficerViewSet

router = DefaultRouter()
router.trailing_slash = "/?"
router.include_root_view = False
router.register(
    prefix=r"officers",
    viewset=OfficerViewSet,
    basename="officer",
)

urlpatterns = router.urls
