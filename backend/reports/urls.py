"""
Reports app URL configuration.

  GET    /api/reports            → list
  POST   /api/reports            → create
  GET    /api/reports/{id}       → retrieve   ({id} = pk or report_id)
  DELETE /api/reports/{id}       → destroy (admin)
  GET    /api/reports/{id}/pdf   → document download
"""

from rest_framework.routers import DefaultRouter

from .views import ReportViewSet

router = DefaultRouter()
router.trailing_slash = "/?"
router.include_root_view = False
router.register(
    prefix=r"reports",
    viewset=ReportViewSet,
    basename="report",
)

urlpatterns = router.urls
