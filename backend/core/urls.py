"""
Core app URL configuration.

URL prefix (registered in ``backend/urls.py``)::

    path('api/dashboard/', include('core.urls'))

Endpoint summary
----------------
GET /api/dashboard/statistics         — case counts
GET /api/dashboard/recent-activity    — activity feed (``?limit=``)
GET /api/dashboard/case-distribution  — per-type counts and trends
GET /api/dashboard/recent-cases       — five newest cases
GET /api/dashboard/personnel-status   — officers with most active cases
"""

from django.urls import re_path

from . import views

app_name = "core"

urlpatterns = [
    re_path(r"^statistics/?$", views.DashboardStatisticsView.as_view(), name="dashboard-statistics"),
    re_path(r"^recent-activity/?$", views.RecentActivityView.as_view(), name="dashboard-recent-activity"),
    re_path(r"^case-distribution/?$", views.CaseDistributionView.as_view(), name="dashboard-case-distribution"),
    re_path(r"^recent-cases/?$", views.RecentCasesView.as_view(), name="dashboard-recent-cases"),
    re_path(r"^personnel-status/?$", views.PersonnelStatusView.as_view(), name="dashboard-personnel-status"),
]
