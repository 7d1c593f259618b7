# wst_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from wst_core.clients.api.views import ClienteViewSet
from wst_core.employees.api.views import EmployeeViewSet
from wst_core.iam.api.auth import CompleteSetupView, LoginView, LogoutView, MeView, SetPasswordView
from wst_core.iam.api.users import UserViewSet
from wst_core.positions.api.views import PositionViewSet
from wst_core.reports.api.views import ReportViewSet
from wst_core.sentinel.api.views import ActiveSessionsView, LoginHistoryView, MainCompanyViewSet, StatsView
from wst_core.shifts.api.views import ShiftViewSet

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False

# Tenant data
router.register(r"employees", EmployeeViewSet, basename="employees")
router.register(r"clientes", ClienteViewSet, basename="clientes")
router.register(r"positions", PositionViewSet, basename="positions")
router.register(r"shifts", ShiftViewSet, basename="shifts")
router.register(r"reports", ReportViewSet, basename="reports")
router.register(r"users", UserViewSet, basename="users")

# Sentinel zone
router.register(r"sentinelzone/main-companies", MainCompanyViewSet, basename="main-companies")

urlpatterns = [
    # 🔐 Auth
    path("auth/login", LoginView.as_view(), name="login"),
    path("auth/logout", LogoutView.as_view(), name="logout"),
    path("auth/me", MeView.as_view(), name="me"),
    path("auth/set-password", SetPasswordView.as_view(), name="set-password"),
    path("auth/complete-setup", CompleteSetupView.as_view(), name="complete-setup"),

    # Sentinel zone (non-ViewSet endpoints)
    path("sentinelzone/stats", StatsView.as_view(), name="sentinel-stats"),
    path("sentinelzone/active-sessions", ActiveSessionsView.as_view(), name="sentinel-active-sessions"),
    path("sentinelzone/login-history", LoginHistoryView.as_view(), name="sentinel-login-history"),
]

urlpatterns += router.urls
