"""Sweet URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.sweets.views import SweetViewSet

router = DefaultRouter(trailing_slash=True)
router.register("sweets", SweetViewSet, basename="sweet")

urlpatterns = router.urls
