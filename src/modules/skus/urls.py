"""SKU URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.skus.views import SkuViewSet

router = SimpleRouter(trailing_slash=True)
router.register("skus", SkuViewSet, basename="sku")

urlpatterns = router.urls
