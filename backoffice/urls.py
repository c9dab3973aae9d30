"""API routes for the back office."""

from django.urls import path
from rest_framework.routers import DefaultRouter

from .views.api import ExpenseViewSet, OrderListAPIView

router = DefaultRouter()
router.register(r"expenses", ExpenseViewSet, basename="expense")

urlpatterns = router.urls + [
    path("orders/", OrderListAPIView.as_view(), name="orders_api"),
]
