from django.urls import path

from .views.dashboard import dashboard, dashboard_orders
from .views.expenses import ExpensesView, expense_delete

urlpatterns = [
    path("dashboard/", dashboard, name="dashboard"),
    path("dashboard/orders/", dashboard_orders, name="dashboard-orders"),
    path("gastos/", ExpensesView.as_view(), name="expenses"),
    path("gastos/<str:pk>/delete/", expense_delete, name="expense_delete"),
]
