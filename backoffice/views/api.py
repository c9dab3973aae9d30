from rest_framework import permissions, status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from ..exceptions import QueryFailure
from ..filtering import parse_status
from ..serializers import ExpenseSerializer, OrderSummarySerializer
from ..services import expense_service, order_service
from ..services.repositories import ExpenseRepository
from ..services.session import get_session_user


class OrderListAPIView(APIView):
    """Orders for one status filter plus per-status counts.

    Query params:
        status: ``all`` (or absent) or one of the order statuses.
    """

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        status_filter = parse_status(request.query_params)
        result = order_service.list_orders(status_filter)
        if result.error is not None:
            raise QueryFailure(result.error)
        return Response(
            {
                "status": status_filter,
                "orders": OrderSummarySerializer(result.orders, many=True).data,
                "counts": result.counts,
            }
        )


class ExpenseViewSet(viewsets.ViewSet):
    """List, record and delete company expenses."""

    permission_classes = [permissions.IsAuthenticated]

    def list(self, request):
        expenses = ExpenseRepository().recent(expense_service.RECENT_LIMIT)
        return Response(ExpenseSerializer(expenses, many=True).data)

    def create(self, request):
        expense = expense_service.create_expense(
            get_session_user(request),
            request.data.get("description"),
            request.data.get("amount"),
            request.data.get("account"),
        )
        data = ExpenseSerializer(expense).data if expense is not None else {}
        return Response(data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        ExpenseRepository().delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
