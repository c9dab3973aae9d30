from rest_framework import serializers


class OrderSummarySerializer(serializers.Serializer):
    """Expose the order fields shown on the dashboard grid."""

    id = serializers.CharField()
    customer_name = serializers.CharField(allow_null=True)
    total_amount = serializers.FloatField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()


class ExpenseSerializer(serializers.Serializer):
    """Serialize an expense row including its readable account name."""

    id = serializers.CharField()
    description = serializers.CharField()
    amount = serializers.FloatField()
    account = serializers.CharField()
    account_label = serializers.CharField(read_only=True)
    vendedor_id = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()
