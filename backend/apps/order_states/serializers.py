"""
Order status serializers.
Handles API output for the grids and the editable projections.
"""
from rest_framework import serializers


class OrderStateGridRowSerializer(serializers.Serializer):
    """Serializer for one row of the order statuses grid."""
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    color = serializers.CharField(read_only=True)
    send_email = serializers.BooleanField(read_only=True)
    delivery = serializers.BooleanField(read_only=True)
    invoice = serializers.BooleanField(read_only=True)
    template = serializers.CharField(read_only=True, allow_null=True)


class OrderReturnStateGridRowSerializer(serializers.Serializer):
    """Serializer for one row of the order return statuses grid."""
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    color = serializers.CharField(read_only=True)


class EditableOrderStateSerializer(serializers.Serializer):
    """Serializer for the editable order status projection."""
    order_state_id = serializers.IntegerField(read_only=True)
    names = serializers.DictField(child=serializers.CharField(allow_blank=True), read_only=True)
    templates = serializers.DictField(child=serializers.CharField(allow_blank=True), read_only=True)
    color = serializers.CharField(read_only=True)
    logable = serializers.BooleanField(read_only=True)
    invoice = serializers.BooleanField(read_only=True)
    hidden = serializers.BooleanField(read_only=True)
    send_email = serializers.BooleanField(read_only=True)
    pdf_invoice = serializers.BooleanField(read_only=True)
    pdf_delivery = serializers.BooleanField(read_only=True)
    shipped = serializers.BooleanField(read_only=True)
    paid = serializers.BooleanField(read_only=True)
    delivery = serializers.BooleanField(read_only=True)


class EditableOrderReturnStateSerializer(serializers.Serializer):
    """Serializer for the editable order return status projection."""
    order_return_state_id = serializers.IntegerField(read_only=True)
    names = serializers.DictField(child=serializers.CharField(allow_blank=True), read_only=True)
    color = serializers.CharField(read_only=True)
