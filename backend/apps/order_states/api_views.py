"""
Read-only API over the order status grids.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from common.permissions import HasModelPermission, IsActiveStaff
from apps.order_states.commands import GetOrderReturnStateForEditing, GetOrderStateForEditing
from apps.order_states.exceptions import OrderReturnStateException, OrderStateException
from apps.order_states.grids import SearchFilters, present_grid
from apps.order_states.permissions import READ_PERMISSION
from apps.order_states.serializers import (
    EditableOrderReturnStateSerializer,
    EditableOrderStateSerializer,
    OrderReturnStateGridRowSerializer,
    OrderStateGridRowSerializer,
)
from apps.order_states.services.error_messages import translate


class GridAPIView(APIView):
    """
    Presented grid; accepts the same `<grid id>-...` parameters as the
    listing page.
    """
    permission_classes = [IsAuthenticated, IsActiveStaff, HasModelPermission]
    required_permission = READ_PERMISSION
    grid_factory = None
    row_serializer_class = None

    def get(self, request):
        filters = SearchFilters.from_request(request.query_params, self.grid_factory.get_definition())
        grid = self.grid_factory.get_grid(filters)

        data = present_grid(grid)
        data['data']['records'] = self.row_serializer_class(grid.rows, many=True).data
        return Response(data)


@extend_schema(tags=['Order Statuses'])
class OrderStateGridAPIView(GridAPIView):
    row_serializer_class = OrderStateGridRowSerializer


@extend_schema(tags=['Order Return Statuses'])
class OrderReturnStateGridAPIView(GridAPIView):
    row_serializer_class = OrderReturnStateGridRowSerializer


@extend_schema(tags=['Order Statuses'], responses=EditableOrderStateSerializer)
class OrderStateDetailAPIView(APIView):
    """
    Editable order status projection.
    """
    permission_classes = [IsAuthenticated, IsActiveStaff, HasModelPermission]
    required_permission = READ_PERMISSION
    query_bus = None

    def get(self, request, order_state_id):
        try:
            editable = self.query_bus.handle(GetOrderStateForEditing(order_state_id))
        except OrderStateException as e:
            return Response({'error': translate(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(EditableOrderStateSerializer(editable).data)


@extend_schema(tags=['Order Return Statuses'], responses=EditableOrderReturnStateSerializer)
class OrderReturnStateDetailAPIView(APIView):
    """
    Editable order return status projection.
    """
    permission_classes = [IsAuthenticated, IsActiveStaff, HasModelPermission]
    required_permission = READ_PERMISSION
    query_bus = None

    def get(self, request, order_return_state_id):
        try:
            editable = self.query_bus.handle(GetOrderReturnStateForEditing(order_return_state_id))
        except OrderReturnStateException as e:
            return Response({'error': translate(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(EditableOrderReturnStateSerializer(editable).data)
