"""
Grids listing order statuses and order return statuses.

A grid definition names the columns, a data factory turns search filters
into a sorted and filtered queryset, and a grid factory pages through it.
Filters travel in the query string, prefixed by the grid id, so both grids
of the listing page keep their own state.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode
from django.conf import settings
from django.db.models import OuterRef, Subquery
from django.shortcuts import redirect
from django.urls import reverse
from common.models import Language
from apps.order_states.models import (
    OrderReturnState,
    OrderReturnStateTranslation,
    OrderState,
    OrderStateTranslation,
)

ALLOWED_LIMITS = (10, 20, 50, 100, 300, 1000)
SORT_ORDERS = ('asc', 'desc')


@dataclass(frozen=True)
class Column:
    id: str
    name: str
    type: str = 'data'  # data | color | boolean | toggle
    sortable: bool = True
    filter: Optional[str] = None  # exact | icontains | boolean
    toggle_route: Optional[str] = None


@dataclass(frozen=True)
class GridDefinition:
    id: str
    name: str
    columns: Tuple[Column, ...]

    def get_column(self, column_id) -> Optional[Column]:
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    @property
    def filterable_columns(self) -> List[Column]:
        return [column for column in self.columns if column.filter]

    @property
    def sortable_column_ids(self) -> List[str]:
        return [column.id for column in self.columns if column.sortable]


class OrderStatesGridDefinitionFactory:
    GRID_ID = 'order_states'

    def get_definition(self) -> GridDefinition:
        return GridDefinition(
            id=self.GRID_ID,
            name='Statuses',
            columns=(
                Column('id', 'ID', filter='exact'),
                Column('name', 'Name', filter='icontains'),
                Column('color', 'Color', type='color', filter='icontains'),
                Column('send_email', 'Send email to customer', type='toggle', filter='boolean',
                       toggle_route='order_states:toggle_send_email'),
                Column('delivery', 'Delivery', type='toggle', filter='boolean',
                       toggle_route='order_states:toggle_delivery'),
                Column('invoice', 'Invoice', type='toggle', filter='boolean',
                       toggle_route='order_states:toggle_invoice'),
                Column('template', 'Email template', filter='icontains'),
            ),
        )


class OrderReturnStatesGridDefinitionFactory:
    GRID_ID = 'order_return_states'

    def get_definition(self) -> GridDefinition:
        return GridDefinition(
            id=self.GRID_ID,
            name='Merchandise return (RMA) statuses',
            columns=(
                Column('id', 'ID', filter='exact'),
                Column('name', 'Name', filter='icontains'),
                Column('color', 'Color', type='color', filter='icontains'),
            ),
        )


# ============================
# Search filters
# ============================

def _to_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class SearchFilters:
    filter_id: str
    limit: int = 50
    offset: int = 0
    order_by: str = 'id'
    sort_order: str = 'asc'
    filters: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, params, definition: GridDefinition) -> 'SearchFilters':
        """
        Read `<grid id>-<key>` parameters from a QueryDict.
        Unknown or malformed paging and sorting values fall back to defaults.
        """
        prefix = f'{definition.id}-'
        default_limit = getattr(settings, 'ORDER_STATES_GRID_DEFAULT_LIMIT', 50)

        limit = _to_int(params.get(f'{prefix}limit'), default_limit)
        if limit not in ALLOWED_LIMITS:
            limit = default_limit

        offset = max(_to_int(params.get(f'{prefix}offset'), 0), 0)

        order_by = params.get(f'{prefix}order_by', 'id')
        if order_by not in definition.sortable_column_ids:
            order_by = 'id'

        sort_order = (params.get(f'{prefix}sort_order') or 'asc').lower()
        if sort_order not in SORT_ORDERS:
            sort_order = 'asc'

        filters = {}
        for column in definition.filterable_columns:
            value = (params.get(f'{prefix}filter_{column.id}') or '').strip()
            if value:
                filters[column.id] = value

        return cls(
            filter_id=definition.id,
            limit=limit,
            offset=offset,
            order_by=order_by,
            sort_order=sort_order,
            filters=filters,
        )

    def to_query_params(self) -> Dict[str, Any]:
        prefix = f'{self.filter_id}-'
        params = {f'{prefix}filter_{key}': value for key, value in self.filters.items()}
        params.update({
            f'{prefix}limit': self.limit,
            f'{prefix}offset': self.offset,
            f'{prefix}order_by': self.order_by,
            f'{prefix}sort_order': self.sort_order,
        })
        return params


# ============================
# Data factories
# ============================

TRUE_VALUES = ('1', 'true', 'yes', 'on')


def apply_filters(queryset, definition: GridDefinition, filters: SearchFilters):
    for column_id, value in filters.filters.items():
        column = definition.get_column(column_id)
        if column is None:
            continue
        if column.filter == 'exact':
            queryset = queryset.filter(**{column_id: _to_int(value, -1)})
        elif column.filter == 'boolean':
            queryset = queryset.filter(**{column_id: value.lower() in TRUE_VALUES})
        else:
            queryset = queryset.filter(**{f'{column_id}__icontains': value})

    ordering = filters.order_by if filters.sort_order == 'asc' else f'-{filters.order_by}'
    return queryset.order_by(ordering, 'id')


class OrderStateGridDataFactory:

    def get_queryset(self, definition, filters):
        translations = OrderStateTranslation.objects.filter(
            order_state=OuterRef('pk'),
            language=Language.objects.default(),
        )
        queryset = OrderState.objects.filter(deleted=False).annotate(
            name=Subquery(translations.values('name')[:1]),
            template=Subquery(translations.values('template')[:1]),
        ).values('id', 'name', 'color', 'send_email', 'delivery', 'invoice', 'template')
        return apply_filters(queryset, definition, filters)


class OrderReturnStateGridDataFactory:

    def get_queryset(self, definition, filters):
        translations = OrderReturnStateTranslation.objects.filter(
            order_return_state=OuterRef('pk'),
            language=Language.objects.default(),
        )
        queryset = OrderReturnState.objects.annotate(
            name=Subquery(translations.values('name')[:1]),
        ).values('id', 'name', 'color')
        return apply_filters(queryset, definition, filters)


# ============================
# Grids
# ============================

@dataclass
class Grid:
    definition: GridDefinition
    rows: List[Dict[str, Any]]
    total: int
    filters: SearchFilters


class GridFactory:

    def __init__(self, definition_factory, data_factory):
        self.definition_factory = definition_factory
        self.data_factory = data_factory

    def get_definition(self) -> GridDefinition:
        return self.definition_factory.get_definition()

    def get_grid(self, filters: SearchFilters) -> Grid:
        definition = self.get_definition()
        queryset = self.data_factory.get_queryset(definition, filters)
        total = queryset.count()
        rows = list(queryset[filters.offset:filters.offset + filters.limit])
        return Grid(definition=definition, rows=rows, total=total, filters=filters)


def present_grid(grid: Grid) -> Dict[str, Any]:
    """Plain dict view of a grid, used by templates and the API."""
    filters = grid.filters
    pages = max((grid.total + filters.limit - 1) // filters.limit, 1)
    return {
        'id': grid.definition.id,
        'name': grid.definition.name,
        'columns': [
            {
                'id': column.id,
                'name': column.name,
                'type': column.type,
                'sortable': column.sortable,
                'filterable': bool(column.filter),
                'toggle_route': column.toggle_route,
            }
            for column in grid.definition.columns
        ],
        'data': {
            'records': grid.rows,
            'records_total': grid.total,
        },
        'pagination': {
            'offset': filters.offset,
            'limit': filters.limit,
            'page': filters.offset // filters.limit + 1,
            'pages': pages,
        },
        'sorting': {
            'order_by': filters.order_by,
            'order_way': filters.sort_order,
        },
        'filters': dict(filters.filters),
    }


def build_search_response(definition: GridDefinition, request, filter_id: str, redirect_route: str):
    """
    Redirect to the listing with the submitted filters of one grid encoded
    in the query string. Parameters of other grids are kept as they were.
    """
    prefix = f'{filter_id}-'
    params = {key: value for key, value in request.GET.items() if not key.startswith(prefix)}

    submitted = SearchFilters.from_request(request.POST, definition)
    for column_id, value in submitted.filters.items():
        params[f'{prefix}filter_{column_id}'] = value

    for key in ('limit', 'order_by', 'sort_order'):
        value = request.POST.get(f'{prefix}{key}')
        if value:
            params[f'{prefix}{key}'] = getattr(submitted, key)

    url = reverse(redirect_route)
    if params:
        url = f'{url}?{urlencode(params)}'
    return redirect(url)
