"""
Template helpers for rendering presented grids.
"""
from django import template

register = template.Library()


@register.filter
def cell(record, column_id):
    """Value of one column in a grid record."""
    return record.get(column_id)


@register.simple_tag(takes_context=True)
def grid_page_url(context, grid, offset):
    params = context['request'].GET.copy()
    params[f"{grid['id']}-offset"] = offset
    params[f"{grid['id']}-limit"] = grid['pagination']['limit']
    return '?' + params.urlencode()


@register.simple_tag(takes_context=True)
def grid_sort_url(context, grid, column_id):
    """Query string sorting `grid` by one column; sorting twice flips the way."""
    sorting = grid['sorting']
    way = 'desc' if sorting['order_by'] == column_id and sorting['order_way'] == 'asc' else 'asc'
    params = context['request'].GET.copy()
    params[f"{grid['id']}-order_by"] = column_id
    params[f"{grid['id']}-sort_order"] = way
    params[f"{grid['id']}-offset"] = 0
    return '?' + params.urlencode()
