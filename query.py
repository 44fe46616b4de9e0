import math
from dataclasses import dataclass, field
from typing import Dict, List

import config


@dataclass
class QueryState:
    search_text: str = ""
    active_filters: Dict[str, str] = field(default_factory=dict)
    page: int = 1


@dataclass
class Page:
    items: List[dict]
    total_pages: int
    current_page: int
    total_count: int
    page_size: int

    @property
    def first_index(self):
        # 1-based, 0 when the view is empty
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_index(self):
        return self.first_index + len(self.items) - 1 if self.items else 0

    @property
    def has_prev(self):
        return self.current_page > 1

    @property
    def has_next(self):
        return self.current_page < self.total_pages


# --- PREDICATES ---
def is_sentinel(value):
    """'All', 'All Departments', 'All Roles'... mean no constraint."""
    if value is None:
        return True
    sentinel = config.FILTER_SENTINEL
    return value == sentinel or (isinstance(value, str) and value.startswith(sentinel + " "))


def _text(value):
    return "" if value is None else str(value)


def matches_search(record, search_text, searchable_fields):
    needle = (search_text or "").lower()
    if not needle:
        return True
    return any(needle in _text(record.get(f)).lower() for f in searchable_fields)


def matches_filters(record, active_filters):
    for field_name, value in active_filters.items():
        if is_sentinel(value):
            continue
        if record.get(field_name) != value:
            return False
    return True


def matches(record, query, searchable_fields):
    return (matches_search(record, query.search_text, searchable_fields)
            and matches_filters(record, query.active_filters))


def filter_view(collection, query, searchable_fields):
    return [r for r in collection if matches(r, query, searchable_fields)]


def filter_options(collection, field_name, sentinel=None):
    """Sentinel first, then distinct values in first-seen order."""
    options = [sentinel or config.FILTER_SENTINEL]
    for record in collection:
        value = record.get(field_name)
        if value not in (None, "") and value not in options:
            options.append(value)
    return options


# --- PAGINATION ---
def total_pages(count, page_size):
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(count / page_size))


def clamp_page(page, count, page_size):
    return min(max(1, int(page)), total_pages(count, page_size))


def paginate(view, page, page_size):
    pages = total_pages(len(view), page_size)
    current = clamp_page(page, len(view), page_size)
    start = (current - 1) * page_size
    return Page(
        items=list(view[start:start + page_size]),
        total_pages=pages,
        current_page=current,
        total_count=len(view),
        page_size=page_size,
    )
