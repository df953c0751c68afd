import math
from collections.abc import Sequence

from api.schemas.pagination import PaginationMeta


def paginate(items: Sequence, page: int, per_page: int) -> tuple[list, PaginationMeta]:
    total = len(items)
    total_pages = math.ceil(total / per_page) if total > 0 else 0

    start = (page - 1) * per_page
    page_items = items[start:start + per_page]

    return list(page_items), PaginationMeta(
        page=page, per_page=per_page, total=total, total_pages=total_pages
    )
