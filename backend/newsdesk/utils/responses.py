from flask import jsonify


def success_response(data=None, message="OK", status_code=200):
    payload = {"success": True, "message": message}
    if data is not None:
        payload["data"] = data
    response = jsonify(payload)
    response.status_code = status_code
    return response


def paginate_args(page, limit, default_limit: int, max_limit: int) -> tuple[int, int]:
    try:
        page_int = max(int(page), 1)
    except (TypeError, ValueError):
        page_int = 1
    try:
        limit_int = min(max(int(limit), 1), max_limit)
    except (TypeError, ValueError):
        limit_int = default_limit
    return page_int, limit_int


def pagination_block(page: int, limit: int, total: int, total_key: str = "total_articles") -> dict:
    total_pages = (total + limit - 1) // limit if limit else 0
    return {
        "current_page": page,
        "total_pages": total_pages,
        total_key: int(total),
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }
