from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from newsdesk.schemas.article_schemas import (
    ArticleCreateSchema,
    ArticleUpdateSchema,
    ArticleListQuerySchema,
    ArticleSearchQuerySchema,
)
from newsdesk.services import article_service
from newsdesk.utils.responses import success_response
from newsdesk.utils.security import current_user_id, is_staff, require_roles

bp = Blueprint("article_routes", __name__)

article_create_schema = ArticleCreateSchema()
article_update_schema = ArticleUpdateSchema()
article_list_query_schema = ArticleListQuerySchema()
article_search_query_schema = ArticleSearchQuerySchema()

WRITER_ROLES = ("AUTHOR", "EDITOR", "ADMIN")


@bp.get("")
@jwt_required(optional=True)
def list_articles():
    """
    Public listing. Anonymous readers only get published articles;
    editors and admins see every status.
    """
    filters = article_list_query_schema.load(request.args)
    data = article_service.list_articles(filters, staff=is_staff())
    return success_response(data=data)


@bp.get("/featured/list")
def featured():
    data = article_service.featured_articles(limit=request.args.get("limit", 5))
    return success_response(data={"articles": data})


@bp.get("/breaking/list")
def breaking():
    data = article_service.breaking_articles(limit=request.args.get("limit", 10))
    return success_response(data={"articles": data})


@bp.get("/trending/list")
def trending():
    data = article_service.trending_articles(limit=request.args.get("limit", 5))
    return success_response(data={"articles": data})


@bp.get("/most-read/list")
def most_read():
    data = article_service.most_read_articles(limit=request.args.get("limit", 5))
    return success_response(data={"articles": data})


@bp.get("/sidebar/list")
def sidebar():
    return success_response(data=article_service.sidebar())


@bp.get("/search")
def search():
    args = article_search_query_schema.load(request.args)
    data = article_service.search_articles(
        args["q"],
        page=args.get("page", 1),
        limit=args.get("limit", 20),
    )
    return success_response(data=data)


@bp.get("/<string:slug>")
@jwt_required(optional=True)
def get_article(slug: str):
    data = article_service.get_article_by_slug(slug, staff=is_staff())
    return success_response(data={"article": data})


@bp.post("")
@jwt_required()
def create_article():
    require_roles(*WRITER_ROLES)
    data = article_create_schema.load(request.json or {})
    article = article_service.create_article(data, user_id=current_user_id())
    return success_response(
        data={"article": article},
        message="Article created successfully",
        status_code=201,
    )


@bp.put("/<int:article_id>")
@jwt_required()
def update_article(article_id: int):
    role = require_roles(*WRITER_ROLES)
    data = article_update_schema.load(request.json or {})
    article = article_service.update_article(article_id, data, user_id=current_user_id(), role=role)
    return success_response(data={"article": article}, message="Article updated successfully")


@bp.delete("/<int:article_id>")
@jwt_required()
def delete_article(article_id: int):
    require_roles("EDITOR", "ADMIN")
    article_service.delete_article(article_id)
    return success_response(message="Article deleted successfully")
