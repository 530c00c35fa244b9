"""User API routes."""

from fastapi import APIRouter, Depends, Header, Query, Request, Response, status

from users_api.services import get_user_handler
from users_api.services.user_handler import HandlerResponse, UserResourceHandler

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


def to_response(result: HandlerResponse) -> Response:
    """Transmit a handler result as an HTTP response."""
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type=result.media_type,
    )


@router.get("")
@router.get("/")
async def list_users(
    page_number: str | None = Query(None, alias="pageNumber"),
    page_size: str | None = Query(None, alias="pageSize"),
    accept: str | None = Header(None),
    handler: UserResourceHandler = Depends(get_user_handler),
) -> Response:
    return to_response(handler.list_users(page_number, page_size, accept))


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    accept: str | None = Header(None),
    handler: UserResourceHandler = Depends(get_user_handler),
) -> Response:
    body = await request.body()
    return to_response(handler.create_user(body, accept))


@router.options("")
@router.options("/")
async def user_options(handler: UserResourceHandler = Depends(get_user_handler)) -> Response:
    return to_response(handler.options())


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    accept: str | None = Header(None),
    handler: UserResourceHandler = Depends(get_user_handler),
) -> Response:
    return to_response(handler.get_user(user_id, accept))


@router.head("/{user_id}")
async def head_user(user_id: str, handler: UserResourceHandler = Depends(get_user_handler)) -> Response:
    return to_response(handler.head_user(user_id))


@router.patch("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_user(
    user_id: str,
    request: Request,
    handler: UserResourceHandler = Depends(get_user_handler),
) -> Response:
    body = await request.body()
    return to_response(handler.patch_user(user_id, body))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, handler: UserResourceHandler = Depends(get_user_handler)) -> Response:
    return to_response(handler.delete_user(user_id))
