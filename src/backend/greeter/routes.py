# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
"""Catch-all route answering every request with the same plain-text body."""

from fastapi import APIRouter, Request, Response

STATUS_CODE = 200
BODY = b"Hello!"
HEADERS = {"Content-Type": "text/plain"}

# HEAD is added by Starlette for GET routes
METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter()


def hello_response() -> Response:
    # Explicit header instead of media_type, which would append a charset
    return Response(content=BODY, status_code=STATUS_CODE, headers=HEADERS)


@router.api_route("/{path:path}", methods=METHODS, include_in_schema=False)
async def hello() -> Response:
    return hello_response()


async def hello_on_error(request: Request, exc: Exception) -> Response:
    """Answer framework-level rejections (e.g. unknown methods) the same way."""
    return hello_response()
