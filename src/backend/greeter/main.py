# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from common import __version__
from greeter.routes import hello_on_error, router


def create_app() -> FastAPI:
    """App factory to avoid import-time side effects in tests."""
    # Docs and schema routes are off so no path is special
    app = FastAPI(
        title="Greeter",
        version=__version__,
        description="Answers every HTTP request with a fixed plain-text greeting",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_exception_handler(StarletteHTTPException, hello_on_error)
    app.include_router(router)
    return app


app = create_app()
