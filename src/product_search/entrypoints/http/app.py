from fastapi import FastAPI

from product_search.entrypoints.http.error_responses import ERROR_RESPONSES
from product_search.entrypoints.http.exception_handlers import register_exception_handlers
from product_search.entrypoints.http.routes.health import router as health_router
from product_search.entrypoints.http.routes.products import router as products_router
from product_search.entrypoints.http.routes.search import router as search_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Product Search Lite API",
        description="""
        Product catalog search and benchmarking.

        ## Features
        - Linear, iterative binary and recursive binary search by product id
        - Comparison counts, elapsed time and speedup ratios per query
        - Substring search over name, category, brand and id
        - Worst-case scalability projections

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1", responses=ERROR_RESPONSES)
    app.include_router(search_router, prefix="/v1", responses=ERROR_RESPONSES)

    return app


app = build_app()
