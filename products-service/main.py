import sys
import time
import uuid
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from config import HOST, LOG_LEVEL, PORT, SERVICE_NAME, SERVICE_VERSION
from errors import ProductNotFoundError, ProductServiceError, ProductValidationError
from models import Product
from payload import parse_product, read_bounded_body
from schemas import ProductCreate, ProductResponse, ProductUpdate
from store import ProductStore

# Config logging JSON, niveau filtré par LOG_LEVEL
logger.remove()
logger.add(
    sink=sys.stderr,
    format="{time:YYYY-MM-DDTHH:mm:ss.SSSZ} | {level} | {message} | {extra}",
    level=LOG_LEVEL,
    serialize=True,
)

# Prometheus metrics
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["service", "method", "endpoint"]
)
ERROR_COUNT = Counter(
    "http_errors_total",
    "Total HTTP errors",
    ["service", "endpoint", "error_type"]
)


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def _reject(error: ProductServiceError, endpoint: str) -> HTTPException:
    """Traduit une erreur métier en réponse client (le store n'a pas été touché)"""
    ERROR_COUNT.labels(service=SERVICE_NAME, endpoint=endpoint, error_type=error.error_type).inc()
    if isinstance(error, ProductNotFoundError):
        logger.warning(f"Product {error.product_id} not found")
        return HTTPException(status_code=404, detail=error.message)
    logger.warning(f"Rejected payload: {error.message}")
    return HTTPException(status_code=400, detail=error.message)


def _route_template(request: Request) -> str:
    # Label borné: le template de la route, jamais le chemin brut
    route = request.scope.get("route")
    return route.path if route is not None else "unmatched"


async def log_requests(request: Request, call_next):
    # Generate or propagate correlation ID (trace-id)
    trace_id = request.headers.get("X-Trace-ID", str(uuid.uuid4()))
    start_time = time.time()

    with logger.contextualize(trace_id=trace_id, service=SERVICE_NAME):
        logger.bind(method=request.method, url=str(request.url)).info(
            f"Request: {request.method} {request.url.path}"
        )

        response = await call_next(request)

        latency = time.time() - start_time
        endpoint = _route_template(request)
        REQUEST_COUNT.labels(
            service=SERVICE_NAME,
            method=request.method,
            endpoint=endpoint,
            status=response.status_code
        ).inc()
        REQUEST_LATENCY.labels(
            service=SERVICE_NAME,
            method=request.method,
            endpoint=endpoint
        ).observe(latency)

        logger.bind(status=response.status_code, latency=latency).info(
            f"Response status: {response.status_code}"
        )

        response.headers["X-Trace-ID"] = trace_id
        return response


async def log_clients(request: Request, call_next):
    client = request.client.host if request.client else "-"
    user_agent = request.headers.get("User-Agent", "-")
    logger.bind(client=client, user_agent=user_agent).info(f"{client} {user_agent}")
    return await call_next(request)


async def add_version_header(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Version"] = SERVICE_VERSION
    return response


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    app = FastAPI(title="Products Service", version=SERVICE_VERSION)
    app.state.store = store if store is not None else ProductStore.seeded()

    # Le dernier middleware ajouté est le plus externe: X-Version couvre aussi les réponses CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.middleware("http")(log_clients)
    app.middleware("http")(add_version_header)

    @app.api_route("/health", methods=["GET", "HEAD"])
    async def health():
        """Health check endpoint (GET et HEAD)"""
        return {"status": "ok"}

    @app.get("/metrics")
    async def metrics():
        """Endpoint /metrics compatible Prometheus"""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/", response_model=List[ProductResponse])
    async def get_products(store: ProductStore = Depends(get_store)):
        logger.info("Fetching all products")
        return store.list()

    @app.post("/", response_model=ProductResponse)
    async def add_product(request: Request, store: ProductStore = Depends(get_store)):
        # Body lu et parsé avant de prendre le verrou du store
        try:
            payload = parse_product(await read_bounded_body(request), ProductCreate)
        except ProductValidationError as e:
            raise _reject(e, "/")

        product = store.create(
            name=payload.name,
            price=payload.price,
            description=payload.description,
            image=payload.image,
        )
        logger.info(f"Product created with ID {product.id}: {product.name}")
        return product

    @app.put("/", response_model=ProductResponse)
    async def update_product(request: Request, store: ProductStore = Depends(get_store)):
        try:
            payload = parse_product(await read_bounded_body(request), ProductUpdate)
            product = store.update(Product(**payload.model_dump()))
        except ProductServiceError as e:
            raise _reject(e, "/")

        logger.info(f"Product {product.id} updated")
        return product

    @app.get("/{product_id}", response_model=ProductResponse)
    async def get_product(product_id: int, store: ProductStore = Depends(get_store)):
        logger.info(f"Fetching product {product_id}")
        try:
            return store.get(product_id)
        except ProductNotFoundError as e:
            raise _reject(e, "/{product_id}")

    @app.delete("/{product_id}")
    async def delete_product(product_id: int, store: ProductStore = Depends(get_store)):
        try:
            store.delete(product_id)
        except ProductNotFoundError as e:
            raise _reject(e, "/{product_id}")

        logger.info(f"Product {product_id} deleted")
        return Response(status_code=200)

    return app


app = create_app()


def run():
    print(f"Listening on http://{HOST}:{PORT}")
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
