import logging
import time

from fastapi import Request

access_logger = logging.getLogger("app.access")

LOG_FORMAT = "[%(levelname)s] %(asctime)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura o logger raiz da aplicação (uma vez só)"""
    root = logging.getLogger("app")
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


async def logging_middleware(request: Request, call_next):
    """Loga método, path, cliente e latência depois que o handler termina"""
    start = time.perf_counter()
    client = request.client.host if request.client else "-"
    try:
        response = await call_next(request)
    except Exception as e:
        latency_ms = (time.perf_counter() - start) * 1000
        access_logger.error(
            "%s %s %s failed in %.2fms: %s", request.method, request.url.path, client, latency_ms, e
        )
        raise
    latency_ms = (time.perf_counter() - start) * 1000
    access_logger.info("%s %s %s in %.2fms", request.method, request.url.path, client, latency_ms)
    return response
