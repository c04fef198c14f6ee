"""API route modules."""

from routes.carries_routes import router as carries_router
from routes.employees_routes import router as employees_router
from routes.health_routes import router as health_router
from routes.inbound_orders_routes import router as inbound_orders_router
from routes.localities_routes import router as localities_router
from routes.product_batches_routes import router as product_batches_router
from routes.product_records_routes import router as product_records_router
from routes.products_routes import router as products_router
from routes.sections_routes import router as sections_router
from routes.sellers_routes import router as sellers_router
from routes.warehouses_routes import router as warehouses_router

__all__ = [
    "carries_router",
    "employees_router",
    "health_router",
    "inbound_orders_router",
    "localities_router",
    "product_batches_router",
    "product_records_router",
    "products_router",
    "sections_router",
    "sellers_router",
    "warehouses_router",
]
