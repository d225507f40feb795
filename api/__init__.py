"""HTTP controller layer: FastAPI routers over the user service."""
