"""FastAPI application, routers and middleware."""
