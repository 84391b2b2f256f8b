"""HTTP API - FastAPI app, routes, dependencies and error mapping."""
