# app/adapters/inbound/api/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.endpoints import auth_endpoint, client_endpoint

api_router = APIRouter()

# Public routes
api_router.include_router(auth_endpoint.router, tags=["Auth"])

# Routes behind the bearer token gate
api_router.include_router(client_endpoint.router)
