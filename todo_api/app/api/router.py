"""
Top‑level API router.

This router aggregates domain‑specific routers under a unified
prefix.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

router.include_router(todos.router, prefix="/todos", tags=["todos"])
