"""API router registration."""

from typing import List

from fastapi import APIRouter

from . import system_routes, task_routes


def get_all_routers() -> List[APIRouter]:
    return [system_routes.router, task_routes.router]


__all__ = ["get_all_routers"]
