from __future__ import annotations

from fastapi import Request

from .services.topup import AllowListRegistry, ReferenceIdFactory


def get_registry(request: Request) -> AllowListRegistry:
    """Allow-list built once at startup and kept on the application state."""
    return request.app.state.registry


def get_reference_id_factory(request: Request) -> ReferenceIdFactory:
    return request.app.state.reference_id_factory
