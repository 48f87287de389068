"""Dependency injection containers."""

from econdash.infrastructure.containers.container import (
    Container,
    close_container,
    get_container,
    reset_container,
    set_container,
)

__all__ = ["Container", "close_container", "get_container", "reset_container", "set_container"]
