"""Clients for the workspace REST API."""

from .workspace import WorkspaceClient

__all__ = [
    "WorkspaceClient",
]
