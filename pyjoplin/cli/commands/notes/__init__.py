"""Note commands for the pyjoplin CLI."""

from . import create, delete, get, get_all, update

__all__ = ["create", "delete", "get", "get_all", "update"]
