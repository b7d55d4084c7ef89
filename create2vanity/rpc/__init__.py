"""JSON-RPC transport."""

from .server import RPCServer, RPCError
from .vanity_api import register_vanity_api

__all__ = ["RPCServer", "RPCError", "register_vanity_api"]
