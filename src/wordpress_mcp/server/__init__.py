from .server import WordPressMCPServer, main

__all__ = ["WordPressMCPServer", "main"]
