"""
WebSocket Package

Socket.IO input handlers and the Socket.IO output sink.
"""

from .handlers import register_websocket_handlers
from .sink import MATCH_ROOM, SocketIOSink

__all__ = ['register_websocket_handlers', 'SocketIOSink', 'MATCH_ROOM']
