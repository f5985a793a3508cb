from .ipc import IpcBridge, IpcError

__all__ = ["IpcBridge", "IpcError"]
