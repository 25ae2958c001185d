from .store import EditorStore
from .client import ApiError, PortfolioClient
from .session import EditorSession

__all__ = ["EditorStore", "ApiError", "PortfolioClient", "EditorSession"]
