"""Infrastructure providers."""

# Import bases
from .chat import ChatProvider
from .mail import EmailProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .chat import ProdChatProvider  # noqa: F401
from .mail import ProdEmailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ChatProvider",
    "EmailProvider",
    "PersistenceProvider",
    "ProdChatProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
