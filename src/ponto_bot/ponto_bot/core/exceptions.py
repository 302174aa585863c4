class DomainError(Exception):
    """Base exception for the bot's business and collaborator failures."""


class StoreError(DomainError):
    """Raised when the punch event store cannot be read or written."""