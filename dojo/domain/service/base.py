"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold no state of their own beyond their collaborators,
    so one instance can serve concurrent callers.
    """

    pass
