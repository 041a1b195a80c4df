"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span a repository call:
    validation, not-found handling and logging.
    """

    pass
