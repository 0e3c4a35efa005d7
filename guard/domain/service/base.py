"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules and talk to repositories and
    external capabilities through the interfaces declared in this package.
    """

    pass
