"""Marker base for domain services."""


class Service:
    """Business rules over one or more repositories.

    Services never see HTTP; the application layer decides which service
    calls make up an operation.
    """
