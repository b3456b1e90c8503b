"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the rules that touch more than one record, such as both
    halves of a follow or a project together with its commenters.
    Repositories are injected through ``__init__``.
    """
