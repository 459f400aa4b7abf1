"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold rules that span several entities, such as access
    gating, the vote ledger and the question view aggregation.
    """

    pass
