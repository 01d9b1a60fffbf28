"""Base service class for domain services."""


class Service:
    """Base class for the catalog and registry services.

    Services own the rules that span repositories: reference checks between
    posts, categories and tags, name uniqueness and derived fields.
    """
