class DomainError(Exception):
    """
    Base class for every error raised by the studio.
    Subclasses map to one failure category each; none of them is retried.
    """
    pass
