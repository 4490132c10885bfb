"""reflink - request-scoped reference linking for rendered documents."""

__version__ = "0.1.0"
