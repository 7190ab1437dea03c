"""Light Service - GraphQL API over a single in-memory light"""

__version__ = "1.0.0"
