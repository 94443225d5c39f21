from infrastructure.api.scoutbase_client import HttpScoutbaseApi

__all__ = [
    "HttpScoutbaseApi",
]
