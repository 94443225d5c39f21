from core.interfaces.api import IScoutbaseApi

__all__ = [
    "IScoutbaseApi",
]
