"""
Search service - sparse filters in, list of profiles out.
One request per explicit search; no paging, sorting or debouncing.
"""

import logging
from typing import Any, Dict, Mapping

import pydantic

from core.domain.constants import SEARCHABLE_ROLES
from core.domain.errors import ScoutbaseError
from core.domain.forms import SEARCH_FORMS
from core.domain.models import Role, SearchResult, profile_record
from core.interfaces.api import IScoutbaseApi

logger = logging.getLogger(__name__)


class SearchService:
    """Service for athlete/coach search"""

    def __init__(self, api: IScoutbaseApi):
        self.api = api

    @staticmethod
    def build_query(role: Role, filters: Mapping[str, Any]) -> Dict[str, str]:
        """Query parameters for the filled-in filters only"""
        if role not in SEARCHABLE_ROLES:
            raise ValueError(f"{role.value} profiles are not searchable")
        return SEARCH_FORMS[role].query_params(filters)

    async def search(self, role: Role, filters: Mapping[str, Any]) -> SearchResult:
        params = self.build_query(role, filters)
        logger.debug(f"Searching {role.value} with {params}")

        result = await self.api.search_profiles(role, params)
        if not result.ok:
            raise ScoutbaseError(result.error_message("Search failed. Please try again."))

        data = result.data
        if isinstance(data, dict):
            data = [data]
        items = []
        for item in data or []:
            try:
                items.append(profile_record(role, item))
            except pydantic.ValidationError as e:
                logger.warning(f"Dropping unreadable {role.value} record: {e}")
        return SearchResult(items=items)
