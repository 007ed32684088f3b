import logging
from datetime import date, timedelta
from typing import Any

import httpx

from .config import MenuSettings, get_settings
from .exceptions import UpstreamRejected, UpstreamUnavailable
from .extract import extract_menus_by_date
from .models import ScheduleDay
from .schedule import days_to_generate, select_days
from .utils import format_api_params

logger = logging.getLogger("titan-menu")


def _error_description(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error_description")
    return None


class TitanSchoolsClient:
    """A _very_ lightweight client for the TitanSchools API."""

    def __init__(self, settings: MenuSettings | None = None, transport: httpx.BaseTransport | None = None):
        """
        Args:
            settings: Menu settings; defaults to the cached environment settings
            transport: Optional httpx transport, mostly useful for tests

        Raises:
            ConfigurationError: If building_id or district_id is missing
        """
        self.settings = settings or get_settings()
        self.settings.require_identifiers()

        self.debug = self.settings.debug
        if self.debug:
            logger.setLevel(logging.DEBUG)
        self.request_params = {
            "buildingId": self.settings.building_id,
            "districtId": self.settings.district_id,
        }
        self.number_of_days_to_display = self.settings.number_of_days_to_display
        self.buffer_days = self.settings.buffer_days
        self.recipe_categories_to_include = list(self.settings.recipe_categories_to_include)
        self.format_options = self.settings.format_options()

        event_hooks = {"request": [self._log_request]} if self.debug else {}
        self.client = httpx.Client(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            transport=transport,
            event_hooks=event_hooks,
        )

    def __enter__(self) -> "TitanSchoolsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    @staticmethod
    def _log_request(request: httpx.Request) -> None:
        logger.debug(
            {
                "message": "Sending API request",
                "url": request.url.path,
                "params": dict(request.url.params),
            }
        )

    def _handle_request(self, method: str, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            UpstreamUnavailable: On a 500-level response
            UpstreamRejected: On a 400-level response
            httpx.HTTPError: On any other transport failure
        """
        try:
            response = self.client.request(method, path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            description = _error_description(e.response)
            logger.error({"message": "TitanSchools API request failed", "status": status_code, "error": description})
            if status_code >= 500:
                raise UpstreamUnavailable(status_code, description) from e
            if status_code >= 400:
                raise UpstreamRejected(status_code, description) from e
            raise

        try:
            return response.json()
        except ValueError as e:
            # JSONDecodeError or UnicodeDecodeError for a body that is not text
            logger.warning({"message": "TitanSchools API response was not valid JSON", "error": str(e)})
            return None

    def fetch_menu(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        today: date | None = None,
    ) -> list[ScheduleDay]:
        """Fetch the menu from the TitanSchools API and arrange it by day.

        Args:
            start_date: First day to request; defaults to today
            end_date: Last day to request; defaults to the end of the candidate window
            today: The day the schedule starts on; defaults to the current date

        Returns:
            Up to number_of_days_to_display days, for example::

                [
                  ScheduleDay(date="9-6-2021", label="Today"),
                  ScheduleDay(date="9-7-2021", label="Tomorrow",
                              breakfast="Scrambled Eggs with Apple and Juice.",
                              lunch="Chicken Sandwich with Beans and Pears."),
                ]

        Raises:
            UpstreamUnavailable: If the API responds with a 500-level status
            UpstreamRejected: If the API responds with a 400-level status
        """
        today = today or date.today()
        start_date = start_date or today
        if end_date is None:
            end_date = start_date + timedelta(
                days=days_to_generate(self.number_of_days_to_display, self.buffer_days) - 1
            )

        params = format_api_params({**self.request_params, "startDate": start_date, "endDate": end_date})
        if self.debug:
            logger.debug(
                {
                    "message": f"Using {params['startDate']} as startDate, {params['endDate']} as endDate",
                }
            )

        payload = self._handle_request("GET", "FamilyMenu", params=params)
        return self.process_data(payload, today=today)

    def process_data(self, payload: Any, today: date | None = None) -> list[ScheduleDay]:
        """Run a decoded FamilyMenu response through extraction and day selection."""
        menus = extract_menus_by_date(
            payload,
            categories_to_include=self.recipe_categories_to_include,
            options=self.format_options,
            debug=self.debug,
        )
        upcoming = select_days(
            self.number_of_days_to_display,
            self.buffer_days,
            menus,
            start=today,
            debug=self.debug,
        )

        logger.info(
            {
                "message": "School meal info from titanschools API",
                "days": [day.to_dict() for day in upcoming],
            }
        )
        return upcoming
