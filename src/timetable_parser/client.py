"""Client of the remote schedule catalog."""

import logging
from dataclasses import dataclass
from urllib.parse import quote

import requests

from .models import Group

logger = logging.getLogger(__name__)


@dataclass
class SubmitResponse:
    """Answer of the catalog to a submitted group.

    Attributes:
        successful: True if the catalog accepted the group
        error: Error code or short description
        message: Human-readable message
    """

    successful: bool
    error: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "SubmitResponse":
        return cls(
            successful=bool(data.get("successful", False)),
            error=str(data.get("error") or ""),
            message=str(data.get("message") or ""),
        )


class CatalogClient:
    """Submits parsed groups to the catalog service."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        """Initialize client.

        Args:
            api_url: Base URL of the catalog service
            timeout: Request timeout in seconds
            session: HTTP session to use; a new one is created if None
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def group_url(self, group_name: str) -> str:
        return f"{self.api_url}/groups/{quote(group_name)}"

    def submit(self, group: Group) -> SubmitResponse:
        """Send one group to the catalog.

        Transport errors and malformed answers are returned as unsuccessful
        responses.

        Args:
            group: Group to submit

        Returns:
            SubmitResponse of the catalog
        """
        try:
            response = self.session.post(
                self.group_url(group.group_name),
                json=group.to_dict(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return SubmitResponse(successful=False, error="request failed", message=str(e))

        try:
            data = response.json()
        except ValueError:
            return SubmitResponse(
                successful=False,
                error=f"HTTP {response.status_code}",
                message="response is not valid JSON",
            )

        if not isinstance(data, dict):
            return SubmitResponse(
                successful=False,
                error=f"HTTP {response.status_code}",
                message="unexpected response format",
            )
        return SubmitResponse.from_dict(data)

    def submit_all(self, groups: list[Group]) -> dict[str, SubmitResponse]:
        """Submit groups one by one, logging every answer.

        Args:
            groups: Groups to submit

        Returns:
            Responses by group name
        """
        logger.info("Sending %d groups to the catalog...", len(groups))
        responses: dict[str, SubmitResponse] = {}

        for group in groups:
            response = self.submit(group)
            responses[group.group_name] = response
            if response.successful:
                logger.info("%s: %s", group.group_name, response.message)
            else:
                logger.error(
                    "%s: catalog returned an error %s - %s",
                    group.group_name,
                    response.error,
                    response.message,
                )

        logger.info("Sending finished.")
        return responses
