"""Remote exercise catalog client (API Ninjas /v1/exercises, keyed by muscle)."""

import logging

import httpx

logger = logging.getLogger(__name__)


class ExerciseCatalogError(Exception):
    """Catalog lookup failed: unreachable, bad status, or unexpected payload."""


def catalog_muscle_key(muscle_group: str) -> str:
    """Catalog query key: "Lower back" -> "lower_back"."""
    return "_".join(muscle_group.strip().lower().split())


class ExerciseCatalogClient:
    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def exercise_names(self, muscle_group: str) -> list[str]:
        """Exercise names for one muscle group, in catalog order."""
        params = {"muscle": catalog_muscle_key(muscle_group)}
        headers = {"X-Api-Key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(self.base_url, params=params, headers=headers)
                response.raise_for_status()
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                logger.warning("Exercise catalog lookup failed for %s: %s", muscle_group, exc)
                raise ExerciseCatalogError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning(
                "Exercise catalog returned invalid JSON for %s: %s",
                muscle_group,
                response.text[:200],
            )
            raise ExerciseCatalogError("invalid JSON") from exc

        if not isinstance(payload, list):
            logger.warning("Exercise catalog returned %s, expected list", type(payload).__name__)
            raise ExerciseCatalogError("unexpected payload")

        names = [item.get("name") for item in payload if isinstance(item, dict)]
        logger.debug("Exercise catalog: %d names for %s", len(names), muscle_group)
        return [n for n in names if isinstance(n, str) and n]
