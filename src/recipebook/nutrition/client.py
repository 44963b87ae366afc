"""USDA FoodData Central client for per-100g nutrient values."""

from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from recipebook.config import get_settings
from recipebook.logging_config import get_logger

logger = get_logger(__name__)

# FoodData Central nutrient ids
ENERGY_KCAL = 1008
PROTEIN = 1003
CARBOHYDRATE = 1005
TOTAL_FAT = 1004

# Legacy nutrient numbers used to trim the search payload
SEARCH_NUTRIENT_NUMBERS = "208,203,205,204"
SEARCH_DATA_TYPES = "Survey (FNDDS),Foundation,SR Legacy"


class NutritionLookupError(Exception):
    """Raised when the nutrition service cannot be reached or rejects a request."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


@dataclass(frozen=True)
class Nutrients:
    """Macro values per 100 g."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_food(cls, food: dict[str, Any]) -> "Nutrients":
        """Build from one FoodData Central search result; missing nutrients are 0."""
        values: dict[int, float] = {}
        for nutrient in food.get("foodNutrients") or []:
            nutrient_id = nutrient.get("nutrientId")
            if nutrient_id is not None and nutrient_id not in values:
                try:
                    values[nutrient_id] = float(nutrient.get("value") or 0)
                except (TypeError, ValueError) as e:
                    raise NutritionLookupError(
                        f"Malformed value for nutrient {nutrient_id}",
                        response=nutrient,
                    ) from e

        return cls(
            calories=values.get(ENERGY_KCAL, 0.0),
            protein=values.get(PROTEIN, 0.0),
            carbs=values.get(CARBOHYDRATE, 0.0),
            fat=values.get(TOTAL_FAT, 0.0),
        )

    def scaled(self, grams: float) -> "Nutrients":
        """Values for the given mass."""
        factor = grams / 100
        return Nutrients(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
        )


class FoodDataCentralClient:
    """Client for the FoodData Central search API."""

    DEFAULT_TIMEOUT = 15.0
    BACKOFF_BASE = 1
    BACKOFF_MAX = 10

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        page_size: int | None = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.usda_api_key
        self.base_url = (base_url or settings.usda_base_url).rstrip("/")
        self.timeout = timeout or settings.nutrition_timeout or self.DEFAULT_TIMEOUT
        self.max_retries = max_retries or settings.nutrition_max_retries
        self.page_size = page_size or settings.nutrition_page_size
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        """Return client name."""
        return "fooddata-central"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Accept": "application/json",
                    "User-Agent": "Recipebook/1.0",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FoodDataCentralClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _request(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        """Make a GET request with retry logic and return the decoded body."""
        url = f"{self.base_url}/{endpoint}"
        client = await self._get_client()

        @retry(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.BACKOFF_BASE, max=self.BACKOFF_MAX),
            reraise=True,
        )
        async def _do_request() -> httpx.Response:
            return await client.get(url, params={"api_key": self.api_key, **params})

        try:
            response = await _do_request()
        except (RetryError, httpx.HTTPError) as e:
            logger.error(f"Request to {url} failed: {type(e).__name__}: {e}")
            raise NutritionLookupError(
                f"Request failed: {type(e).__name__}",
                response=str(e),
            ) from e

        if response.status_code >= 400:
            error_detail = response.text[:500] if response.text else "No details"
            logger.error(f"API error {response.status_code} for {url}: {error_detail}")
            raise NutritionLookupError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
                response=error_detail,
            )

        try:
            return response.json() if response.text else {}
        except ValueError as e:
            raise NutritionLookupError(
                "Invalid JSON from nutrition API",
                status_code=response.status_code,
                response=response.text[:500],
            ) from e

    async def search_foods(self, query: str) -> list[dict[str, Any]]:
        """
        Search foods by free-text name.

        Args:
            query: Ingredient name.

        Returns:
            List of food dictionaries, best match first.
        """
        data = await self._request(
            "foods/search",
            params={
                "query": query,
                "dataType": SEARCH_DATA_TYPES,
                "pageSize": self.page_size,
                "nutrients": SEARCH_NUTRIENT_NUMBERS,
            },
        )
        return data.get("foods") or []

    async def lookup(self, ingredient_name: str) -> Nutrients | None:
        """
        Look up per-100g nutrients for an ingredient.

        Returns:
            Nutrients of the best match, or None when nothing was found.
        """
        foods = await self.search_foods(ingredient_name)
        if not foods:
            logger.debug(f"No foods found for '{ingredient_name}'")
            return None
        return Nutrients.from_food(foods[0])

    async def health_check(self) -> bool:
        """Check if the API is reachable with the configured key."""
        try:
            await self.search_foods("water")
            return True
        except NutritionLookupError as e:
            logger.warning(f"FoodData Central health check failed: {e}")
            return False
