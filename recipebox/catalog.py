"""Client for the third-party food and drink catalogs.

Every call is best effort: transport errors, non-2xx answers and bodies that
are not a JSON object are logged and turned into an empty result. Callers
never see an exception from here.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .schemas import CatalogItem

logger = logging.getLogger(__name__)

# Spoonacular complexSearch result cap
CATEGORY_RESULT_LIMIT = 8


class CatalogClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        mealdb_url: str,
        cocktaildb_url: str,
        spoonacular_url: str,
        api_key: str = "",
    ) -> None:
        self.http = http
        self.mealdb_url = mealdb_url.rstrip("/")
        self.cocktaildb_url = cocktaildb_url.rstrip("/")
        self.spoonacular_url = spoonacular_url.rstrip("/")
        self.api_key = api_key

    @classmethod
    def from_config(cls, config, http: Optional[httpx.AsyncClient] = None):
        if http is None:
            http = httpx.AsyncClient(timeout=config.catalog_timeout)
        return cls(
            http,
            mealdb_url=config.mealdb_url,
            cocktaildb_url=config.cocktaildb_url,
            spoonacular_url=config.spoonacular_url,
            api_key=config.spoonacular_api_key,
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _get_json(self, url: str, params: Dict[str, Any]) -> Optional[dict]:
        try:
            resp = await self.http.get(url, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("Catalog request to %s failed: %r", url, e)
            return None
        except ValueError as e:
            logger.warning("Catalog at %s returned malformed JSON: %r", url, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Catalog at %s returned %s, expected an object", url, type(data).__name__)
            return None
        return data

    @staticmethod
    def _records(data: Optional[dict], key: str) -> List[dict]:
        # "no results" comes back as null, absent, or occasionally a string
        if not data:
            return []
        records = data.get(key)
        if not isinstance(records, list):
            return []
        return [r for r in records if isinstance(r, dict)]

    async def search_meals(self, query: str) -> List[CatalogItem]:
        data = await self._get_json(f"{self.mealdb_url}/search.php", {"s": query})
        return [
            CatalogItem(
                id=str(m.get("idMeal")),
                name=m.get("strMeal"),
                image=m.get("strMealThumb"),
                category=m.get("strCategory"),
                type="meal",
            )
            for m in self._records(data, "meals")
            if m.get("idMeal")
        ]

    async def search_drinks(self, query: str) -> List[CatalogItem]:
        data = await self._get_json(f"{self.cocktaildb_url}/search.php", {"s": query})
        return [
            CatalogItem(
                id=str(d.get("idDrink")),
                name=d.get("strDrink"),
                image=d.get("strDrinkThumb"),
                category=d.get("strCategory"),
                type="drink",
            )
            for d in self._records(data, "drinks")
            if d.get("idDrink")
        ]

    async def lookup_meal(self, meal_id: str) -> Optional[dict]:
        data = await self._get_json(f"{self.mealdb_url}/lookup.php", {"i": meal_id})
        meals = self._records(data, "meals")
        return meals[0] if meals else None

    async def lookup_drink(self, drink_id: str) -> Optional[dict]:
        data = await self._get_json(f"{self.cocktaildb_url}/lookup.php", {"i": drink_id})
        drinks = self._records(data, "drinks")
        return drinks[0] if drinks else None

    async def search_by_category(self, category: Optional[str]) -> List[dict]:
        params = {
            "type": category or "",
            "number": CATEGORY_RESULT_LIMIT,
            "apiKey": self.api_key,
        }
        data = await self._get_json(
            f"{self.spoonacular_url}/recipes/complexSearch", params
        )
        results = (data or {}).get("results")
        if not isinstance(results, list):
            return []
        return results
