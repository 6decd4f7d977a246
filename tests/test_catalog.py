import httpx
import pytest

from recipebox.catalog import CatalogClient


def make_client(handler) -> CatalogClient:
    return CatalogClient(
        httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        mealdb_url="https://meals.test/api/",
        cocktaildb_url="https://drinks.test/api",
        spoonacular_url="https://spoon.test",
        api_key="k",
    )


@pytest.mark.asyncio
async def test_search_meals_normalizes_items() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://meals.test/api/search.php?s=pie"
        return httpx.Response(
            200,
            json={
                "meals": [
                    {
                        "idMeal": "53000",
                        "strMeal": "Apple Pie",
                        "strMealThumb": "https://img/pie.jpg",
                        "strCategory": "Dessert",
                        "strInstructions": "Bake.",
                    }
                ]
            },
        )

    catalog = make_client(handler)
    got = await catalog.search_meals("pie")
    assert [i.model_dump() for i in got] == [
        {
            "id": "53000",
            "name": "Apple Pie",
            "image": "https://img/pie.jpg",
            "category": "Dessert",
            "type": "meal",
        }
    ]
    await catalog.aclose()


@pytest.mark.asyncio
async def test_search_drinks_no_results() -> None:
    catalog = make_client(lambda request: httpx.Response(200, json={"drinks": None}))
    assert await catalog.search_drinks("zzz") == []


@pytest.mark.parametrize(
    "respond",
    (
        lambda request: httpx.Response(503, text="down"),
        lambda request: httpx.Response(200, text="<html>not json</html>"),
        lambda request: httpx.Response(200, json=["not", "an", "object"]),
        lambda request: httpx.Response(200, json={"meals": "Invalid ID"}),
    ),
)
@pytest.mark.asyncio
async def test_bad_responses_degrade_to_empty(respond) -> None:
    catalog = make_client(respond)
    assert await catalog.search_meals("x") == []
    assert await catalog.lookup_meal("1") is None
    assert await catalog.search_by_category("x") == []


@pytest.mark.asyncio
async def test_network_error_degrades_to_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow upstream", request=request)

    catalog = make_client(handler)
    assert await catalog.search_drinks("margarita") == []
    assert await catalog.lookup_drink("11007") is None


@pytest.mark.asyncio
async def test_lookup_returns_first_record() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/lookup.php"
        return httpx.Response(
            200,
            json={"drinks": [{"idDrink": "11007", "strDrink": "Margarita"}, {"idDrink": "1"}]},
        )

    catalog = make_client(handler)
    got = await catalog.lookup_drink("11007")
    assert got == {"idDrink": "11007", "strDrink": "Margarita"}


@pytest.mark.asyncio
async def test_search_by_category_sends_cap_and_key() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        assert (params["type"], params["number"], params["apiKey"]) == ("soup", "8", "k")
        return httpx.Response(200, json={"results": [{"id": 7, "title": "Pho"}], "totalResults": 1})

    catalog = make_client(handler)
    assert await catalog.search_by_category("soup") == [{"id": 7, "title": "Pho"}]


@pytest.mark.asyncio
async def test_search_by_category_missing_results() -> None:
    catalog = make_client(lambda request: httpx.Response(200, json={"status": "failure"}))
    assert await catalog.search_by_category("soup") == []


@pytest.mark.asyncio
async def test_search_skips_records_without_id() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "meals.test":
            return httpx.Response(200, json={"meals": [{"strMeal": "Ghost"}, {"idMeal": "1", "strMeal": "Stew"}]})
        return httpx.Response(200, json={"drinks": [{"idDrink": None, "strDrink": "Ghost"}]})

    catalog = make_client(handler)
    meals = await catalog.search_meals("x")
    assert [m.id for m in meals] == ["1"]
    assert await catalog.search_drinks("x") == []
