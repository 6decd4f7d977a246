from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from recipebox.method_override import MethodOverrideMiddleware


app = FastAPI()
app.add_middleware(MethodOverrideMiddleware)


@app.api_route("/thing", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def thing(request: Request):
    return {"method": request.method}


client = TestClient(app)


def test_post_with_override_is_rewritten():
    for verb in ("PUT", "delete", "Patch"):
        res = client.post(f"/thing?_method={verb}")
        assert res.json()["method"] == verb.upper()


def test_plain_post_is_untouched():
    res = client.post("/thing")
    assert res.json()["method"] == "POST"


def test_only_write_verbs_are_allowed():
    res = client.post("/thing?_method=GET")
    assert res.json()["method"] == "POST"


def test_get_is_never_rewritten():
    res = client.get("/thing?_method=DELETE")
    assert res.json()["method"] == "GET"
