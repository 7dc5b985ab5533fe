from fastapi import Depends

from prototype.core.config import Settings, settings
from prototype.main import create_version_app
from prototype.middleware.redirects import Redirector, get_redirector


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["app"] == settings.app_name
    assert body["versions"] == settings.versions


def test_unknown_path_uses_error_envelope(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": {"code": "NOT_FOUND", "message": "Resource not found"}}


def test_unknown_path_inside_version_app(client):
    resp = client.get("/v1/question-3")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


def test_non_string_redirect_target_is_reported(mount):
    sub_app = create_version_app("v1")

    @sub_app.post("/broken")
    async def broken(redirect: Redirector = Depends(get_redirector)):
        return redirect(302)

    resp = mount("v1", sub_app).post("/v1/broken", follow_redirects=False)
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INVALID_REDIRECT_TARGET"


def test_mount_paths_normalised():
    s = Settings(versions=["v1", "/v2/", "beta"])
    assert s.mount_paths == ["/v1", "/v2", "/beta"]


def test_redirect_status_from_env(monkeypatch):
    monkeypatch.setenv("REDIRECT_STATUS_CODE", "303")
    assert Settings().redirect_status_code == 303
