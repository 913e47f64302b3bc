async def test_health_is_public(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "UP"}


async def test_info_is_public(client):
    resp = await client.get("/info")

    assert resp.status_code == 200
    data = resp.json()
    assert data["version"] == "1.0.0"
    assert "features" not in data


async def test_public_paths_skip_credential_checks(client):
    resp = await client.get("/health", auth=("user", "wrong"))
    assert resp.status_code == 200


async def test_openapi_is_public_and_titled_from_settings(client):
    from app.config import Settings

    resp = await client.get("/openapi.json")

    assert resp.status_code == 200
    info = resp.json()["info"]
    assert info["title"] == Settings().app_name
    assert info["version"] == Settings().app_version


async def test_unknown_path_requires_authentication(client):
    assert (await client.get("/nowhere")).status_code == 401
    assert (await client.get("/nowhere", auth=("user", "password"))).status_code == 404
