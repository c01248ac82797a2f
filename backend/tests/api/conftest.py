"""API fixtures - isolated app per test, httpx client over ASGI, GraphQL helper.

Invariants:
    - Each test gets its own Registrar (seeded), so no state leaks between tests
    - `auth_headers` registers a system user and returns a Bearer header
"""

import pytest
from httpx import ASGITransport, AsyncClient

from campus.config import Settings
from campus.main import create_app
from campus.services.registrar import build_registrar
from campus.services.seed import seed_demo_records


@pytest.fixture
def settings():
    return Settings(
        jwt_secret_key="test-secret-key", bcrypt_rounds=4, seed_demo_data=False,
    )


@pytest.fixture
def registrar(settings):
    registrar = build_registrar(settings)
    seed_demo_records(registrar)
    return registrar


@pytest.fixture
def app(settings, registrar):
    return create_app(settings, registrar)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def gql(client):
    async def _run(query, variables=None, headers=None):
        res = await client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers or {},
        )
        assert res.status_code == 200, res.text
        return res.json()
    return _run


REGISTER = """
mutation Register($email: String!, $password: String!) {
  registerUser(email: $email, password: $password) { token user { id email } }
}
"""


@pytest.fixture
async def auth_headers(gql):
    body = await gql(REGISTER, {"email": "admin@campus.edu", "password": "password123"})
    return {"Authorization": f"Bearer {body['data']['registerUser']['token']}"}
