import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from subscriptions_api.models.service import Service
from subscriptions_api.models.subscription import Subscription


def _create_user(client: TestClient, name: str) -> int:
    response = client.post("/users", json={"name": name, "email": f"{name.lower()}@example.com"})
    return response.json()["id"]


def _subscribe(client: TestClient, user_id: int, service_name: str):
    return client.post(f"/subscriptions/users/{user_id}", json={"serviceName": service_name})


def test_add_subscription(client: TestClient, user):
    response = _subscribe(client, user["id"], "Netflix")

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert data["serviceName"] == "Netflix"
    assert data["userId"] == user["id"]


def test_add_subscription_accepts_snake_case_body(client: TestClient, user):
    response = client.post(f"/subscriptions/users/{user['id']}", json={"service_name": "Hulu"})

    assert response.status_code == 201
    assert response.json()["serviceName"] == "Hulu"


def test_add_subscription_for_missing_user_returns_404(client: TestClient, session: Session):
    response = _subscribe(client, 404, "Netflix")

    assert response.status_code == 404
    assert response.json()["detail"] == "User with id 404 not found"
    # No service row left behind
    assert session.exec(select(Service)).all() == []


def test_add_subscription_rejects_blank_service_name(client: TestClient, user):
    response = _subscribe(client, user["id"], "  ")

    assert response.status_code == 400


def test_add_subscription_requires_service_name(client: TestClient, user):
    response = client.post(f"/subscriptions/users/{user['id']}", json={})

    assert response.status_code == 400


def test_same_service_twice_reuses_service_row(client: TestClient, user, session: Session):
    """Two subscriptions, two ids, one Service row"""
    first = _subscribe(client, user["id"], "Netflix").json()
    second = _subscribe(client, user["id"], "Netflix").json()

    assert first["id"] != second["id"]

    listed = client.get(f"/subscriptions/users/{user['id']}").json()
    assert {s["id"] for s in listed} == {first["id"], second["id"]}

    services = session.exec(select(Service).where(Service.service_name == "Netflix")).all()
    assert len(services) == 1
    subscriptions = session.exec(select(Subscription)).all()
    assert {s.service_id for s in subscriptions} == {services[0].id}


def test_service_name_match_is_case_sensitive(client: TestClient, user, session: Session):
    _subscribe(client, user["id"], "Netflix")
    _subscribe(client, user["id"], "netflix")

    names = sorted(s.service_name for s in session.exec(select(Service)).all())
    assert names == ["Netflix", "netflix"]


def test_get_user_subscriptions_in_creation_order(client: TestClient, user):
    for name in ["Spotify", "Netflix", "YouTube Premium"]:
        _subscribe(client, user["id"], name)

    response = client.get(f"/subscriptions/users/{user['id']}")

    assert response.status_code == 200
    data = response.json()
    assert [s["serviceName"] for s in data] == ["Spotify", "Netflix", "YouTube Premium"]
    assert all(s["userId"] == user["id"] for s in data)


def test_get_user_subscriptions_only_returns_own(client: TestClient):
    alice = _create_user(client, "Alice")
    bob = _create_user(client, "Bob")
    _subscribe(client, alice, "Netflix")
    _subscribe(client, bob, "Hulu")

    data = client.get(f"/subscriptions/users/{bob}").json()
    assert [s["serviceName"] for s in data] == ["Hulu"]


def test_get_user_subscriptions_empty(client: TestClient, user):
    response = client.get(f"/subscriptions/users/{user['id']}")

    assert response.status_code == 200
    assert response.json() == []


def test_get_subscriptions_for_missing_user_returns_404(client: TestClient):
    response = client.get("/subscriptions/users/31")

    assert response.status_code == 404
    assert response.json()["detail"] == "User with id 31 not found"


def test_delete_subscription(client: TestClient, user):
    subscription = _subscribe(client, user["id"], "Netflix").json()

    response = client.delete(f"/subscriptions/{subscription['id']}/users/{user['id']}")

    assert response.status_code == 204
    assert client.get(f"/subscriptions/users/{user['id']}").json() == []


def test_delete_missing_subscription_returns_404(client: TestClient, user):
    response = client.delete(f"/subscriptions/555/users/{user['id']}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Subscription with id 555 not found"


def test_delete_subscription_of_other_user_is_rejected(client: TestClient):
    """Ownership violation is a 400 and the subscription survives"""
    owner = _create_user(client, "Owner")
    other = _create_user(client, "Other")
    subscription = _subscribe(client, owner, "Netflix").json()

    response = client.delete(f"/subscriptions/{subscription['id']}/users/{other}")

    assert response.status_code == 400
    assert response.json()["detail"] == (
        f"Subscription with id {subscription['id']} does not belong to user with id {other}"
    )
    remaining = client.get(f"/subscriptions/users/{owner}").json()
    assert [s["id"] for s in remaining] == [subscription["id"]]


def test_delete_user_cascades_to_subscriptions(client: TestClient, session: Session):
    alice = _create_user(client, "Alice")
    bob = _create_user(client, "Bob")
    _subscribe(client, alice, "Netflix")
    _subscribe(client, alice, "Hulu")
    _subscribe(client, bob, "Netflix")

    assert client.delete(f"/users/{alice}").status_code == 204

    remaining = session.exec(select(Subscription)).all()
    assert [s.user_id for s in remaining] == [bob]
    # Services are shared and stay
    assert len(session.exec(select(Service)).all()) == 2


# ============================================================================
# Top subscriptions
# ============================================================================


@pytest.fixture
def popularity(client: TestClient):
    """Subscription counts A:5, B:3, C:3, D:1 spread over several users"""
    users = [_create_user(client, f"User{i}") for i in range(5)]
    counts = {"D": 1, "C": 3, "B": 3, "A": 5}
    for service_name, count in counts.items():
        for i in range(count):
            _subscribe(client, users[i], service_name)
    return counts


def test_top_subscriptions(client: TestClient, popularity):
    response = client.get("/subscriptions/top")

    assert response.status_code == 200
    top = response.json()
    assert len(top) == 3
    assert top[0] == "A"
    assert set(top[1:]) == {"B", "C"}
    assert "D" not in top


def test_top_subscriptions_ties_ordered_by_name(client: TestClient, popularity):
    assert client.get("/subscriptions/top").json() == ["A", "B", "C"]


def test_top_subscriptions_with_fewer_than_three_services(client: TestClient, user):
    _subscribe(client, user["id"], "Hulu")
    _subscribe(client, user["id"], "Netflix")
    _subscribe(client, user["id"], "Netflix")

    assert client.get("/subscriptions/top").json() == ["Netflix", "Hulu"]


def test_top_subscriptions_when_empty_returns_404(client: TestClient):
    response = client.get("/subscriptions/top")

    assert response.status_code == 404
    assert response.json()["detail"] == "No subscriptions found"


def test_top_subscriptions_ignores_services_without_subscriptions(client: TestClient, user):
    subscription = _subscribe(client, user["id"], "Netflix").json()
    client.delete(f"/subscriptions/{subscription['id']}/users/{user['id']}")

    # The Netflix service row still exists but has no subscriptions
    assert client.get("/subscriptions/top").status_code == 404


def test_out_of_range_ids_are_not_found(client: TestClient, user):
    too_large = 2**63

    delete_response = client.delete(f"/subscriptions/{too_large}/users/{user['id']}")
    assert delete_response.status_code == 404
    assert delete_response.json()["detail"] == f"Subscription with id {too_large} not found"

    add_response = _subscribe(client, too_large, "Netflix")
    assert add_response.status_code == 404
    assert add_response.json()["detail"] == f"User with id {too_large} not found"

    list_response = client.get(f"/subscriptions/users/{too_large}")
    assert list_response.status_code == 404
