# tests/test_user_access_api.py

import pytest
from fastapi.testclient import TestClient

URL = "/api/v1/user_access/"


@pytest.fixture
def access_ids(client: TestClient) -> dict:
    return {row["access_name"]: row["id"] for row in client.get("/api/v1/access/").json()}


def grant(client: TestClient, access_id: int, user_id: int, **extra) -> dict:
    response = client.post(URL, json={"access_id": access_id, "user_id": user_id, **extra})
    assert response.status_code == 201, response.text
    return response.json()


class TestGrantAndCheck:
    def test_grant_access(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["GetUser"], 1, permission_level="own")

        assert created["permission_id"] > 0
        assert created["access_id"] == access_ids["GetUser"]
        assert created["user_id"] == 1
        assert created["permission_level"] == "own"

    def test_permission_level_is_optional(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["GetUser"], 2)

        assert created["permission_level"] is None

    def test_check_access(self, client: TestClient, access_ids: dict):
        grant(client, access_ids["UpdateUser"], 3)

        granted = client.get(f"{URL}3/{access_ids['UpdateUser']}")
        not_granted = client.get(f"{URL}3/{access_ids['DeleteUser']}")

        assert granted.status_code == 200
        assert granted.json() == {"user_id": 3, "access_id": access_ids["UpdateUser"], "has_access": True}
        assert not_granted.json()["has_access"] is False

    def test_check_access_for_unknown_user_is_false(self, client: TestClient, access_ids: dict):
        response = client.get(f"{URL}999/{access_ids['GetUser']}")

        assert response.status_code == 200
        assert response.json()["has_access"] is False

    def test_grant_to_unknown_user_is_rejected(self, client: TestClient, access_ids: dict):
        response = client.post(URL, json={"access_id": access_ids["GetUser"], "user_id": 999})

        assert response.status_code == 409
        assert response.json()["code"] == "INVALID_REFERENCE"

    def test_grant_of_unknown_access_is_rejected(self, client: TestClient):
        response = client.post(URL, json={"access_id": 999, "user_id": 1})

        assert response.status_code == 409
        assert response.json()["code"] == "INVALID_REFERENCE"

    def test_grant_requires_positive_ids(self, client: TestClient):
        response = client.post(URL, json={"access_id": 0, "user_id": 1})

        assert response.status_code == 422


class TestSearch:
    @pytest.fixture
    def grants(self, client: TestClient, access_ids: dict) -> list:
        return [
            grant(client, access_ids["GetUser"], 1),
            grant(client, access_ids["GetUser"], 2, permission_level="admin"),
            grant(client, access_ids["CreateUser"], 1, permission_level="admin"),
            grant(client, access_ids["DeleteUser"], 3, permission_level="self"),
        ]

    def search(self, client: TestClient, **params) -> dict:
        response = client.get(URL, params=params)
        assert response.status_code == 200, response.text
        return response.json()

    def test_without_filters_returns_everything(self, client: TestClient, grants: list):
        page = self.search(client)

        assert page["total"] == 4
        assert page["page"] == 1
        assert [item["permission_id"] for item in page["items"]] == [g["permission_id"] for g in grants]

    def test_filter_by_user(self, client: TestClient, grants: list):
        page = self.search(client, user_id=1)

        assert {item["permission_id"] for item in page["items"]} == {
            grants[0]["permission_id"], grants[2]["permission_id"],
        }

    def test_filter_by_access_and_user(self, client: TestClient, grants: list, access_ids: dict):
        page = self.search(client, access_id=access_ids["GetUser"], user_id=2)

        assert page["total"] == 1
        assert page["items"][0] == grants[1]

    def test_filter_by_exact_permission_level(self, client: TestClient, grants: list):
        page = self.search(client, permission_level="admin")

        assert [item["permission_id"] for item in page["items"]] == [
            grants[1]["permission_id"], grants[2]["permission_id"],
        ]

    def test_filter_by_missing_permission_level(self, client: TestClient, grants: list):
        page = self.search(client, permission_level="null")

        assert page["items"] == [grants[0]]

    def test_filter_by_present_permission_level(self, client: TestClient, grants: list):
        page = self.search(client, permission_level="!null")

        assert page["total"] == 3
        assert all(item["permission_level"] is not None for item in page["items"])

    def test_pagination(self, client: TestClient, grants: list):
        page = self.search(client, page=2, size=3)

        assert page["total"] == 4
        assert page["size"] == 3
        assert page["items"] == [grants[3]]

    def test_unknown_query_parameter_is_rejected(self, client: TestClient, grants: list):
        response = client.get(URL, params={"user_id": 1, "bogus": 1})

        assert response.status_code == 400
        assert "bogus" in response.json()["detail"]


class TestUpdateAndRevoke:
    def test_update_replaces_ids_and_level(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["GetUser"], 1, permission_level="own")

        response = client.put(
            f"{URL}{created['permission_id']}",
            json={"access_id": access_ids["UpdateUser"], "user_id": 2, "permission_level": "all"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "permission_id": created["permission_id"],
            "access_id": access_ids["UpdateUser"],
            "user_id": 2,
            "permission_level": "all",
        }

    def test_update_without_level_keeps_it(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["GetUser"], 1, permission_level="own")

        response = client.put(
            f"{URL}{created['permission_id']}",
            json={"access_id": access_ids["GetUser"], "user_id": 3},
        )

        assert response.json()["user_id"] == 3
        assert response.json()["permission_level"] == "own"

    def test_update_with_null_level_clears_it(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["GetUser"], 1, permission_level="own")

        response = client.put(
            f"{URL}{created['permission_id']}",
            json={"access_id": access_ids["GetUser"], "user_id": 1, "permission_level": None},
        )

        assert response.json()["permission_level"] is None

    def test_update_to_unknown_access_is_rejected(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["GetUser"], 1)

        response = client.put(f"{URL}{created['permission_id']}", json={"access_id": 999, "user_id": 1})

        assert response.status_code == 409
        assert response.json()["code"] == "INVALID_REFERENCE"
        check = client.get(f"{URL}1/{access_ids['GetUser']}")
        assert check.json()["has_access"] is True

    def test_update_missing_grant_returns_404(self, client: TestClient, access_ids: dict):
        response = client.put(f"{URL}999", json={"access_id": access_ids["GetUser"], "user_id": 1})

        assert response.status_code == 404

    def test_revoke(self, client: TestClient, access_ids: dict):
        created = grant(client, access_ids["CreateUser"], 2)

        first = client.delete(f"{URL}{created['permission_id']}")
        second = client.delete(f"{URL}{created['permission_id']}")

        assert first.status_code == 204
        assert second.status_code == 404
        assert client.get(f"{URL}2/{access_ids['CreateUser']}").json()["has_access"] is False
