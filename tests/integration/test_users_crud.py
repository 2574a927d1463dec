"""Integration tests for the user CRUD endpoints."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from tests.factories.user import UserDetailsFactory, as_payload
from tests.helpers.assertions import assert_problem, assert_user_body
from tests.helpers.http import json_headers, user_url

SEEDED_ID = "00000000-0000-0000-0000-000000000000"
SECOND_SEEDED_ID = "11111111-1111-1111-1111-111111111111"


def _payload(**overrides: str) -> dict[str, str]:
    return {**as_payload(UserDetailsFactory()), **overrides}


class TestReadUser:
    def test_get_seeded_user(self, client) -> None:
        """200 with the record body when the id exists."""

        # Act
        resp = client.get(user_url(SEEDED_ID))

        # Assert
        assert resp.status_code == 200
        body = resp.get_json()
        assert_user_body(body)
        assert body == {
            "id": SEEDED_ID,
            "firstName": "Smith",
            "lastName": "Joe",
            "middleInitial": "B",
            "userType": "PATRON",
            "dateOfBirth": "1980-01-01",
        }

    def test_get_unknown_user_returns_empty_404(self, client) -> None:
        """404 with an empty body when the id is unknown."""

        resp = client.get(user_url("abc"))

        assert resp.status_code == 404
        assert resp.data == b""

    def test_list_users(self, client) -> None:
        resp = client.get(user_url())

        assert resp.status_code == 200
        body = resp.get_json()
        assert [u["id"] for u in body] == [SEEDED_ID, SECOND_SEEDED_ID]
        for item in body:
            assert_user_body(item)


class TestCreateUser:
    def test_create_user(self, client, freeze_time) -> None:
        """201 with a server-assigned id and the submitted fields."""

        # Arrange
        with freeze_time("2026-10-19"):
            payload = {
                "firstName": "firstName",
                "lastName": "lastName",
                "middleInitial": "M",
                "userType": "PATRON",
                "dateOfBirth": date.today().isoformat(),
            }

        # Act
        resp = client.post(user_url(), json=payload)

        # Assert
        assert resp.status_code == 201
        body = resp.get_json()
        assert body["id"]
        assert {k: v for k, v in body.items() if k != "id"} == payload
        assert body["dateOfBirth"] == "2026-10-19"
        assert resp.headers["Location"].endswith(user_url(body["id"]))

        follow_up = client.get(user_url(body["id"]))
        assert follow_up.status_code == 200
        assert follow_up.get_json() == body

    def test_create_ignores_client_supplied_id(self, client) -> None:
        resp = client.post(user_url(), json=_payload(id="client-chosen"))

        assert resp.status_code == 201
        assert resp.get_json()["id"] != "client-chosen"
        assert client.get(user_url("client-chosen")).status_code == 404

    def test_successive_creates_get_distinct_ids(self, client, store) -> None:
        first = client.post(user_url(), json=_payload()).get_json()
        second = client.post(user_url(), json=_payload()).get_json()

        assert first["id"] != second["id"]
        assert len(store) == 4

    def test_create_logs_event(self, client, caplog) -> None:
        caplog.set_level(logging.INFO, logger="user_middle.services.user_service")

        body = client.post(user_url(), json=_payload()).get_json()

        records = [r for r in caplog.records if r.getMessage() == "user.created"]
        assert len(records) == 1
        assert records[0].user_id == body["id"]

    def test_create_with_missing_field_returns_422(self, client, store) -> None:
        payload = _payload()
        del payload["lastName"]

        resp = client.post(user_url(), json=payload)

        assert resp.status_code == 422
        assert resp.mimetype == "application/problem+json"
        problem = resp.get_json()
        assert_problem(problem, status=422, code="validation_error")
        assert "lastName" in problem["details"]["errors"]
        assert len(store) == 2

    def test_create_with_bad_user_type_returns_422(self, client) -> None:
        resp = client.post(user_url(), json=_payload(userType="ADMIN"))

        assert resp.status_code == 422
        assert "userType" in resp.get_json()["details"]["errors"]

    def test_create_with_non_json_body_returns_400(self, client) -> None:
        resp = client.post(user_url(), data="firstName=x", content_type="text/plain")

        assert resp.status_code == 400
        assert_problem(resp.get_json(), status=400, code="bad_request")

    def test_create_with_array_body_returns_422(self, client) -> None:
        resp = client.post(user_url(), json=[_payload()])

        assert resp.status_code == 422

    def test_create_with_null_body_returns_422(self, client, store) -> None:
        resp = client.post(user_url(), data="null", content_type="application/json")

        assert resp.status_code == 422
        assert_problem(resp.get_json(), status=422, code="validation_error")
        assert len(store) == 2

    def test_create_with_malformed_json_returns_400(self, client) -> None:
        resp = client.post(user_url(), data="{not json", content_type="application/json")

        assert resp.status_code == 400
        assert_problem(resp.get_json(), status=400, code="bad_request")


class TestUpdateUser:
    def test_update_existing_user(self, client) -> None:
        """PUT replaces the record; a follow-up GET sees the new fields."""

        # Arrange
        payload = _payload(firstName="X", lastName="lastName")

        # Act
        resp = client.put(user_url(SEEDED_ID), json=payload)

        # Assert
        assert resp.status_code == 200
        assert resp.get_json() == {"id": SEEDED_ID, **payload}
        fetched = client.get(user_url(SEEDED_ID)).get_json()
        assert fetched["firstName"] == "X"
        assert fetched["lastName"] == "lastName"

    def test_update_forces_path_id(self, client) -> None:
        resp = client.put(user_url(SEEDED_ID), json=_payload(id="something-else"))

        assert resp.get_json()["id"] == SEEDED_ID
        assert client.get(user_url("something-else")).status_code == 404

    def test_update_unknown_id_upserts(self, client, store) -> None:
        resp = client.put(user_url("new-id"), json=_payload())

        assert resp.status_code == 200
        assert client.get(user_url("new-id")).status_code == 200
        assert len(store) == 3

    def test_update_replaces_case_insensitive_match(self, client, store) -> None:
        client.put(user_url("abc-id"), json=_payload())
        size = len(store)

        resp = client.put(user_url("ABC-ID"), json=_payload(firstName="Upper"))

        assert resp.status_code == 200
        assert len(store) == size
        assert client.get(user_url("abc-id")).status_code == 404
        assert client.get(user_url("ABC-ID")).get_json()["firstName"] == "Upper"

    def test_update_logs_replacement_of_case_insensitive_match(self, client, caplog) -> None:
        client.put(user_url("abc-id"), json=_payload())
        caplog.set_level(logging.INFO, logger="user_middle.services.user_service")

        client.put(user_url("ABC-ID"), json=_payload())

        records = [r for r in caplog.records if r.getMessage() == "user.updated"]
        assert len(records) == 1
        assert records[0].inserted is False
        assert records[0].removed == 1

    def test_update_with_invalid_payload_keeps_record(self, client) -> None:
        resp = client.put(user_url(SEEDED_ID), json=_payload(dateOfBirth="not-a-date"))

        assert resp.status_code == 422
        assert client.get(user_url(SEEDED_ID)).get_json()["firstName"] == "Smith"


class TestDeleteUser:
    def test_delete_then_get_returns_404(self, client) -> None:
        resp = client.delete(user_url(SEEDED_ID))

        assert resp.status_code == 204
        assert resp.data == b""
        follow_up = client.get(user_url(SEEDED_ID))
        assert follow_up.status_code == 404
        assert follow_up.data == b""

    def test_delete_unknown_id_succeeds(self, client, store) -> None:
        resp = client.delete(user_url("abc"))

        assert resp.status_code == 204
        assert len(store) == 2

    def test_delete_is_case_sensitive(self, client) -> None:
        client.put(user_url("abc-id"), json=_payload())

        resp = client.delete(user_url("ABC-ID"))

        assert resp.status_code == 204
        assert client.get(user_url("abc-id")).status_code == 200


def test_unknown_method_returns_problem(client) -> None:
    resp = client.patch(user_url(SEEDED_ID), json={})

    assert resp.status_code == 405
    assert_problem(resp.get_json(), status=405, code="method_not_allowed")


def test_request_id_is_echoed(client) -> None:
    resp = client.get(user_url(SEEDED_ID), headers=json_headers(request_id="req-123"))

    assert resp.headers["X-Request-ID"] == "req-123"


@pytest.mark.parametrize(("case_insensitive", "expected_status"), [(True, 404), (False, 200)])
def test_delete_match_policy_is_configurable(case_insensitive, expected_status) -> None:
    from user_middle import create_app
    from user_middle.core.config import TestingConfig

    class Config(TestingConfig):
        USER_DELETE_MATCH_CASE_INSENSITIVE = case_insensitive

    client = create_app(Config).test_client()
    client.put(user_url("abc-id"), json=_payload())

    client.delete(user_url("ABC-ID"))

    assert client.get(user_url("abc-id")).status_code == expected_status
