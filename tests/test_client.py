"""Tests for the requests-based client, with a fake session instead of the network."""

import json

import pytest
import requests

from student_records_client import StudentRecordsAPI


class FakeResponse:
    def __init__(self, status_code, body=None, text=None):
        self.status_code = status_code
        if body is not None:
            self.text = json.dumps(body)
        else:
            self.text = text or ""
        self.content = self.text.encode()

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_client(*responses):
    session = FakeSession(*responses)
    return StudentRecordsAPI(base_url="http://api.test/", session=session, timeout=3), session


def test_list_students():
    api, session = make_client(FakeResponse(200, [{"id": 1, "name": "Alice"}]))
    students, error = api.list_students()
    assert error is None
    assert students == [{"id": 1, "name": "Alice"}]
    assert session.calls == [
        {"method": "GET", "url": "http://api.test/students", "json": None, "timeout": 3}
    ]


def test_create_student_sends_payload():
    api, session = make_client(FakeResponse(201, {"id": 1, "name": "Alice"}))
    student, error = api.create_student({"name": "Alice"})
    assert (student, error) == ({"id": 1, "name": "Alice"}, None)
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"] == {"name": "Alice"}


def test_update_student_uses_put():
    api, session = make_client(FakeResponse(200, {"id": 1, "name": "Alicia"}))
    student, error = api.update_student(1, {"name": "Alicia"})
    assert error is None
    assert student["name"] == "Alicia"
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://api.test/students/1"


def test_get_missing_student_reports_404():
    api, _ = make_client(FakeResponse(404, text="Not Found"))
    student, error = api.get_student(9)
    assert student is None
    assert error == {"status_code": 404, "message": "Not Found"}


def test_validation_error_uses_detail():
    api, _ = make_client(FakeResponse(422, {"detail": [{"msg": "bad"}]}))
    student, error = api.create_student({})
    assert student is None
    assert error["status_code"] == 422
    assert "bad" in error["message"]


def test_delete_student():
    api, session = make_client(FakeResponse(204))
    assert api.delete_student(2) == (True, None)
    assert session.calls[0]["method"] == "DELETE"


@pytest.mark.parametrize("method, args", [("list_students", ()), ("delete_student", (1,))])
def test_transport_failure(method, args):
    api, _ = make_client(requests.ConnectionError("refused"))
    result, error = getattr(api, method)(*args)
    assert not result
    assert error == {"status_code": None, "message": "refused"}

