"""
Tests for the requests-based API client
"""

from unittest.mock import Mock

import pytest
import requests

from task_manager_api.client import TaskManagerAPI


@pytest.fixture
def api(client):
    """Client routed through the FastAPI test client"""
    return TaskManagerAPI(base_url=str(client.base_url), session=client)


def _response(status_code, content=b""):
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.url = "http://tasks.local/api/tasks"
    return response


class TestAgainstService:
    """Client calls against a live application"""

    def test_create_list_delete(self, api):
        task, error = api.create_task("Buy milk")
        assert error is None
        assert task["name"] == "Buy milk"

        tasks, error = api.list_tasks()
        assert error is None
        assert tasks == [task]

        deleted, error = api.delete_task(task["id"])
        assert (deleted, error) == (True, None)
        assert api.list_tasks() == ([], None)

    def test_create_without_name(self, api):
        task, error = api.create_task(None)

        assert error is None
        assert task["name"] is None

    def test_versioned_prefix(self, client):
        api = TaskManagerAPI(base_url=str(client.base_url), prefix="/api/v1", session=client)

        task, _ = api.create_task("Versioned")

        assert api.list_tasks() == ([task], None)


class TestErrorHandling:
    """Failures are reported through the error value"""

    def test_connection_error(self):
        session = Mock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        api = TaskManagerAPI(base_url="http://tasks.local", session=session)

        tasks, error = api.list_tasks()

        assert tasks == []
        assert error == {"status_code": None, "message": "connection refused"}

    def test_http_error_uses_detail(self):
        session = Mock()
        session.request.return_value = _response(422, b'{"detail": "bad body"}')
        api = TaskManagerAPI(base_url="http://tasks.local", session=session)

        task, error = api.create_task("x")

        assert task is None
        assert error == {"status_code": 422, "message": "bad body"}

    def test_http_error_with_plain_text_body(self):
        session = Mock()
        session.request.return_value = _response(500, b"Internal Server Error")
        api = TaskManagerAPI(base_url="http://tasks.local", session=session)

        deleted, error = api.delete_task("abc")

        assert deleted is False
        assert error == {"status_code": 500, "message": "Internal Server Error"}

    def test_builds_url_from_base_and_prefix(self):
        session = Mock()
        session.request.return_value = _response(204)
        api = TaskManagerAPI(base_url="http://tasks.local/", session=session, timeout=3)

        api.delete_task("abc")

        session.request.assert_called_once_with(
            method="DELETE",
            url="http://tasks.local/api/tasks/abc",
            json=None,
            timeout=3,
        )

    def test_task_id_is_escaped_in_path(self):
        session = Mock()
        session.request.return_value = _response(204)
        api = TaskManagerAPI(base_url="http://tasks.local", session=session)

        api.delete_task("a/b?c")

        assert session.request.call_args.kwargs["url"] == "http://tasks.local/api/tasks/a%2Fb%3Fc"
