import pytest

from modules.auth.interfaces import ITokenService
from modules.auth.service import TokenService
from modules.tasks.interfaces import ITaskService
from modules.tasks.service import TaskService


class TestTokenInterface:
    def test_interface_methods_exist(self):
        """ITokenService should define required methods."""
        for method in ["issue_token", "verify_token"]:
            assert hasattr(ITokenService, method)

    def test_token_service_has_interface_methods(self):
        for method in ["issue_token", "verify_token"]:
            assert callable(getattr(TokenService, method))

    def test_runtime_check(self):
        assert isinstance(TokenService("secret"), ITokenService)


class TestTaskInterface:
    @pytest.mark.parametrize(
        "method",
        ["list_tasks", "get_task", "create_task", "update_task", "delete_task"],
    )
    def test_task_service_has_interface_methods(self, method):
        assert hasattr(ITaskService, method)
        assert callable(getattr(TaskService, method))
