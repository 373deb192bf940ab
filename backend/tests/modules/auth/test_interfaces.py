from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_interface_methods_exist(self):
        for method in ["decode_token", "validate_token"]:
            assert hasattr(IAuthService, method)

    def test_auth_service_has_interface_methods(self):
        for method in ["decode_token", "validate_token"]:
            assert callable(getattr(AuthService, method))
