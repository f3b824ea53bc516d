class AuthProviderNotConfiguredException(Exception):
    """
    Raised when the identity provider settings needed to build a client are missing.
    This is a server configuration fault, not a failed login or signup.
    """

    def __init__(self, *, message: str, setting: str) -> None:
        super().__init__(message)
        self.message: str = message
        self.setting: str = setting
