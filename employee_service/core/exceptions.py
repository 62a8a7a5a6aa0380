"""
서비스 계층 예외.

에러로 올리는 건 중복 리소스뿐.
없는 레코드는 ``None``으로 돌려주고, 그걸 어떻게 응답할지는 라우터가 정함.
"""


class ServiceError(Exception):
    """서비스 계층 예외의 베이스 클래스."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateResourceError(ServiceError):
    """unique 필드 값을 이미 다른 레코드가 쓰고 있을 때."""

    def __init__(self, resource_name: str, field_name: str, field_value: object) -> None:
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(
            f"{resource_name} already exists with {field_name} : '{field_value}'"
        )
