"""애플리케이션 예외 베이스 클래스."""


class ApplicationError(Exception):
    """모든 애플리케이션 예외의 베이스 클래스.

    Attributes:
        message: 사용자에게 노출되는 메시지
        code: 에러 코드 (응답 body의 code)
        status_code: 매핑될 HTTP 상태 코드
    """

    code: str = "APPLICATION_ERROR"
    status_code: int = 400

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)
