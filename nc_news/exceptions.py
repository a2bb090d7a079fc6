class ApiError(Exception):
    """
    요청 처리 중 발생하는 오류의 기본 클래스.
    exception_handler가 `status_code`와 `{"msg": msg}` 응답으로 변환함
    """

    status_code: int = 500
    default_msg: str = "Internal Server Error"

    def __init__(self, msg: str | None = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(ApiError):
    status_code = 400
    default_msg = "Bad Request"


class NotFound(ApiError):
    status_code = 404
    default_msg = "Not Found"


class RouteNotFound(NotFound):
    default_msg = "Route Not Found"


class MethodNotAllowed(ApiError):
    status_code = 405
    default_msg = "Invalid Method"
