"""
회원 도메인 예외

모두 HTTPException 하위 클래스이며, 서비스 계층에서 그대로 raise 하면
app.main 의 전역 핸들러가 공통 에러 바디로 변환합니다.
"""
from fastapi import HTTPException, status


class MemberApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."

    def __init__(self, detail: str = None, headers: dict = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail, headers=headers)


class InvalidInputError(MemberApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "입력값이 올바르지 않습니다."


class InvalidCredentialsError(MemberApiError):
    # 이메일 미존재/비밀번호 불일치를 구분하지 않음
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid email or password."


class UnauthorizedError(MemberApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"


class ForbiddenError(MemberApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "본인 정보만 수정할 수 있습니다."


class MemberNotFoundError(MemberApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "회원 정보를 찾을 수 없습니다."


class DuplicateEmailError(MemberApiError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "이미 존재하는 이메일입니다."


class StoreUnavailableError(MemberApiError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "이미지 저장소에 접근할 수 없습니다."
