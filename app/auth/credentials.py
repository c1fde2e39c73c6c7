from fastapi import Request

DEFAULT_COOKIE_NAME = "auth-token"


def extract_token(request: Request, cookie_name: str = DEFAULT_COOKIE_NAME) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        token = auth.split(" ", 1)[1].strip()
        if token:
            return token
    return request.cookies.get(cookie_name) or None
