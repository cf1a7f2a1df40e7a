from fastapi import HTTPException, Request

# every verb a route answers, so the method guard (not routing) decides on 405
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

def status_body(status: str, message: str):
    return {"status": status, "message": message}

def err(message: str, status: int = 400, headers: dict | None = None):
    raise HTTPException(status_code=status, detail=message, headers=headers)

def allow_only(method: str):
    """
    Use as a route dependency on endpoints registered for ANY_METHOD.
    Any other verb is rejected with 405 before the endpoint runs.
    """
    def _dep(request: Request):
        if request.method != method:
            err(f"Only {method} method is allowed", status=405, headers={"Allow": method})
    return _dep
