# api/errors.py
"""Map request validation failures to 400 responses with short messages."""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Path parameters, checked before the body
PATH_MESSAGES = {
    'collection_id': 'invalid collection id',
    'book_id': 'invalid book id',
}

def body_error(message: str):
    """Attach the message reported when a route's request body is invalid."""
    def decorator(endpoint):
        endpoint.body_error = message
        return endpoint
    return decorator

def describe_validation_error(body_message, errors) -> str:
    for error in errors:
        loc = error.get('loc', ())
        if len(loc) > 1 and loc[0] == 'path' and loc[1] in PATH_MESSAGES:
            return PATH_MESSAGES[loc[1]]
    return body_message or 'invalid request'

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    endpoint = request.scope.get('endpoint')
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': describe_validation_error(getattr(endpoint, 'body_error', None), exc.errors())},
    )
