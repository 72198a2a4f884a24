"""Classification of HTTP responses into invocation outcomes.

The status code alone decides the branch. Every integer status code
reaches exactly one branch; anything outside the known set is an
unrecognized response.
"""

from __future__ import annotations

from http import HTTPStatus

from py_opencpu.types import ErrorKind, Failure, Outcome, Success

NO_CONTENT_MESSAGE = "No content received from the server."
REDIRECTED_MESSAGE = "Response is redirected."


def classify(status_code: int, body: str | None) -> Outcome:
    """Map a response status and body to Success or Failure.

    Args:
        status_code: HTTP status code of the response.
        body: Response body text, or None when the response had none.

    Returns:
        Success carrying the body verbatim for a 200 with content,
        otherwise a Failure of the matching kind.
    """
    # JSON RPC answers a plain 200 with the result in the body, never 201.
    if status_code == HTTPStatus.OK:
        if not body:
            return Failure(ErrorKind.SERVER_UNAVAILABLE, NO_CONTENT_MESSAGE, status_code)
        return Success(body)

    if status_code == HTTPStatus.FOUND:
        return Failure(ErrorKind.TRANSPORT_FAILURE, REDIRECTED_MESSAGE, status_code)

    if status_code == HTTPStatus.BAD_REQUEST:
        return Failure(
            ErrorKind.REQUEST_MALFORMED,
            f"Bad Request: {body or NO_CONTENT_MESSAGE}",
            status_code,
        )

    if status_code in (HTTPStatus.BAD_GATEWAY, HTTPStatus.SERVICE_UNAVAILABLE):
        return Failure(
            ErrorKind.SERVER_UNAVAILABLE,
            f"Server is not responsive ({status_code}).",
            status_code,
        )

    return Failure(
        ErrorKind.UNRECOGNIZED_RESPONSE,
        f"Unrecognized response from the server: {status_code}",
        status_code,
    )
