"""Error types raised while relaying an action to Gemini.

Each error carries the HTTP status the proxy answers with. The message is the
only detail returned to the caller; anything else stays in the server log.
"""


class ProxyError(Exception):
    """Base class for failures the proxy reports as ``{"error": message}``."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidActionError(ProxyError):
    """The requested action is not one of the known actions."""

    status_code = 400

    def __init__(self, action):
        super().__init__("invalid action")
        self.action = action


class MalformedPayloadError(ProxyError):
    """The action is known but its ``data`` does not have the expected shape."""

    status_code = 400


class MissingCredentialError(ProxyError):
    """No Gemini API key is configured on the server."""

    status_code = 500


class DownstreamHTTPError(ProxyError):
    """Gemini answered with a non-2xx status."""

    status_code = 500

    def __init__(self, status: int, body: str):
        super().__init__(f"Gemini API responded with status {status}")
        self.status = status
        self.body = body


class EmptyCandidateError(ProxyError):
    """Gemini answered 2xx but without candidate text."""

    status_code = 500

    def __init__(self):
        super().__init__("Invalid or empty response from Gemini")


class UpstreamError(ProxyError):
    """The Gemini call failed in transport or returned text that is not JSON."""

    status_code = 500
