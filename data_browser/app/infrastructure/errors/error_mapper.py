from data_browser.clients.browser_sdk.errors import ApiError

_RETRY_HINT = "Select the page again to retry."


class ErrorMapper:
    _KNOWN_CODES = {
        "TIMEOUT_ERROR": ("The data source took too long to respond.", _RETRY_HINT),
        "NETWORK_ERROR": ("The data source is unreachable.", "Check your connection and select the page again."),
        "INVALID_RESPONSE": ("The data source sent a response that is not a page of rows.", _RETRY_HINT),
    }

    _STATUS_HINTS = {
        404: ("NOT_FOUND", "The requested collection or category does not exist.", "Pick another dataset or category."),
        429: ("RATE_LIMITED", "Too many requests to the data source.", "Wait a moment and select the page again."),
        500: ("SERVER_ERROR", "The data source failed to answer.", _RETRY_HINT),
    }

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if not isinstance(error, ApiError):
            return {
                "code": "INTERNAL_ERROR",
                "message": str(error) or type(error).__name__,
                "details": None,
                "suggestion": _RETRY_HINT,
            }

        code = error.code
        if code in cls._KNOWN_CODES:
            message, suggestion = cls._KNOWN_CODES[code]
        else:
            status_code = error.status_code or -1
            mapped = cls._STATUS_HINTS.get(status_code)
            if mapped is None and status_code >= 500:
                mapped = cls._STATUS_HINTS[500]
            if mapped is not None:
                code, message, suggestion = mapped
            else:
                message, suggestion = error.message, _RETRY_HINT
        return {"code": code, "message": message, "details": error.details, "suggestion": suggestion}

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        payload = cls.to_payload(error)
        return f"[{payload['code']}] {payload['message']} {payload['suggestion']}"
