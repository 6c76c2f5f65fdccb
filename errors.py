class SlangBridgeError(Exception):
    """Base class for every SlangBridge failure."""


class DatasetError(SlangBridgeError):
    """The local slang dataset could not be read or has an unknown shape."""


class SourceUnavailable(SlangBridgeError):
    """The external dictionary could not be reached or answered with an error."""


class GenerativeFallbackError(SlangBridgeError):
    """
    Failure of the generative fallback.

    Every subclass carries a stable user-facing `message` and a `hint`
    explaining how to fix it.
    """
    message = "AI translation unavailable"
    hint = "Please check your API key and try again"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class MissingCredential(GenerativeFallbackError):
    message = "No Llama API key found"
    hint = "Please check your .env file configuration"


class AuthFailed(GenerativeFallbackError):
    message = "AI authentication failed - please check your API key"
    hint = "Invalid or expired Llama API key"


class RateLimited(GenerativeFallbackError):
    message = "AI quota exceeded - please check your Llama API account billing"
    hint = "Llama API account needs credits to process requests"


class QuotaExceeded(GenerativeFallbackError):
    message = "AI quota exceeded - please add credits to your Llama API account"
    hint = "Llama API account has no remaining credits"


class Unavailable(GenerativeFallbackError):
    pass
