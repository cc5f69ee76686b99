# brandforge/errors.py

class BrandForgeError(Exception):
    """Base error. `message` is shown to the user as-is."""
    status_code = 500
    default_message = "Something went wrong."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BrandForgeError):
    status_code = 400
    default_message = "Please describe your idea first."


class GenerationError(BrandForgeError):
    status_code = 500
    default_message = "Failed to generate brand."
