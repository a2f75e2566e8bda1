# datekit/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided CLI arguments (dates, years, etc).
    Should NOT print traceback.
    """
