"""Exception type shared by the whole package."""


class MyGitError(Exception):
    """Raised when a command cannot complete; the message is meant for the user."""