"""
Page-level control flow exceptions.
"""


class PageRedirect(Exception):
    """
    Raised when a page must send the caller elsewhere.

    The application turns it into a 303 redirect to ``location``.
    """

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location
