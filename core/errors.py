"""
Exceptions raised by the registry sync
"""


class RegistryError(Exception):
    """Base class for registry sync failures"""


class ApiError(RegistryError):
    """Remote API answered with an error status or an unexpected payload"""

    def __init__(self, url: str, message: str, status: int | None = None):
        self.url = url
        self.status = status
        detail = f"{status} " if status is not None else ""
        super().__init__(f"{detail}{message} ({url})")


class ImageFetchError(RegistryError):
    """A single logo image could not be downloaded"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Error fetching image: {url} {message}")
