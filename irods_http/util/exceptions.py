import functools
import logging

import requests


log = logging.getLogger(__name__)


class IrodsHttpException(Exception):
    def __init__(self, message, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return self.message
        return '%s: %s' % (self.message, self.cause)

    @staticmethod
    def from_exception(e):
        if isinstance(e, IrodsHttpException):
            return e
        return IrodsHttpException("Unexpected exception: %s" % e, cause=e)


class TransportException(IrodsHttpException):
    """Raised when a request could not be sent or its response not read.

    No response is available when this is raised; the transport error that
    caused it is kept on ``cause`` and chained as ``__cause__``.
    """


def catch_transport_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except requests.exceptions.RequestException as e:
            log.exception(e)
            raise TransportException("Transport failure", cause=e) from e

    return wrapper
