import logging

import requests

from irods_http.http.httputils import BearerAuth, HttpUtils
from irods_http.transport.defaults import Defaults
from irods_http.types.options import Options
from irods_http.util.exceptions import catch_transport_errors

log = logging.getLogger(__name__)


class Response:
    """
    Composition for requests.Response with delegation
    """

    def __init__(self, response):
        self.__response = response

    def to_native(self):
        content = self.__response.content
        if not content:
            return None

        content_type = self.__response.headers.get('content-type', '')
        if content_type.split(';')[0].strip() == Defaults.json_content_type:
            return self.__response.json()
        else:
            raise ValueError("Unsupported content type")

    @property
    def response(self):
        return self.__response

    def __getattr__(self, attr):
        return getattr(self.__response, attr)


def build_form_post(form_data, base_url, token, options=None):
    options = options or Options()
    form = HttpUtils.encode_form(form_data, quote=options.quote_values)
    return requests.Request(
        'POST', base_url,
        headers=HttpUtils.default_post_headers(token),
        auth=BearerAuth(token),
        data=form.encode(options.get_encoding()))


def build_form_get(form_data, base_url, token, options=None):
    options = options or Options()
    form = HttpUtils.encode_form(form_data, quote=options.quote_values)
    return requests.Request(
        'GET', HttpUtils.append_query(base_url, form),
        headers=HttpUtils.default_get_headers(token),
        auth=BearerAuth(token))


def send(request, session):
    """Send ``request`` once through the caller's ``requests.Session``.

    The url is validated while preparing, so a malformed one raises the
    ``requests`` error directly. Failures while sending raise
    ``TransportException``. The status code is not looked at.
    """
    prepped = session.prepare_request(request)
    log.debug("Sending %s request to %s", prepped.method, prepped.url)
    return Response(_send_prepared(session, prepped))


@catch_transport_errors
def _send_prepared(session, prepped):
    return session.send(prepped)


def send_form_post(form_data, base_url, token, session, options=None):
    request = build_form_post(form_data, base_url, token, options=options)
    return send(request, session).text


def send_form_get(form_data, base_url, token, session, options=None):
    request = build_form_get(form_data, base_url, token, options=options)
    return send(request, session).text


class Http:
    def __init__(self, session, token, options=None):
        self.__session = session
        self.__token = token
        self.__options = options or Options()

    def post_form(self, url, form_data):
        request = build_form_post(form_data, url, self.token, options=self.options)
        return send(request, self.session)

    def get_form(self, url, form_data):
        request = build_form_get(form_data, url, self.token, options=self.options)
        return send(request, self.session)

    @property
    def session(self):
        return self.__session

    @property
    def token(self):
        return self.__token

    @token.setter
    def token(self, value):
        self.__token = value

    @property
    def options(self):
        return self.__options
