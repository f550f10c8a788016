from urllib.parse import quote_plus

from requests.auth import AuthBase

from irods_http.transport.defaults import Defaults


class BearerAuth(AuthBase):
    """Sets `Authorization: Bearer <token>` on a prepared request.

    Attached as the request's own `auth` so neither `session.auth` nor a
    netrc entry can replace the header while the request is prepared.
    """

    def __init__(self, token):
        self.token = token

    def __call__(self, r):
        r.headers["Authorization"] = "%s %s" % (Defaults.auth_scheme, self.token)
        return r


class HttpUtils:
    @staticmethod
    def encode_form(form_data, quote=False):
        """Render a mapping as ``key1=value1&key2=value2``.

        Keys and values go through ``str()``. They are written as-is unless
        ``quote`` is set, in which case both are percent-encoded with
        ``quote_plus``. Pairs keep the mapping's iteration order.
        """
        def render(v):
            return quote_plus(str(v)) if quote else str(v)

        return Defaults.form_separator.join(
            '%s%s%s' % (render(k), Defaults.pair_separator, render(v))
            for k, v in form_data.items()
        )

    @staticmethod
    def default_get_headers(token):
        return {
            "Authorization": "%s %s" % (Defaults.auth_scheme, token),
        }

    @staticmethod
    def default_post_headers(token):
        headers = HttpUtils.default_get_headers(token)
        headers["Content-Type"] = Defaults.form_content_type
        return headers

    @staticmethod
    def append_query(base_url, query):
        # The pairs go before any fragment, after an existing query string
        url, hash_mark, fragment = base_url.partition('#')
        if Defaults.query_separator not in url:
            separator = Defaults.query_separator
        elif url.endswith((Defaults.query_separator, Defaults.form_separator)):
            separator = ''
        else:
            separator = Defaults.form_separator
        return url + separator + query + hash_mark + fragment
