import logging

from irods_http.http.http import Http, build_form_post, send
from irods_http.types.metadata import dump_operations
from irods_http.types.options import Options

log = logging.getLogger(__name__)


class Metadata:
    def __init__(self, http: Http):
        self.__http = http

    @property
    def http(self):
        return self.__http

    def modify(self, url, lpath, operations, admin=False):
        """Apply a batch of metadata operations to the object at ``lpath``.

        The operations are sent as a JSON array, so the form is always
        percent-encoded here regardless of the client's options.

        Returns the response body as text.
        """
        operations = list(operations)
        form_data = {
            'op': 'modify_metadata',
            'lpath': lpath,
            'operations': dump_operations(operations),
        }
        if admin:
            form_data['admin'] = 1

        log.debug("Modifying metadata of %s with %d operation(s)", lpath, len(operations))
        options = Options(quote_values=True, encoding=self.http.options.encoding)
        request = build_form_post(form_data, url, self.http.token, options=options)
        return send(request, self.http.session).text
