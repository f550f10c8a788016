from irods_http.http.http import Http, Response, send_form_get, send_form_post
from irods_http.rest.metadata import Metadata
from irods_http.types.metadata import MetadataOperation, ModifyMetadataOperation, dump_operations
from irods_http.types.options import Options
from irods_http.util.exceptions import IrodsHttpException, TransportException

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

lib_version = '0.1.0'
