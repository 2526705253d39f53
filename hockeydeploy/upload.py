# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import collections
import contextlib
import json
import os

import requests

from hockeydeploy import log
from hockeydeploy.errors import (
    BodyReadError,
    ConfigurationError,
    FilesystemError,
    HTTPStatusError,
    ParseError,
    TransportError,
)

UPLOAD_URL = 'https://rink.hockeyapp.net/api/2/apps/upload'
APP_UPLOAD_URL = 'https://rink.hockeyapp.net/api/2/apps/{app_id}/app_versions/upload'
TOKEN_HEADER = 'X-HockeyAppToken'

FORM_FIELDS = [
    'notes',
    'notes_type',
    'notify',
    'status',
    'mandatory',
    'tags',
    'commit_sha',
    'build_server_url',
    'repository_url',
]
BINARY_FIELD = 'ipa'
MAPPING_FIELD = 'dsym'

RESPONSE_FIELDS = ['config_url', 'public_url', 'build_url']

UploadResponse = collections.namedtuple('UploadResponse', RESPONSE_FIELDS)
UploadResponse.__new__.__defaults__ = ('',) * len(RESPONSE_FIELDS)


def upload_url(app_id):
    if app_id:
        return APP_UPLOAD_URL.format(app_id=app_id)
    return UPLOAD_URL


def form_fields(config):
    return collections.OrderedDict((name, getattr(config, name)) for name in FORM_FIELDS)


def form_files(config):
    files = collections.OrderedDict([(BINARY_FIELD, config.apk_path)])
    if config.mapping_path:
        files[MAPPING_FIELD] = config.mapping_path
    return files


def create_request(url, fields, files):
    '''
    Build a multipart POST to url. fields maps form names to strings, files
    maps form names to paths on disk. The files are read into the body and
    closed before this returns.
    '''
    with contextlib.ExitStack() as stack:
        parts = collections.OrderedDict()
        try:
            for name, path in files.items():
                f = stack.enter_context(open(path, 'rb'))
                # Base name only; the deployed step sent the path as given.
                parts[name] = (os.path.basename(path), f)
            return requests.Request('POST', url, data=fields, files=parts).prepare()
        except OSError as e:
            raise FilesystemError('Failed to create request, error: %s' % e) from e
        except ValueError as e:
            # Fields that cannot be encoded, e.g. undecodable bytes from the environment.
            raise ConfigurationError('Failed to create request, error: %s' % e) from e


def send_request(request, session):
    '''
    Send a prepared request and return the response with its body unread.
    Redirects are not followed; the server should answer directly.
    '''
    try:
        return session.send(request, stream=True, allow_redirects=False)
    except requests.exceptions.RequestException as e:
        raise TransportError('Performing request failed, error: %s' % e) from e


def read_body(response):
    '''Return (content, error) for response, and close it.'''
    try:
        return response.content, None
    except (requests.exceptions.RequestException, OSError) as e:
        return None, e
    finally:
        response.close()


def _show_response(status_code, content):
    log.info('Response:')
    log.details('status code: %d' % status_code)
    log.details('body: %s' % content.decode('utf-8', 'replace'))


def parse_response(content):
    try:
        data = json.loads(content.decode('utf-8'))
    except ValueError as e:
        # UnicodeDecodeError is a ValueError too.
        raise ParseError('Failed to parse response body, error: %s' % e) from e
    if data is None:
        return UploadResponse()
    if not isinstance(data, dict):
        raise ParseError('Failed to parse response body, error: expected a JSON object, got %s'
                         % type(data).__name__)
    values = {}
    for name in RESPONSE_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ParseError('Failed to parse response body, error: %s is not a string' % name)
        values[name] = value
    return UploadResponse(**values)


def interpret_response(status_code, content, read_error=None):
    '''
    Classify a response. Only statuses in [200, 300) are successful; 300
    itself is a failure. The body is parsed only on success.
    '''
    if not 200 <= status_code < 300:
        if read_error is not None:
            log.warn('Failed to read response body, error: %s' % read_error)
        else:
            _show_response(status_code, content)
        raise HTTPStatusError(status_code, content)

    log.done('Request succeeded')
    if read_error is not None:
        raise BodyReadError('Failed to read response body, error: %s' % read_error) from read_error
    _show_response(status_code, content)
    return parse_response(content)


def upload(config, session=None):
    if session is None:
        with requests.Session() as session:
            return upload(config, session)
    request = create_request(upload_url(config.app_id),
                             form_fields(config),
                             form_files(config))
    request.headers[TOKEN_HEADER] = config.api_token
    response = send_request(request, session)
    content, read_error = read_body(response)
    return interpret_response(response.status_code, content, read_error)
