# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import os

from hockeydeploy.errors import ConfigurationError, FilesystemError


def path_exists(path):
    '''
    Return whether path exists. Raises FilesystemError if that could not be
    determined, e.g. because a parent directory is not readable.
    '''
    if not path:
        raise ConfigurationError('No path provided')
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise FilesystemError('Failed to check if %s exists, error: %s' % (path, e)) from e
    return True


def _check_file(kind, path):
    try:
        exists = path_exists(path)
    except FilesystemError as e:
        raise FilesystemError('Failed to check if %s (%s) exist, error: %s'
                              % (kind, path, e.__cause__)) from e.__cause__
    if not exists:
        raise FilesystemError('No %s found to deploy. Specified path was: %s' % (kind, path))


def validate(config):
    if not config.apk_path:
        raise ConfigurationError('Missing required input: apk_path')
    _check_file('apk', config.apk_path)
    if config.mapping_path:
        _check_file('mapping', config.mapping_path)
    if not config.api_token:
        raise ConfigurationError('No App api_token provided as environment variable. Terminating...')
