# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/


class DeployError(Exception):
    '''Base class for everything that makes the deploy step fail.'''


class ConfigurationError(DeployError):
    '''A required input is missing or invalid.'''


class FilesystemError(DeployError):
    '''A file could not be checked, opened or read.'''


class TransportError(DeployError):
    '''The request never got a response (connection, DNS, TLS).'''


class HTTPStatusError(DeployError):
    '''The server answered with a status outside [200, 300).'''

    def __init__(self, status_code, body=None):
        super().__init__('Performing request failed, status code: %d' % status_code)
        self.status_code = status_code
        self.body = body


class BodyReadError(DeployError):
    pass


class ParseError(DeployError):
    pass


class ExportError(DeployError):
    '''Writing a value to the step environment failed.'''

    def __init__(self, key, message):
        super().__init__('Failed to export %s, error: %s' % (key, message))
        self.key = key
