# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import subprocess

from hockeydeploy import log
from hockeydeploy.errors import ExportError

STATUS_KEY = 'HOCKEYAPP_DEPLOY_STATUS'
STATUS_SUCCESS = 'success'
STATUS_FAILED = 'failed'
PUBLIC_URL_KEY = 'HOCKEYAPP_DEPLOY_PUBLIC_URL'
BUILD_URL_KEY = 'HOCKEYAPP_DEPLOY_BUILD_URL'
CONFIG_URL_KEY = 'HOCKEYAPP_DEPLOY_CONFIG_URL'


class KeyValueExporter(object):
    '''
    Makes a value available to later build steps. export() raises
    ExportError when the value could not be stored.
    '''

    def export(self, key, value):
        raise NotImplementedError


class EnvmanExporter(KeyValueExporter):
    '''Exports through `envman add`, passing the value on stdin.'''

    def __init__(self, envman='envman'):
        self.envman = envman

    def export(self, key, value):
        try:
            data = value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise ExportError(key, e) from e
        try:
            subprocess.run([self.envman, 'add', '--key', key],
                           input=data,
                           check=True)
        except subprocess.CalledProcessError as e:
            raise ExportError(key, '%s exited with status %d' % (self.envman, e.returncode)) from e
        except OSError as e:
            raise ExportError(key, e) from e


def export_success(exporter, response):
    '''Export the success status and every URL. Any failure propagates.'''
    exporter.export(STATUS_KEY, STATUS_SUCCESS)
    exporter.export(PUBLIC_URL_KEY, response.public_url)
    exporter.export(BUILD_URL_KEY, response.build_url)
    exporter.export(CONFIG_URL_KEY, response.config_url)


def export_failure(exporter):
    # The step is failing anyway, so a broken exporter is only worth a warning.
    try:
        exporter.export(STATUS_KEY, STATUS_FAILED)
    except ExportError as e:
        log.warn(str(e))
