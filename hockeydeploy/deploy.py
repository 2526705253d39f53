# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import argparse
import os

from hockeydeploy import log
from hockeydeploy.config import INPUTS, describe, load_config
from hockeydeploy.errors import DeployError
from hockeydeploy.export import EnvmanExporter, export_failure, export_success
from hockeydeploy.upload import upload
from hockeydeploy.validate import validate


def show_config(config):
    log.info('Configs:')
    for name, value in describe(config):
        log.details('%s: %s' % (name, value))


def show_urls(response):
    print()
    if response.public_url:
        log.done('Public URL: %s' % response.public_url)
    if response.build_url:
        log.done('Build (direct download) URL: %s' % response.build_url)
    if response.config_url:
        log.done('Config URL: %s' % response.config_url)


def run(config, exporter, session=None):
    '''
    Validate config, upload the build and export the results. Raises a
    DeployError if any stage fails.
    '''
    show_config(config)
    validate(config)
    log.info('Performing request')
    response = upload(config, session)
    show_urls(response)
    export_success(exporter, response)
    return response


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Upload a build to HockeyApp. Inputs default to the '
                    'environment variable of the same name.')
    for name in INPUTS:
        parser.add_argument('--' + name.replace('_', '-'), dest=name, default=None,
                            help='Overrides $%s' % name)
    parser.add_argument('--envman', default='envman',
                        help='Path to the envman binary used to export results')
    return parser.parse_args(argv)


def main(argv=None, environ=None, exporter=None, session=None):
    args = parse_args(argv)
    if environ is None:
        environ = os.environ
    config = load_config(environ, vars(args))
    if exporter is None:
        exporter = EnvmanExporter(args.envman)
    try:
        run(config, exporter, session)
    except DeployError as e:
        export_failure(exporter)
        log.fail(str(e))
        return 1
    except Exception as e:
        # Anything unexpected still has to leave the failed status behind.
        export_failure(exporter)
        log.fail('Unexpected error: %s: %s' % (type(e).__name__, e))
        return 1
    return 0
