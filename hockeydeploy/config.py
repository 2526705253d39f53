# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import collections

# Step inputs, in the order they are printed at startup.
INPUTS = [
    'apk_path',
    'mapping_path',
    'api_token',
    'app_id',
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

SECRET_INPUTS = frozenset(['api_token'])

Config = collections.namedtuple('Config', INPUTS)
Config.__new__.__defaults__ = ('',) * len(INPUTS)


def normalize_mandatory(value):
    '''
    Map the mandatory input to the form HockeyApp expects. Older versions of
    the step took 'true', newer ones take '1'; everything else means not
    mandatory.
    '''
    if value in ('1', 'true'):
        return '1'
    return '0'


def load_config(environ, overrides=None):
    '''
    Build a Config from the step environment. Entries in overrides that are
    not None take precedence over the environment.
    '''
    values = {}
    for name in INPUTS:
        value = environ.get(name, '')
        if overrides and overrides.get(name) is not None:
            value = overrides[name]
        values[name] = value
    values['mandatory'] = normalize_mandatory(values['mandatory'])
    return Config(**values)


def describe(config):
    '''Return (name, value) pairs for display, with secrets masked.'''
    return [(name, '***' if name in SECRET_INPUTS else getattr(config, name))
            for name in INPUTS]
