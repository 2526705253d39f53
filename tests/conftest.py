# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import pytest

from hockeydeploy.config import Config
from tests.mocks import RecordingExporter


@pytest.fixture
def exporter():
    return RecordingExporter()


@pytest.fixture
def apk(tmp_path):
    path = tmp_path / 'app-release.apk'
    path.write_bytes(b'PK\x03\x04apk-bytes')
    return path


@pytest.fixture
def mapping(tmp_path):
    path = tmp_path / 'mapping.txt'
    path.write_text('com.example.Foo -> a:\n')
    return path


@pytest.fixture
def config(apk):
    return Config(apk_path=str(apk), api_token='secret-token', mandatory='0')
