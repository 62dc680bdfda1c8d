"""Unit tests for the command line entry point."""

import json

import pytest

from image_identity.errors import InvalidReferenceError
from image_identity.main import describe_image, main, parse_args


class TestDescribeImage:

    def test_official_image(self):
        assert describe_image('ubuntu:18.10') == {
            'image': 'ubuntu:18.10',
            'registry': 'docker.io',
            'repository': 'library/ubuntu',
            'tag': '18.10',
            'digest': '',
            'full_name': 'docker.io/library/ubuntu:18.10',
            'synonyms': [
                'docker.io/library/ubuntu:18.10',
                'index.docker.io/library/ubuntu:18.10',
                'library/ubuntu:18.10',
                'ubuntu:18.10',
            ],
        }

    def test_other_registry(self):
        description = describe_image('gcr.io/project/app:v1')
        assert description['registry'] == 'gcr.io'
        assert description['repository'] == 'project/app'
        assert description['synonyms'] == ['gcr.io/project/app:v1']

    def test_invalid(self):
        with pytest.raises(InvalidReferenceError):
            describe_image('')


class TestMain:

    def test_prints_json(self, capsys):
        assert main(['ubuntu', 'gcr.io/project/app']) == 0
        output = json.loads(capsys.readouterr().out)
        assert [r['full_name'] for r in output] == ['docker.io/library/ubuntu', 'gcr.io/project/app']

    def test_reports_failures(self, capsys, caplog):
        assert main(['ubuntu', 'Not-Valid']) == 1
        output = json.loads(capsys.readouterr().out)
        assert 'error' in output[1]
        assert 'Error processing image Not-Valid' in caplog.text

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv('IMAGE_IDENTITY_LOG_LEVEL', 'DEBUG')
        assert parse_args(['ubuntu']).log_level == 'DEBUG'

    def test_log_level_flag_overrides_environment(self, monkeypatch):
        monkeypatch.setenv('IMAGE_IDENTITY_LOG_LEVEL', 'DEBUG')
        assert parse_args(['--log-level', 'warning', 'ubuntu']).log_level == 'warning'
