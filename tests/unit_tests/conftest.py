# -*- coding: utf-8 -*-

import pytest

from promises.common import config


@pytest.fixture(autouse=True)
def isolated_config(tmpdir, monkeypatch):
    """Use an empty config, stored in a temporary folder.

    Returns:
        str: path of the temporary config file.
    """
    config_path = str(tmpdir.join('promises.ini'))
    monkeypatch.setattr(config, '_get_config_file_path', lambda: config_path)
    config._config_parser.remove_section('config')
    config._config_parser.add_section('config')
    yield config_path
    config._config_parser.remove_section('config')
    config._config_parser.add_section('config')
